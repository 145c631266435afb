import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import content.storage_backends


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="About",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(blank=True, max_length=120)),
                ("bio", models.TextField(blank=True)),
                (
                    "image",
                    models.ImageField(
                        blank=True,
                        null=True,
                        storage=content.storage_backends.select_media_storage,
                        upload_to="profile/",
                    ),
                ),
                (
                    "image_url",
                    models.CharField(blank=True, help_text="Absolute URL or site-relative path", max_length=500),
                ),
            ],
            options={
                "verbose_name_plural": "about",
                "db_table": "about",
            },
        ),
        migrations.CreateModel(
            name="Achievement",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("date", models.CharField(blank=True, max_length=20)),
                ("issuer", models.CharField(blank=True, max_length=200)),
                ("url", models.URLField(blank=True, max_length=500)),
            ],
            options={
                "db_table": "achievement",
                "ordering": ["-date", "title"],
            },
        ),
        migrations.CreateModel(
            name="Certification",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("issuer", models.CharField(blank=True, max_length=200)),
                ("date", models.CharField(blank=True, max_length=20)),
                ("certificate_url", models.URLField(blank=True, max_length=500)),
            ],
            options={
                "db_table": "certification",
                "ordering": ["-date", "title"],
            },
        ),
        migrations.CreateModel(
            name="Contact",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("phone", models.CharField(blank=True, max_length=40)),
                ("location", models.CharField(blank=True, max_length=120)),
            ],
            options={
                "db_table": "contact",
            },
        ),
        migrations.CreateModel(
            name="CustomSkillCategory",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=80)),
                ("icon", models.CharField(blank=True, help_text="icon key, e.g. hash", max_length=80)),
                ("color", models.CharField(blank=True, help_text="CSS color or hex, e.g. #10b981", max_length=20)),
            ],
            options={
                "verbose_name_plural": "custom skill categories",
                "db_table": "custom_skill_category",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Education",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("degree", models.CharField(max_length=200)),
                ("institution", models.CharField(max_length=200)),
                ("location", models.CharField(blank=True, max_length=120)),
                ("start_year", models.CharField(blank=True, max_length=20)),
                ("end_year", models.CharField(blank=True, max_length=20)),
                ("grade", models.CharField(blank=True, max_length=60)),
                ("specialization", models.CharField(blank=True, max_length=200)),
            ],
            options={
                "db_table": "education",
                "ordering": ["-start_year", "degree"],
            },
        ),
        migrations.CreateModel(
            name="Experience",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("company", models.CharField(max_length=200)),
                ("location", models.CharField(blank=True, max_length=120)),
                ("start_date", models.CharField(blank=True, help_text="YYYY-MM", max_length=40)),
                ("end_date", models.CharField(blank=True, help_text="YYYY-MM, empty while current", max_length=40)),
                ("current", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "experience",
                "ordering": ["-start_date", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ProjectCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=80)),
            ],
            options={
                "verbose_name_plural": "project categories",
                "db_table": "project_category",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="SiteSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("resume_link", models.URLField(blank=True, max_length=500)),
            ],
            options={
                "verbose_name_plural": "site settings",
                "db_table": "site_settings",
            },
        ),
        migrations.CreateModel(
            name="SoftSkill",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=80)),
                (
                    "level",
                    models.PositiveSmallIntegerField(
                        default=75,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                    ),
                ),
            ],
            options={
                "db_table": "soft_skill",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ExperienceDescription",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("description", models.TextField()),
                ("display_order", models.PositiveSmallIntegerField(default=0)),
                (
                    "experience",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="descriptions",
                        to="content.experience",
                    ),
                ),
            ],
            options={
                "db_table": "experience_description",
                "ordering": ["display_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("category", models.CharField(default="Other", max_length=80)),
                ("project_type", models.CharField(blank=True, max_length=80)),
                ("team_type", models.CharField(default="solo", help_text="solo or team", max_length=20)),
                ("description", models.TextField(blank=True)),
                (
                    "image",
                    models.ImageField(
                        blank=True,
                        null=True,
                        storage=content.storage_backends.select_media_storage,
                        upload_to="projects/",
                    ),
                ),
                (
                    "image_url",
                    models.CharField(blank=True, help_text="Absolute URL or site-relative path", max_length=500),
                ),
                ("github", models.URLField(blank=True, max_length=500)),
                ("demo", models.URLField(blank=True, max_length=500)),
                ("linkedin", models.URLField(blank=True, max_length=500)),
                ("date", models.CharField(blank=True, max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "category_fk",
                    models.ForeignKey(
                        blank=True,
                        db_column="category_id",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="projects",
                        to="content.projectcategory",
                    ),
                ),
            ],
            options={
                "db_table": "project",
                "ordering": ["-created_at", "title"],
            },
        ),
        migrations.CreateModel(
            name="ProjectFeature",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("feature", models.CharField(max_length=300)),
                ("display_order", models.PositiveSmallIntegerField(default=0)),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="features",
                        to="content.project",
                    ),
                ),
            ],
            options={
                "db_table": "project_feature",
                "ordering": ["display_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="ProjectTechnology",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("technology", models.CharField(max_length=80)),
                ("display_order", models.PositiveSmallIntegerField(default=0)),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="technologies",
                        to="content.project",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "project technologies",
                "db_table": "project_technology",
                "ordering": ["display_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="TechnicalSkill",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=80)),
                (
                    "level",
                    models.PositiveSmallIntegerField(
                        default=75,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                    ),
                ),
                ("category", models.CharField(default="Custom", max_length=80)),
                (
                    "custom_category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="skills",
                        to="content.customskillcategory",
                    ),
                ),
            ],
            options={
                "db_table": "technical_skill",
                "ordering": ["name"],
            },
        ),
    ]
