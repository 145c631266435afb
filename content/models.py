import uuid

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .storage_backends import select_media_storage

LEVEL_VALIDATORS = [MinValueValidator(0), MaxValueValidator(100)]


class SingletonModel(models.Model):
    """A table holding at most one row (about, contact, site settings)."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self.pk or not type(self).objects.filter(pk=self.pk).exists():
            if type(self).objects.exists():
                raise ValidationError(
                    f"Only one {type(self).__name__} instance is allowed. Update the existing one instead."
                )
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Return the single row, or None when it has not been created yet."""
        return cls.objects.order_by("-created_at").first()


class About(SingletonModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=120, blank=True)
    bio = models.TextField(blank=True)
    image = models.ImageField(upload_to="profile/", storage=select_media_storage, blank=True, null=True)
    image_url = models.CharField(max_length=500, blank=True, help_text="Absolute URL or site-relative path")

    class Meta:
        db_table = "about"
        verbose_name_plural = "about"

    def __str__(self):
        return self.name or "About"

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        # Keep image_url in step with the uploaded file
        if self.image:
            new_url = self.image.url
            if new_url != self.image_url:
                type(self).objects.filter(pk=self.pk).update(image_url=new_url)
                self.image_url = new_url


class Contact(SingletonModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=40, blank=True)
    location = models.CharField(max_length=120, blank=True)

    class Meta:
        db_table = "contact"

    def __str__(self):
        return self.email or "Contact"


class SiteSettings(SingletonModel):
    resume_link = models.URLField(max_length=500, blank=True)

    class Meta:
        db_table = "site_settings"
        verbose_name_plural = "site settings"

    def __str__(self):
        return "Site settings"


class Education(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    degree = models.CharField(max_length=200)
    institution = models.CharField(max_length=200)
    location = models.CharField(max_length=120, blank=True)
    start_year = models.CharField(max_length=20, blank=True)
    end_year = models.CharField(max_length=20, blank=True)
    grade = models.CharField(max_length=60, blank=True)
    specialization = models.CharField(max_length=200, blank=True)

    class Meta:
        db_table = "education"
        ordering = ["-start_year", "degree"]

    def __str__(self):
        return f"{self.degree} @ {self.institution}"


class Experience(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    company = models.CharField(max_length=200)
    location = models.CharField(max_length=120, blank=True)
    start_date = models.CharField(max_length=40, blank=True, help_text="YYYY-MM")
    end_date = models.CharField(max_length=40, blank=True, help_text="YYYY-MM, empty while current")
    current = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "experience"
        ordering = ["-start_date", "-created_at"]

    def __str__(self):
        return f"{self.title} @ {self.company}"


class ExperienceDescription(models.Model):
    experience = models.ForeignKey(Experience, on_delete=models.CASCADE, related_name="descriptions")
    description = models.TextField()
    display_order = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "experience_description"
        ordering = ["display_order", "id"]

    def __str__(self):
        return self.description[:60]


class CustomSkillCategory(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=80)
    icon = models.CharField(max_length=80, blank=True, help_text="icon key, e.g. hash")
    color = models.CharField(max_length=20, blank=True, help_text="CSS color or hex, e.g. #10b981")

    class Meta:
        db_table = "custom_skill_category"
        ordering = ["name"]
        verbose_name_plural = "custom skill categories"

    def __str__(self):
        return self.name


class TechnicalSkill(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=80)
    level = models.PositiveSmallIntegerField(default=75, validators=LEVEL_VALIDATORS)
    category = models.CharField(max_length=80, default="Custom")
    custom_category = models.ForeignKey(
        CustomSkillCategory,
        on_delete=models.SET_NULL,
        related_name="skills",
        blank=True,
        null=True,
    )

    class Meta:
        db_table = "technical_skill"
        ordering = ["name"]

    def __str__(self):
        return self.name


class SoftSkill(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=80)
    level = models.PositiveSmallIntegerField(default=75, validators=LEVEL_VALIDATORS)

    class Meta:
        db_table = "soft_skill"
        ordering = ["name"]

    def __str__(self):
        return self.name


class ProjectCategory(models.Model):
    name = models.CharField(max_length=80)

    class Meta:
        db_table = "project_category"
        ordering = ["name"]
        verbose_name_plural = "project categories"

    def __str__(self):
        return self.name


class Project(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    # Name kept alongside the foreign key; readers only ever need the name
    category = models.CharField(max_length=80, default="Other")
    category_fk = models.ForeignKey(
        ProjectCategory,
        on_delete=models.PROTECT,
        related_name="projects",
        db_column="category_id",
        blank=True,
        null=True,
    )
    project_type = models.CharField(max_length=80, blank=True)
    team_type = models.CharField(max_length=20, default="solo", help_text="solo or team")
    description = models.TextField(blank=True)
    image = models.ImageField(upload_to="projects/", storage=select_media_storage, blank=True, null=True)
    image_url = models.CharField(max_length=500, blank=True, help_text="Absolute URL or site-relative path")
    github = models.URLField(max_length=500, blank=True)
    demo = models.URLField(max_length=500, blank=True)
    linkedin = models.URLField(max_length=500, blank=True)
    date = models.CharField(max_length=20, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "project"
        ordering = ["-created_at", "title"]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        if self.image:
            new_url = self.image.url
            if new_url != self.image_url:
                type(self).objects.filter(pk=self.pk).update(image_url=new_url)
                self.image_url = new_url


class ProjectTechnology(models.Model):
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name="technologies")
    technology = models.CharField(max_length=80)
    display_order = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "project_technology"
        ordering = ["display_order", "id"]
        verbose_name_plural = "project technologies"

    def __str__(self):
        return self.technology


class ProjectFeature(models.Model):
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name="features")
    feature = models.CharField(max_length=300)
    display_order = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "project_feature"
        ordering = ["display_order", "id"]

    def __str__(self):
        return self.feature


class Certification(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    issuer = models.CharField(max_length=200, blank=True)
    date = models.CharField(max_length=20, blank=True)
    certificate_url = models.URLField(max_length=500, blank=True)

    class Meta:
        db_table = "certification"
        ordering = ["-date", "title"]

    def __str__(self):
        return self.title


class Achievement(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    date = models.CharField(max_length=20, blank=True)
    issuer = models.CharField(max_length=200, blank=True)
    url = models.URLField(max_length=500, blank=True)

    class Meta:
        db_table = "achievement"
        ordering = ["-date", "title"]

    def __str__(self):
        return self.title
