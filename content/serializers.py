from rest_framework import serializers

from .models import CustomSkillCategory, ProjectCategory
from .reconcile import normalize_name

# Section serializers speak the camelCase ProfileData shape on the wire while
# their ``source`` names match the snake_case database columns, so
# ``validated_data`` can go straight to the section writers.


class RecordIdField(serializers.CharField):
    """Database UUID, or a client placeholder such as ``new-1700000000000``."""

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        kwargs.setdefault("allow_blank", True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        return super().to_internal_value(str(data))


def _text(**kwargs):
    kwargs.setdefault("required", False)
    kwargs.setdefault("allow_blank", True)
    kwargs.setdefault("default", "")
    return serializers.CharField(**kwargs)


def _url(**kwargs):
    kwargs.setdefault("required", False)
    kwargs.setdefault("allow_blank", True)
    kwargs.setdefault("default", "")
    return serializers.URLField(max_length=500, **kwargs)


class AboutSerializer(serializers.Serializer):
    name = _text(max_length=120)
    bio = _text()
    image_url = _text(max_length=500)
    # The about form also edits the contact row
    email = serializers.EmailField(required=False, allow_blank=True, write_only=True)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=40, write_only=True)
    location = serializers.CharField(required=False, allow_blank=True, max_length=120, write_only=True)


class ContactInfoSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"blank": "Email is required", "required": "Email is required"})
    phone = _text(max_length=40)
    location = _text(max_length=120)


class EducationSerializer(serializers.Serializer):
    id = RecordIdField()
    degree = serializers.CharField(max_length=200)
    institution = serializers.CharField(max_length=200)
    location = _text(max_length=120)
    startYear = _text(source="start_year", max_length=20)
    endYear = _text(source="end_year", max_length=20)
    grade = _text(max_length=60)
    specialization = _text(max_length=200)


class ExperienceSerializer(serializers.Serializer):
    id = RecordIdField()
    title = serializers.CharField(max_length=200)
    company = serializers.CharField(max_length=200)
    location = _text(max_length=120)
    startDate = serializers.CharField(
        source="start_date", max_length=40, error_messages={"blank": "Start date is required"}
    )
    endDate = _text(source="end_date", max_length=40)
    current = serializers.BooleanField(required=False, default=False)
    description = serializers.ListField(
        child=serializers.CharField(), source="descriptions", required=False, default=list
    )

    def validate(self, attrs):
        if attrs.get("current"):
            attrs["end_date"] = ""
        return attrs


class CustomCategoryRefSerializer(serializers.Serializer):
    id = RecordIdField()
    name = serializers.CharField(max_length=80)
    icon = _text(max_length=80)
    color = _text(max_length=20)


class TechnicalSkillSerializer(serializers.Serializer):
    id = RecordIdField()
    name = serializers.CharField(max_length=80, error_messages={"blank": "All skills must have a name"})
    level = serializers.IntegerField(min_value=0, max_value=100)
    category = _text(max_length=80)
    custom_category_id = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    customCategory = CustomCategoryRefSerializer(source="custom_category", read_only=True)


class SoftSkillSerializer(serializers.Serializer):
    id = RecordIdField()
    name = serializers.CharField(max_length=80, error_messages={"blank": "All skills must have a name"})
    level = serializers.IntegerField(min_value=0, max_value=100)


class SkillsSectionSerializer(serializers.Serializer):
    technical = TechnicalSkillSerializer(many=True, required=False, default=list)
    soft = SoftSkillSerializer(many=True, required=False, default=list)
    customCategories = CustomCategoryRefSerializer(
        many=True, source="custom_categories", required=False, default=list
    )
    timestamp = serializers.IntegerField(read_only=True)


class ProjectSerializer(serializers.Serializer):
    id = RecordIdField()
    title = serializers.CharField(
        min_length=2, max_length=200, error_messages={"min_length": "Title must be at least 2 characters."}
    )
    category = serializers.CharField(max_length=80, error_messages={"blank": "Please select a category."})
    category_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    projectType = _text(source="project_type", max_length=80)
    teamType = serializers.ChoiceField(
        choices=["solo", "team"], source="team_type", required=False, default="solo"
    )
    description = serializers.CharField(
        min_length=10, error_messages={"min_length": "Description must be at least 10 characters."}
    )
    features = serializers.ListField(child=serializers.CharField(max_length=300), required=False, default=list)
    technologies = serializers.ListField(child=serializers.CharField(max_length=80), required=False, default=list)
    image = _text(source="image_url", max_length=500)
    github = serializers.URLField(max_length=500, error_messages={"invalid": "Please enter a valid URL."})
    demo = _url()
    linkedin = _url()
    date = _text(max_length=20)


class ProjectCategoryRefSerializer(serializers.Serializer):
    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(max_length=80)


class ProjectsSectionSerializer(serializers.Serializer):
    items = ProjectSerializer(many=True, required=False, default=list)
    categories = ProjectCategoryRefSerializer(many=True, read_only=True)


class CertificationSerializer(serializers.Serializer):
    id = RecordIdField()
    title = serializers.CharField(max_length=200)
    issuer = serializers.CharField(max_length=200, error_messages={"blank": "Issuer is required"})
    date = _text(max_length=20)
    certificateUrl = _url(source="certificate_url")


class AchievementSerializer(serializers.Serializer):
    id = RecordIdField()
    title = serializers.CharField(max_length=200)
    description = _text()
    date = _text(max_length=20)
    issuer = _text(max_length=200)
    url = _url()


class SiteSettingsSerializer(serializers.Serializer):
    resumeLink = _url(source="resume_link")


# section -> (serializer class, many)
SECTION_SERIALIZERS = {
    "about": (AboutSerializer, False),
    "contact": (ContactInfoSerializer, False),
    "education": (EducationSerializer, True),
    "skills": (SkillsSectionSerializer, False),
    "experience": (ExperienceSerializer, True),
    "projects": (ProjectsSectionSerializer, False),
    "certifications": (CertificationSerializer, True),
    "achievements": (AchievementSerializer, True),
    "settings": (SiteSettingsSerializer, False),
}


class CustomSkillCategorySerializer(serializers.ModelSerializer):
    skill_count = serializers.SerializerMethodField()

    class Meta:
        model = CustomSkillCategory
        fields = ["id", "name", "icon", "color", "skill_count"]
        read_only_fields = ["skill_count"]

    def get_skill_count(self, obj: CustomSkillCategory):
        return obj.skills.count()

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Category name is required")
        clash = CustomSkillCategory.objects.filter(name__iexact=value)
        if self.instance is not None:
            clash = clash.exclude(pk=self.instance.pk)
        if clash.exists():
            raise serializers.ValidationError("A category with this name already exists")
        return value


class ProjectCategorySerializer(serializers.ModelSerializer):
    project_count = serializers.SerializerMethodField()

    class Meta:
        model = ProjectCategory
        fields = ["id", "name", "project_count"]
        read_only_fields = ["project_count"]

    def get_project_count(self, obj: ProjectCategory):
        return obj.projects.count()

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Category name cannot be empty")
        others = ProjectCategory.objects.all()
        if self.instance is not None:
            others = others.exclude(pk=self.instance.pk)
        if any(normalize_name(c.name) == normalize_name(value) for c in others):
            raise serializers.ValidationError("A category with this name already exists")
        return value


class ContactMessageSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    email = serializers.EmailField()
    message = serializers.CharField(max_length=2000, allow_blank=False)


class ImageUploadSerializer(serializers.Serializer):
    file = serializers.ImageField()
    kind = serializers.ChoiceField(choices=["projects", "profile"], default="projects")


class StatusSerializer(serializers.Serializer):
    database = serializers.BooleanField()
    snapshot = serializers.BooleanField()
