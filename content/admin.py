from django.contrib import admin

from .models import (
    About,
    Achievement,
    Certification,
    Contact,
    CustomSkillCategory,
    Education,
    Experience,
    ExperienceDescription,
    Project,
    ProjectCategory,
    ProjectFeature,
    ProjectTechnology,
    SiteSettings,
    SoftSkill,
    TechnicalSkill,
)


class SingletonAdmin(admin.ModelAdmin):
    def has_add_permission(self, request):
        return not self.model.objects.exists()


@admin.register(About)
class AboutAdmin(SingletonAdmin):
    list_display = ("name", "image_url", "updated_at")
    readonly_fields = ("image_url",)


@admin.register(Contact)
class ContactAdmin(SingletonAdmin):
    list_display = ("email", "phone", "location")


@admin.register(SiteSettings)
class SiteSettingsAdmin(SingletonAdmin):
    list_display = ("resume_link", "updated_at")


@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ("degree", "institution", "start_year", "end_year")
    search_fields = ("degree", "institution", "specialization")


class ExperienceDescriptionInline(admin.TabularInline):
    model = ExperienceDescription
    extra = 1


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ("title", "company", "start_date", "end_date", "current")
    list_filter = ("current", "company")
    inlines = [ExperienceDescriptionInline]


@admin.register(CustomSkillCategory)
class CustomSkillCategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "icon", "color")
    search_fields = ("name",)


@admin.register(TechnicalSkill)
class TechnicalSkillAdmin(admin.ModelAdmin):
    list_display = ("name", "level", "category", "custom_category")
    list_filter = ("category",)
    search_fields = ("name",)


@admin.register(SoftSkill)
class SoftSkillAdmin(admin.ModelAdmin):
    list_display = ("name", "level")
    search_fields = ("name",)


@admin.register(ProjectCategory)
class ProjectCategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name")
    search_fields = ("name",)


class ProjectTechnologyInline(admin.TabularInline):
    model = ProjectTechnology
    extra = 1


class ProjectFeatureInline(admin.TabularInline):
    model = ProjectFeature
    extra = 1


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "team_type", "date", "image_url")
    list_filter = ("category", "team_type")
    search_fields = ("title", "description")
    readonly_fields = ("image_url",)
    inlines = [ProjectTechnologyInline, ProjectFeatureInline]


@admin.register(Certification)
class CertificationAdmin(admin.ModelAdmin):
    list_display = ("title", "issuer", "date")
    search_fields = ("title", "issuer")


@admin.register(Achievement)
class AchievementAdmin(admin.ModelAdmin):
    list_display = ("title", "issuer", "date")
    search_fields = ("title", "issuer", "description")
