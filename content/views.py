from django.db import transaction
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import filters, status, viewsets
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from . import services
from .images import ImageProcessingError, upload_image
from .models import CustomSkillCategory, ProjectCategory
from .serializers import (
    ContactMessageSerializer,
    CustomSkillCategorySerializer,
    ImageUploadSerializer,
    ProjectCategorySerializer,
    StatusSerializer,
)
from .tasks import send_contact_email

SECTION_PARAMETER = OpenApiParameter(
    "section",
    OpenApiTypes.STR,
    OpenApiParameter.PATH,
    enum=list(services.SECTIONS),
)


def _result_response(result: services.DataResult, status_code=status.HTTP_200_OK) -> Response:
    return Response(
        {"data": result.data, "source": result.source, "warning": result.warning},
        status=status_code,
    )


class PortfolioView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return _result_response(services.get_profile_data())


class SectionView(APIView):
    @extend_schema(parameters=[SECTION_PARAMETER], responses={200: OpenApiTypes.OBJECT})
    def get(self, request, section):
        return _result_response(services.get_section(section))

    @extend_schema(parameters=[SECTION_PARAMETER], request=OpenApiTypes.OBJECT, responses={200: OpenApiTypes.OBJECT})
    def put(self, request, section):
        return _result_response(services.save_section(section, request.data))


class CustomSkillCategoryViewSet(viewsets.ModelViewSet):
    queryset = CustomSkillCategory.objects.all()
    serializer_class = CustomSkillCategorySerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["name"]
    ordering_fields = ["name"]

    def perform_create(self, serializer):
        serializer.instance = services.create_custom_category(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = services.update_custom_category(serializer.instance.pk, **serializer.validated_data)

    def perform_destroy(self, instance):
        services.delete_custom_category(instance.pk)


class ProjectCategoryViewSet(viewsets.ModelViewSet):
    queryset = ProjectCategory.objects.all()
    serializer_class = ProjectCategorySerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["name"]
    ordering_fields = ["name", "id"]

    def perform_update(self, serializer):
        with transaction.atomic():
            category = serializer.save()
            category.projects.update(category=category.name)

    def perform_destroy(self, instance):
        services.delete_project_category(instance)


class StatusView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: StatusSerializer})
    def get(self, request):
        payload = {
            "database": services.is_database_available(),
            "snapshot": services.get_snapshot_store().exists(),
        }
        return Response(StatusSerializer(payload).data)


class ImageUploadView(APIView):
    permission_classes = [IsAdminUser]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(request=ImageUploadSerializer, responses={201: OpenApiTypes.OBJECT})
    def post(self, request):
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            url = upload_image(data["file"], kind=data["kind"])
        except ImageProcessingError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response({"url": url, "kind": data["kind"]}, status=status.HTTP_201_CREATED)


class ContactThrottle(ScopedRateThrottle):
    scope = "contact"


class ContactView(APIView):
    throttle_classes = [ContactThrottle]
    throttle_scope = "contact"
    permission_classes = [AllowAny]

    @extend_schema(request=ContactMessageSerializer, responses={202: None})
    def post(self, request):
        serializer = ContactMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        send_contact_email.delay(data["name"], data["email"], data["message"])
        return Response(status=status.HTTP_202_ACCEPTED)
