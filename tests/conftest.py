import pytest
from django.core.cache import cache
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def isolated_storage(settings, tmp_path):
    settings.PORTFOLIO_SNAPSHOT_PATH = str(tmp_path / "var" / "profileData.json")
    settings.MEDIA_ROOT = str(tmp_path / "media")
    settings.SUPABASE_PROJECT_URL = ""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def snapshot_path(settings):
    return settings.PORTFOLIO_SNAPSHOT_PATH


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(username="admin", password="s3cret-pass", is_staff=True)


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
