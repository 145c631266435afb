import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from content import storage_backends
from content.storage_backends import SupabaseMediaStorage, select_media_storage


class FakeBucket:
    def __init__(self):
        self.objects = {}
        self.options = {}

    def upload(self, key, data, file_options=None):
        self.objects[key] = data
        self.options[key] = file_options

    def download(self, key):
        return self.objects[key]

    def list(self, prefix=None):
        names = []
        for key in self.objects:
            folder, _, name = key.rpartition("/")
            if (folder or None) == prefix:
                names.append({"name": name})
        return names

    def remove(self, keys):
        for key in keys:
            self.objects.pop(key, None)


class FakeStorageApi:
    def __init__(self, bucket):
        self.bucket = bucket
        self.requested = []

    def from_(self, name):
        self.requested.append(name)
        return self.bucket


class FakeClient:
    def __init__(self):
        self.storage = FakeStorageApi(FakeBucket())


@pytest.fixture
def fake_client(monkeypatch):
    client = FakeClient()
    monkeypatch.setattr(storage_backends, "get_supabase_client", lambda: client)
    return client


def test_select_media_storage_defaults_to_local(settings):
    settings.SUPABASE_PROJECT_URL = ""
    assert select_media_storage() is default_storage


def test_select_media_storage_uses_supabase_when_configured(settings):
    settings.SUPABASE_PROJECT_URL = "https://abc.supabase.co"
    storage = select_media_storage()
    assert isinstance(storage, SupabaseMediaStorage)
    assert storage.public_base == "https://abc.supabase.co/storage/v1/object/public/portfolio"


def test_supabase_storage_round_trip(fake_client):
    storage = SupabaseMediaStorage(bucket="media", base_url="https://abc.supabase.co/")
    name = storage.save("projects/project_1_demo.jpg", ContentFile(b"jpeg-bytes"))

    bucket = fake_client.storage.bucket
    assert bucket.objects["projects/project_1_demo.jpg"] == b"jpeg-bytes"
    assert bucket.options["projects/project_1_demo.jpg"]["content-type"] == "image/jpeg"
    assert fake_client.storage.requested[-1] == "media"
    assert storage.exists(name)
    assert storage.open(name).read() == b"jpeg-bytes"
    assert storage.url(name) == "https://abc.supabase.co/storage/v1/object/public/media/projects/project_1_demo.jpg"

    storage.delete(name)
    assert not storage.exists(name)
