import io
import logging
import mimetypes
from typing import List, Tuple

from django.conf import settings
from django.core.files.base import File
from django.core.files.storage import Storage, default_storage
from django.utils import timezone
from supabase import create_client

logger = logging.getLogger(__name__)

_supabase_client = None


def get_supabase_client():
    global _supabase_client  # noqa: PLW0603
    if _supabase_client is None:
        url = getattr(settings, "SUPABASE_PROJECT_URL", "")
        key = getattr(settings, "SUPABASE_SERVICE_ROLE_KEY", None) or getattr(settings, "SUPABASE_ANON_KEY", "")
        if not url or not key:
            raise RuntimeError("SUPABASE_PROJECT_URL and a service or anon key must be set")
        logger.info("Creating Supabase client for %s", url)
        _supabase_client = create_client(url, key)
    return _supabase_client


def supabase_configured() -> bool:
    return bool(getattr(settings, "SUPABASE_PROJECT_URL", ""))


def select_media_storage():
    """Storage for uploaded images: the Supabase bucket when configured, local files otherwise."""
    if supabase_configured():
        return SupabaseMediaStorage()
    return default_storage


class SupabaseMediaStorage(Storage):
    """Django Storage backend for a public Supabase Storage bucket."""

    def __init__(self, bucket: str = "", base_url: str = "") -> None:
        super().__init__()
        self.bucket: str = bucket or getattr(settings, "SUPABASE_BUCKET", "portfolio")
        if not self.bucket:
            raise RuntimeError("SUPABASE_BUCKET must be set")
        base = base_url or getattr(settings, "SUPABASE_PROJECT_URL", "")
        if not base:
            raise RuntimeError("SUPABASE_PROJECT_URL must be set to the project API URL")
        self.public_base = f"{base.rstrip('/')}/storage/v1/object/public/{self.bucket}"

    def _bucket(self):
        return get_supabase_client().storage.from_(self.bucket)

    @staticmethod
    def _key(name: str) -> str:
        return name.replace("\\", "/").lstrip("/")

    def _open(self, name: str, mode: str = "rb") -> File:
        resp = self._bucket().download(self._key(name))
        data = getattr(resp, "content", None) or resp
        return File(io.BytesIO(data), name=name)

    def _save(self, name: str, content: File) -> str:
        key = self._key(name)
        if hasattr(content, "seek"):
            content.seek(0)
        data = content.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        ctype = (
            getattr(content, "content_type", None)
            or mimetypes.guess_type(key)[0]
            or "application/octet-stream"
        )
        # Re-uploading an image under the same key replaces it
        self._bucket().upload(key, data, file_options={"content-type": ctype, "upsert": "true"})
        logger.info("Uploaded %s (%d bytes) to bucket %s", key, len(data), self.bucket)
        return name

    def exists(self, name: str) -> bool:
        key = self._key(name)
        prefix, _, target = key.rpartition("/")
        items = self._bucket().list(prefix or None)
        for it in items or []:
            item_name = it.get("name") if isinstance(it, dict) else getattr(it, "name", None)
            if item_name == target:
                return True
        return False

    def url(self, name: str) -> str:
        return f"{self.public_base}/{self._key(name)}"

    def delete(self, name: str) -> None:
        self._bucket().remove([self._key(name)])

    def size(self, name: str) -> int:
        return 0

    def path(self, name: str) -> str:
        raise NotImplementedError("Supabase storage has no local path")

    def listdir(self, path: str) -> Tuple[List[str], List[str]]:
        files: List[str] = []
        for it in self._bucket().list(path or None) or []:
            files.append(it.get("name", "") if isinstance(it, dict) else getattr(it, "name", ""))
        return [], files

    def get_modified_time(self, name: str):
        return timezone.now()

    def get_created_time(self, name: str):
        return timezone.now()

    def get_accessed_time(self, name: str):
        return timezone.now()
