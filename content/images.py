import base64
import io
import logging
import os
import time
from typing import Optional
from urllib.parse import urlparse

from django.core.files.base import ContentFile
from django.utils.text import get_valid_filename
from PIL import Image, ImageDraw, ImageFont, ImageOps, UnidentifiedImageError

from .storage_backends import select_media_storage

logger = logging.getLogger(__name__)

# Hosts known to serve images with permissive CORS headers
ALLOWED_IMAGE_DOMAINS = [
    "imgur.com",
    "i.imgur.com",
    "cloudinary.com",
    "res.cloudinary.com",
    "unsplash.com",
    "images.unsplash.com",
    "githubusercontent.com",
    "raw.githubusercontent.com",
    "picsum.photos",
    "placehold.it",
    "placekitten.com",
    "dummyimage.com",
    "loremflickr.com",
    "vercel.app",
]

# kind -> (max_width, max_height, quality)
UPLOAD_PROFILES = {
    "projects": (400, 300, 50),
    "profile": (800, 600, 70),
}


class ImageProcessingError(ValueError):
    pass


def fit_within(width: int, height: int, max_width: int, max_height: int):
    """Scale down to fit the box keeping the aspect ratio; never upscale."""
    if width > max_width:
        height = round(height * max_width / width)
        width = max_width
    if height > max_height:
        width = round(width * max_height / height)
        height = max_height
    return max(width, 1), max(height, 1)


def compress_image(file, max_width: int = 800, max_height: int = 600, quality: int = 70) -> ContentFile:
    """Re-encode an uploaded image as a JPEG no larger than the given box."""
    try:
        file.seek(0)
    except (AttributeError, OSError):
        pass
    try:
        with Image.open(file) as img:
            img = ImageOps.exif_transpose(img)
            if img.mode not in ("RGB", "L"):
                img = img.convert("RGB")
            size = fit_within(img.width, img.height, max_width, max_height)
            if size != (img.width, img.height):
                img = img.resize(size, Image.LANCZOS)
            buf = io.BytesIO()
            img.save(buf, format="JPEG", quality=quality, optimize=True)
    except (UnidentifiedImageError, OSError) as e:
        logger.error("Image compression failed: %s", e)
        raise ImageProcessingError("Image loading failed") from e
    return ContentFile(buf.getvalue())


def is_valid_image_url(url: Optional[str]) -> bool:
    try:
        hostname = urlparse(url or "").hostname
    except ValueError:
        return False
    if not hostname:
        return False
    return any(domain in hostname for domain in ALLOWED_IMAGE_DOMAINS)


def generate_placeholder_image(width: int, height: int, text: str) -> str:
    """Grey PNG with centred text, as a data URL."""
    img = Image.new("RGB", (max(int(width), 1), max(int(height), 1)), "#f0f0f0")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    left, top, right, bottom = draw.textbbox((0, 0), text or "", font=font)
    x = (img.width - (right - left)) / 2
    y = (img.height - (bottom - top)) / 2
    draw.text((x, y), text or "", fill="#888888", font=font)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def build_upload_name(kind: str, filename: str) -> str:
    stem = get_valid_filename(os.path.basename(filename or "image")) or "image"
    # Content is always re-encoded as JPEG
    stem = f"{os.path.splitext(stem)[0] or 'image'}.jpg"
    prefix = "project" if kind == "projects" else "profile"
    return f"{kind}/{prefix}_{int(time.time() * 1000)}_{stem}"


def upload_image(file, kind: str = "projects") -> str:
    """Compress and store an image; returns its public URL."""
    if kind not in UPLOAD_PROFILES:
        raise ImageProcessingError(f"Unknown image kind: {kind}")
    max_width, max_height, quality = UPLOAD_PROFILES[kind]
    compressed = compress_image(file, max_width=max_width, max_height=max_height, quality=quality)
    storage = select_media_storage()
    name = storage.save(build_upload_name(kind, getattr(file, "name", "")), compressed)
    url = storage.url(name)
    logger.info("Uploaded %s image to %s", kind, name)
    return url
