import base64
import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from content.images import (
    ImageProcessingError,
    compress_image,
    fit_within,
    generate_placeholder_image,
    is_valid_image_url,
    upload_image,
)


def _upload(width, height, fmt="PNG", mode="RGB", name="pic.png"):
    buf = io.BytesIO()
    Image.new(mode, (width, height), "white").save(buf, format=fmt)
    return SimpleUploadedFile(name, buf.getvalue())


@pytest.mark.parametrize(
    "size, box, expected",
    [
        ((1600, 1200), (800, 600), (800, 600)),
        ((1000, 2000), (800, 600), (300, 600)),
        ((200, 100), (800, 600), (200, 100)),
        ((1200, 300), (400, 300), (400, 100)),
    ],
)
def test_fit_within_keeps_aspect_and_never_upscales(size, box, expected):
    assert fit_within(*size, *box) == expected


def test_compress_image_outputs_jpeg():
    result = compress_image(_upload(1600, 1200, mode="RGBA"), max_width=800, max_height=600, quality=70)
    with Image.open(io.BytesIO(result.read())) as img:
        assert img.format == "JPEG"
        assert img.size == (800, 600)


def test_compress_image_rejects_non_images():
    with pytest.raises(ImageProcessingError):
        compress_image(SimpleUploadedFile("notes.txt", b"plain text"))


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://i.imgur.com/abc.png", True),
        ("https://images.unsplash.com/photo-1", True),
        ("https://raw.githubusercontent.com/u/r/main/a.png", True),
        ("https://my-app.vercel.app/hero.jpg", True),
        ("https://example.com/a.png", False),
        ("not a url", False),
        ("", False),
    ],
)
def test_is_valid_image_url(url, expected):
    assert is_valid_image_url(url) is expected


def test_generate_placeholder_image():
    data_url = generate_placeholder_image(300, 200, "No image")
    assert data_url.startswith("data:image/png;base64,")
    raw = base64.b64decode(data_url.split(",", 1)[1])
    with Image.open(io.BytesIO(raw)) as img:
        assert img.size == (300, 200)
        assert img.getpixel((0, 0)) == (240, 240, 240)


def test_upload_image_profile_limits(settings):
    url = upload_image(_upload(2000, 1000, name="me.png"), kind="profile")
    assert url.startswith(settings.MEDIA_URL + "profile/profile_")
    assert url.endswith("_me.jpg")
    with Image.open(f"{settings.MEDIA_ROOT}/{url[len(settings.MEDIA_URL):]}") as img:
        assert img.size == (800, 400)


def test_upload_image_unknown_kind():
    with pytest.raises(ImageProcessingError):
        upload_image(_upload(10, 10), kind="banners")
