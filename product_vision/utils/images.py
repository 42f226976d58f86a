"""
Image input helpers shared by the vision and generative providers.

An image reaches the pipeline as one of:
    - an http(s) URL (storefront CDN, Supabase Storage, ...)
    - a ``gs://`` Cloud Storage URI
    - a local file path
    - raw bytes
"""

from pathlib import Path
from typing import Union

import httpx

ImageInput = Union[str, Path, bytes]

DOWNLOAD_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "image/webp,image/apng,image/*,*/*;q=0.8",
}

_EXTENSION_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def is_remote_url(image: ImageInput) -> bool:
    return isinstance(image, str) and image.startswith(("http://", "https://"))


def is_storage_uri(image: ImageInput) -> bool:
    return isinstance(image, str) and image.startswith("gs://")


def mime_type_for_path(path: Union[str, Path]) -> str:
    return _EXTENSION_MIME_TYPES.get(Path(path).suffix.lower(), "image/jpeg")


async def download_image(url: str, timeout: float = 30.0) -> tuple[bytes, str]:
    """
    Download an image with browser-like headers.

    Returns:
        (content, mime type); the mime type falls back to image/jpeg when
        the server does not send an image content type.

    Raises:
        httpx.HTTPError: on network failure or a non-2xx status.
    """
    async with httpx.AsyncClient(
        timeout=timeout,
        headers=DOWNLOAD_HEADERS,
        follow_redirects=True,
    ) as client:
        resp = await client.get(url)
        resp.raise_for_status()

    content_type = (resp.headers.get("content-type") or "").split(";")[0].strip().lower()
    mime = content_type if content_type.startswith("image/") and content_type != "image/" else "image/jpeg"
    return resp.content, mime


def read_local_image(path: Union[str, Path]) -> bytes:
    """Read a local image file.

    Raises:
        FileNotFoundError: when the path does not exist.
    """
    image_path = Path(path)
    if not image_path.exists():
        raise FileNotFoundError(f"Image not found: {image_path}")
    return image_path.read_bytes()
