"""Utility modules for product-vision."""

from .images import (
    ImageInput,
    download_image,
    is_remote_url,
    is_storage_uri,
    mime_type_for_path,
    read_local_image,
)

__all__ = [
    "ImageInput",
    "download_image",
    "is_remote_url",
    "is_storage_uri",
    "mime_type_for_path",
    "read_local_image",
]
