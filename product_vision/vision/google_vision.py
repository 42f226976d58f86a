"""
Google Cloud Vision provider

Runs the four detections the pipeline needs (labels, localized objects,
OCR text, image properties) concurrently and normalizes the responses.

Configuration:
- GOOGLE_APPLICATION_CREDENTIALS: path to a service account JSON key
  (falls back to Application Default Credentials when unset)
- GOOGLE_CLOUD_PROJECT_ID: optional quota project

Usage:
    from product_vision.vision import GoogleVisionProvider

    provider = GoogleVisionProvider()
    signals = await provider.extract("https://cdn.example.com/sneaker.jpg")
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Any, Optional

import httpx
from google.api_core import exceptions as gcp_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import vision
from rich.console import Console

from config.settings import VisionConfig
from product_vision.errors import (
    VisionAnalysisError,
    VisionConfigurationError,
    VisionError,
    VisionTransportError,
)
from product_vision.models import VisionSignals
from product_vision.utils.images import (
    ImageInput,
    download_image,
    is_remote_url,
    is_storage_uri,
    read_local_image,
)
from product_vision.vision.base import VisionProvider
from product_vision.vision.normalize import build_signals

console = Console()

_CONFIGURATION_ERRORS = (
    gcp_exceptions.PermissionDenied,
    gcp_exceptions.Unauthenticated,
    auth_exceptions.DefaultCredentialsError,
    auth_exceptions.RefreshError,
)

_TRANSPORT_ERRORS = (
    gcp_exceptions.ServiceUnavailable,
    gcp_exceptions.DeadlineExceeded,
    gcp_exceptions.RetryError,
    auth_exceptions.TransportError,
    ConnectionError,
    TimeoutError,
)


def translate_error(exc: Exception) -> VisionError:
    """Map a Google client exception onto the pipeline's vision errors."""
    if isinstance(exc, VisionError):
        return exc
    if isinstance(exc, _CONFIGURATION_ERRORS):
        return VisionConfigurationError(f"Google Vision rejected the credentials: {exc}")
    if isinstance(exc, _TRANSPORT_ERRORS):
        return VisionTransportError(f"Google Vision unreachable: {exc}")
    return VisionAnalysisError(f"Google Vision failed to analyze the image: {exc}")


class GoogleVisionProvider(VisionProvider):
    """
    Vision provider backed by ``google.cloud.vision.ImageAnnotatorClient``.

    The client is built on first use and kept for the life of the provider.
    If building it fails the error is kept too, so every later call fails
    fast with the same ``VisionConfigurationError``.
    """

    name = "google"

    def __init__(self, config: Optional[VisionConfig] = None, client: Any = None):
        self.config = config or VisionConfig()
        self._client = client
        self._client_error: Optional[VisionConfigurationError] = None

    @property
    def is_configured(self) -> bool:
        """Best-effort check without contacting Google."""
        if self._client is not None:
            return True
        if self._client_error is not None:
            return False
        path = self.config.credentials_path
        return bool(path) and Path(path).exists()

    def _get_client(self):
        if self._client is not None:
            return self._client
        if self._client_error is not None:
            raise self._client_error

        try:
            self._client = self._build_client()
        except VisionConfigurationError as e:
            self._client_error = e
            raise
        except (auth_exceptions.GoogleAuthError, ValueError, OSError) as e:
            self._client_error = VisionConfigurationError(
                f"Could not create the Google Vision client: {e}"
            )
            raise self._client_error from e

        return self._client

    def _build_client(self):
        client_options = None
        if self.config.project_id:
            client_options = {"quota_project_id": self.config.project_id}

        path = self.config.credentials_path
        if path:
            if not Path(path).exists():
                raise VisionConfigurationError(
                    f"Google credentials file not found: {path} "
                    "(check GOOGLE_APPLICATION_CREDENTIALS)"
                )
            return vision.ImageAnnotatorClient.from_service_account_file(
                str(path), client_options=client_options
            )

        return vision.ImageAnnotatorClient(client_options=client_options)

    async def extract(self, image: ImageInput) -> VisionSignals:
        client = self._get_client()

        if not is_remote_url(image):
            return await self._annotate(client, await self._inline_or_uri(image))

        by_reference = vision.Image(source=vision.ImageSource(image_uri=image))
        try:
            return await self._annotate(client, by_reference)
        except VisionConfigurationError:
            raise
        except VisionError as e:
            console.print(
                f"[yellow]Vision could not use the image URL ({e}); "
                f"retrying with downloaded bytes[/yellow]"
            )

        try:
            content, _ = await download_image(image, timeout=self.config.download_timeout_seconds)
        except httpx.HTTPError as e:
            raise VisionTransportError(f"Could not download image {image}: {e}") from e

        return await self._annotate(client, vision.Image(content=content))

    async def _inline_or_uri(self, image: ImageInput):
        if isinstance(image, bytes):
            return vision.Image(content=image)
        if is_storage_uri(image):
            return vision.Image(source=vision.ImageSource(image_uri=image))
        try:
            content = await asyncio.to_thread(read_local_image, image)
        except OSError as e:
            raise VisionAnalysisError(str(e)) from e
        return vision.Image(content=content)

    async def _annotate(self, client, image) -> VisionSignals:
        """Issue the four detections concurrently and build the signals."""
        calls = [
            partial(client.label_detection, image=image, max_results=self.config.max_labels),
            partial(client.object_localization, image=image, max_results=self.config.max_objects),
            partial(client.text_detection, image=image),
            partial(client.image_properties, image=image),
        ]

        try:
            labels, objects, text, properties = await asyncio.gather(
                *(asyncio.to_thread(call) for call in calls)
            )
        except Exception as e:
            raise translate_error(e) from e

        for response in (labels, objects, text, properties):
            message = getattr(getattr(response, "error", None), "message", "")
            if message:
                raise VisionAnalysisError(f"Google Vision error: {message}")

        return build_signals(
            label_annotations=labels.label_annotations,
            object_annotations=objects.localized_object_annotations,
            full_text_annotation=text.full_text_annotation,
            image_properties_annotation=properties.image_properties_annotation,
            max_labels=self.config.max_labels,
            max_objects=self.config.max_objects,
            max_dominant_colors=self.config.max_dominant_colors,
        )
