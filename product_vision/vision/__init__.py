"""
Vision signal extraction.

Provides the provider interface, the Google Cloud Vision implementation and
the response normalization shared by providers.

Configuration:
- Set GOOGLE_APPLICATION_CREDENTIALS in .env (service account JSON path)
- Optionally GOOGLE_CLOUD_PROJECT_ID
"""

from .base import VisionProvider
from .google_vision import GoogleVisionProvider
from .normalize import build_signals

__all__ = ["GoogleVisionProvider", "VisionProvider", "build_signals"]
