"""
Generative stage (optional)

Provides the OpenAI-backed product name/description writer.

Configuration:
- Set OPENAI_API_KEY in .env file
- Optionally OPENAI_VISION_MODEL (default: gpt-4o)

Without an API key the stage is skipped and the rule-based writer is used.
"""

from .base import GenerativeProvider
from .openai_client import OpenAIClient
from .product_writer import (
    GENERATIVE_CONFIDENCE,
    GenerationContext,
    ProductWriter,
    build_context,
    build_prompt,
    parse_generation_response,
)

__all__ = [
    "GENERATIVE_CONFIDENCE",
    "GenerationContext",
    "GenerativeProvider",
    "OpenAIClient",
    "ProductWriter",
    "build_context",
    "build_prompt",
    "parse_generation_response",
]
