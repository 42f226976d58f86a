"""
OpenAI API Client

Async wrapper around the OpenAI chat completions API for vision prompts
(one prompt plus one product image).

Usage:
    from product_vision.ai import OpenAIClient

    async with OpenAIClient() as client:
        reply = await client.generate_with_image(prompt, image_url, json_mode=True)
"""

import asyncio
import base64
from pathlib import Path
from typing import Optional

import httpx
from openai import AsyncOpenAI, OpenAIError
from rich.console import Console

from config.settings import GenerativeConfig
from product_vision.ai.base import GenerativeProvider
from product_vision.errors import GenerativeConfigurationError
from product_vision.utils.images import (
    ImageInput,
    download_image,
    is_remote_url,
    mime_type_for_path,
)

console = Console()


class OpenAIClient(GenerativeProvider):
    """
    Async client for OpenAI vision chat completions.

    Raises ``GenerativeConfigurationError`` on construction when no API key
    is available; API errors at call time are logged and yield "".
    """

    name = "openai"

    def __init__(self, config: Optional[GenerativeConfig] = None):
        self.config = config or GenerativeConfig()
        if not self.config.api_key:
            raise GenerativeConfigurationError(
                "OpenAI API key not found. Set OPENAI_API_KEY environment variable."
            )
        self._client = AsyncOpenAI(
            api_key=self.config.api_key,
            timeout=self.config.timeout_seconds,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self._client.close()

    async def is_available(self) -> bool:
        """Check if OpenAI API is accessible."""
        try:
            await self._client.models.list()
            return True
        except OpenAIError as e:
            console.print(f"[red]OpenAI API not available: {e}[/red]")
            return False

    async def generate_with_image(
        self,
        prompt: str,
        image: ImageInput,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> str:
        """
        Generate text response from a prompt and image.

        Args:
            prompt: The user prompt describing what to analyze
            image: Image as URL, file path, or bytes
            temperature: Sampling temperature (defaults to config)
            max_tokens: Completion token limit (defaults to config)
            json_mode: Ask the model for a single JSON object

        Returns:
            Generated text response, or "" on failure
        """
        model = self.config.model

        image_content = await self._prepare_image_for_api(image)
        if not image_content:
            console.print("[red]Failed to prepare image[/red]")
            return ""

        kwargs = {
            "model": model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        image_content,
                    ],
                }
            ],
            "temperature": self.config.temperature if temperature is None else temperature,
        }

        # GPT-5.x models use max_completion_tokens instead of max_tokens
        token_limit = max_tokens or self.config.max_tokens
        if model.startswith("gpt-5"):
            kwargs["max_completion_tokens"] = token_limit
        else:
            kwargs["max_tokens"] = token_limit

        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**kwargs)
            return (response.choices[0].message.content or "").strip()

        except OpenAIError as e:
            console.print(f"[red]Error generating vision response: {e}[/red]")
            return ""

    async def _prepare_image_for_api(self, image: ImageInput) -> Optional[dict]:
        """Convert image to OpenAI API format (base64 data URL where possible)."""
        if is_remote_url(image):
            try:
                raw, mime = await download_image(image, timeout=self.config.timeout_seconds)
            except httpx.HTTPError:
                # Let OpenAI fetch it itself
                return {"type": "image_url", "image_url": {"url": image}}
            return _data_url_content(raw, mime)

        if isinstance(image, bytes):
            return _data_url_content(image, "image/jpeg")

        image_path = Path(image)
        if not image_path.exists():
            return None

        image_data = await asyncio.to_thread(image_path.read_bytes)
        return _data_url_content(image_data, mime_type_for_path(image_path))


def _data_url_content(raw: bytes, mime: str) -> dict:
    b64 = base64.b64encode(raw).decode("utf-8")
    return {"type": "image_url", "image_url": {"url": f"data:{mime};base64,{b64}"}}
