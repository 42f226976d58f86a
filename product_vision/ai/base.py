"""Abstract base for generative (multimodal chat) providers."""

import abc
from typing import Optional

from product_vision.utils.images import ImageInput


class GenerativeProvider(abc.ABC):
    """Contract every generative provider implements."""

    name: str = "base"

    @abc.abstractmethod
    async def generate_with_image(
        self,
        prompt: str,
        image: ImageInput,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> str:
        """Send the prompt plus one image and return the raw text reply."""

    async def close(self) -> None:
        """Release network resources; nothing to release by default."""
