"""Abstract base for vision signal providers."""

import abc

from product_vision.models import VisionSignals
from product_vision.utils.images import ImageInput


class VisionProvider(abc.ABC):
    """
    Contract every vision provider implements.

    ``extract`` returns normalized signals. Empty labels, objects, text or
    colors are valid output ("no signal"). Failures are raised as
    ``VisionError`` subclasses so the pipeline can tell a configuration
    problem apart from a transport or analysis failure.
    """

    name: str = "base"

    @abc.abstractmethod
    async def extract(self, image: ImageInput) -> VisionSignals:
        """Run label, object, text and color detection on one image."""
