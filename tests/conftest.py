"""Shared fixtures: signal builders, fake providers, store categories."""

from typing import Optional

import pytest

from product_vision.ai.base import GenerativeProvider
from product_vision.models import CategoryCandidate, ColorSample, VisionSignals, VisionTerm
from product_vision.vision.base import VisionProvider


def make_signals(
    labels=(),
    objects=(),
    text: str = "",
    dominant_colors=(),
    color_samples=(),
) -> VisionSignals:
    """Build signals from ``(term, score)`` pairs and ``(r, g, b)`` samples."""
    return VisionSignals(
        labels=[VisionTerm(term=t, score=s) for t, s in labels],
        objects=[VisionTerm(term=t, score=s) for t, s in objects],
        text=text,
        dominant_colors=list(dominant_colors),
        color_samples=[ColorSample(rgb=rgb, score=0.5) for rgb in color_samples],
    )


class FakeVisionProvider(VisionProvider):
    name = "fake"

    def __init__(self, signals: Optional[VisionSignals] = None, error: Optional[Exception] = None):
        self.signals = signals or VisionSignals()
        self.error = error
        self.calls = []

    async def extract(self, image):
        self.calls.append(image)
        if self.error is not None:
            raise self.error
        return self.signals


class FakeGenerativeProvider(GenerativeProvider):
    name = "fake-llm"

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts = []
        self.closed = False

    async def generate_with_image(self, prompt, image, *, temperature=None, max_tokens=None, json_mode=False):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self):
        self.closed = True


@pytest.fixture
def store_categories() -> list[CategoryCandidate]:
    return [
        CategoryCandidate(id="1", name="shoes", slug="shoes"),
        CategoryCandidate(id="2", name="clothes", slug="clothes"),
    ]


@pytest.fixture
def sneaker_signals() -> VisionSignals:
    return make_signals(
        labels=[("sneaker", 0.92), ("logo", 0.95)],
        objects=[("Shoe", 0.88)],
        text="",
        dominant_colors=["#1a1a1a"],
    )
