"""Tests for the generative name/description stage."""

import json

import pytest
from conftest import FakeGenerativeProvider, make_signals

from product_vision.ai.product_writer import (
    ProductWriter,
    build_context,
    build_prompt,
    parse_generation_response,
)

LONG_DESCRIPTION = (
    "A pair of black leather clogs with a polished strap detail across the vamp. "
    "The smooth leather upper sits on a sculpted wooden sole."
)


def test_valid_reply() -> None:
    reply = json.dumps({"name": "Black Leather Clogs", "description": LONG_DESCRIPTION})

    candidate = parse_generation_response(reply)

    assert candidate.name == "Black Leather Clogs"
    assert candidate.description == LONG_DESCRIPTION


def test_reply_wrapped_in_prose() -> None:
    reply = 'Sure! Here it is:\n```json\n{"name": "Navy Canvas Sneakers"}\n```'

    candidate = parse_generation_response(reply)

    assert candidate.name == "Navy Canvas Sneakers"
    assert candidate.description is None


def test_long_name_is_dropped_description_kept() -> None:
    reply = json.dumps({"name": "x" * 200, "description": LONG_DESCRIPTION})

    candidate = parse_generation_response(reply)

    assert candidate.name is None
    assert candidate.description == LONG_DESCRIPTION


def test_short_description_is_dropped_name_kept() -> None:
    reply = json.dumps({"name": "Black Clogs", "description": "y" * 30})

    candidate = parse_generation_response(reply)

    assert candidate.name == "Black Clogs"
    assert candidate.description is None


@pytest.mark.parametrize("reply", ["", None, "no json here", "{not: valid}", "[1, 2]"])
def test_unparseable_reply(reply) -> None:
    assert parse_generation_response(reply).is_empty


def test_prompt_mentions_main_product(sneaker_signals) -> None:
    prompt = build_prompt(build_context(sneaker_signals))

    assert "MAIN PRODUCT: Shoe" in prompt
    assert "Dominant colors: Black" in prompt
    assert "Product types/items: sneaker" in prompt


def test_context_without_main_item() -> None:
    signals = make_signals(labels=[("logo", 0.95), ("sky", 0.8)], text="ACME  Studio\nSIZE 42")

    context = build_context(signals)

    assert not context.main_item_found
    assert context.main_product == "product"
    assert context.labels == ["sky"]
    assert context.text == "ACME Studio SIZE 42"
    assert context.potential_brand == "ACME Studio"
    assert "MAIN PRODUCT" not in build_prompt(context)


@pytest.mark.asyncio
async def test_writer_returns_validated_candidate(sneaker_signals) -> None:
    provider = FakeGenerativeProvider(
        reply=json.dumps({"name": "Black Runner Sneakers", "description": LONG_DESCRIPTION})
    )

    candidate = await ProductWriter(provider).write("https://cdn.example.com/p/1.jpg", sneaker_signals)

    assert candidate.name == "Black Runner Sneakers"
    assert len(provider.prompts) == 1


@pytest.mark.asyncio
async def test_writer_swallows_provider_failure(sneaker_signals) -> None:
    provider = FakeGenerativeProvider(error=RuntimeError("rate limited"))

    candidate = await ProductWriter(provider).write("img.jpg", sneaker_signals)

    assert candidate.is_empty
    assert len(provider.prompts) == 1


@pytest.mark.asyncio
async def test_unconfigured_writer(sneaker_signals) -> None:
    writer = ProductWriter()

    assert not writer.is_configured
    assert (await writer.write("img.jpg", sneaker_signals)).is_empty


def test_noise_only_labels_give_placeholder_context() -> None:
    signals = make_signals(labels=[("Logo", 0.95), ("Text", 0.9)], objects=[("Packaging", 0.9)])

    context = build_context(signals)
    prompt = build_prompt(context)

    assert context.main_product == "product"
    assert context.labels == []
    assert context.objects == []
    assert "Focus on the main product (product)" in prompt
    assert "Logo" not in prompt
