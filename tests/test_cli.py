"""Tests for CLI argument handling."""

from pathlib import Path

import pytest
from conftest import FakeGenerativeProvider, FakeVisionProvider

import main
from product_vision.errors import VisionConfigurationError
from product_vision.loaders import StaticCategorySource
from product_vision.pipeline import AttributePipeline


def test_defaults() -> None:
    args = main.parse_args(["https://cdn.example.com/p/1.jpg"])
    config = main.create_config(args)

    assert args.images == ["https://cdn.example.com/p/1.jpg"]
    assert config.catalog.source == "supabase"
    assert config.category_threshold == 0.3
    assert not config.storage.save_results


def test_category_and_ai_options() -> None:
    args = main.parse_args(
        ["a.jpg", "--categories-file", "cats.json", "--threshold", "0.5", "--no-ai", "--model", "gpt-4o-mini"]
    )
    config = main.create_config(args)

    assert config.catalog.source == "file"
    assert config.catalog.categories_file == Path("cats.json")
    assert config.category_threshold == 0.5
    assert not config.generative.enabled
    assert not config.generative.is_configured
    assert config.generative.model == "gpt-4o-mini"


def test_save_creates_output_dir(tmp_path) -> None:
    out = tmp_path / "out"
    config = main.create_config(main.parse_args(["a.jpg", "--save", "-o", str(out)]))

    assert config.storage.save_results
    assert out.is_dir()


def test_no_images_is_an_error() -> None:
    assert main.main([]) == main.EXIT_FAILED


def _patch_pipeline(monkeypatch, vision):
    generative = FakeGenerativeProvider(reply="{}")
    pipeline = AttributePipeline(
        vision_provider=vision,
        generative_provider=generative,
        category_source=StaticCategorySource([]),
    )
    monkeypatch.setattr(main.AttributePipeline, "from_config", lambda config, verbose=False: pipeline)
    return generative


@pytest.mark.asyncio
async def test_run_closes_generative_provider(monkeypatch, sneaker_signals) -> None:
    generative = _patch_pipeline(monkeypatch, FakeVisionProvider(sneaker_signals))
    args = main.parse_args(["a.jpg", "--json"])

    assert await main.run_analysis(main.create_config(args), args) == main.EXIT_OK
    assert generative.closed


@pytest.mark.asyncio
async def test_unconfigured_vision_exits_2_and_closes(monkeypatch) -> None:
    vision = FakeVisionProvider(error=VisionConfigurationError("no credentials"))
    generative = _patch_pipeline(monkeypatch, vision)
    args = main.parse_args(["a.jpg"])

    assert await main.run_analysis(main.create_config(args), args) == main.EXIT_NOT_CONFIGURED
    assert generative.closed
