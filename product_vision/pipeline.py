"""
Attribute inference pipeline orchestrating vision, rules and generation.

Per image:
    VISION      extract labels / objects / OCR text / colors (mandatory)
    RULES       color names, category match, classifiers, main item (pure)
    GENERATIVE  name + description from the multimodal model (optional)
    MERGE       per-field precedence, then confidence aggregation

Only a vision failure aborts a request; every other stage degrades to
empty values and the rule-based fallback.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from rich.console import Console

from config.settings import PipelineConfig, config
from product_vision.ai.openai_client import OpenAIClient
from product_vision.ai.product_writer import ProductWriter
from product_vision.classifiers.attributes import (
    classify_gender,
    classify_material,
    classify_style,
)
from product_vision.classifiers.category_matcher import match_category
from product_vision.classifiers.features import extract_features
from product_vision.errors import (
    GenerativeConfigurationError,
    PipelineError,
    VisionConfigurationError,
)
from product_vision.loaders.category_loader import CategorySource, create_category_source
from product_vision.models import (
    AnalysisResult,
    CategoryCandidate,
    CategoryRef,
    ConfidenceBreakdown,
    GenerativeCandidate,
    SuggestedCategory,
    VisionSignals,
)
from product_vision.policy import merge_fields, overall_confidence
from product_vision.utils.images import ImageInput
from product_vision.vision.base import VisionProvider
from product_vision.vision.google_vision import GoogleVisionProvider

console = Console()

# Colors reported in the result
RESULT_COLORS = 3


@dataclass
class BatchItemResult:
    """Outcome for one image of a batch: a result or the error that stopped it."""

    image: str
    result: Optional[AnalysisResult] = None
    error: Optional[PipelineError] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


class AttributePipeline:
    """
    Product attribute inference from a single photo.

    Providers are injected; use ``from_config`` to build the default Google
    Vision + OpenAI + Supabase setup.
    """

    def __init__(
        self,
        vision_provider: VisionProvider,
        generative_provider=None,
        category_source: Optional[CategorySource] = None,
        pipeline_config: Optional[PipelineConfig] = None,
        verbose: bool = False,
    ):
        self.config = pipeline_config or config
        self.vision = vision_provider
        self.writer = ProductWriter(generative_provider)
        self.category_source = category_source
        self.verbose = verbose

    @classmethod
    def from_config(
        cls,
        pipeline_config: Optional[PipelineConfig] = None,
        verbose: bool = False,
    ) -> "AttributePipeline":
        """Build the pipeline with the providers the configuration enables."""
        pipeline_config = pipeline_config or config

        generative = None
        if pipeline_config.generative.is_configured:
            try:
                generative = OpenAIClient(pipeline_config.generative)
            except GenerativeConfigurationError as e:
                console.print(f"[dim]Generative stage off: {e}[/dim]")
        elif verbose:
            console.print("[dim]Generative stage off (no OPENAI_API_KEY)[/dim]")

        try:
            category_source = create_category_source(pipeline_config.catalog)
        except ValueError as e:
            console.print(f"[yellow]No category source: {e}[/yellow]")
            category_source = None

        return cls(
            vision_provider=GoogleVisionProvider(pipeline_config.vision),
            generative_provider=generative,
            category_source=category_source,
            pipeline_config=pipeline_config,
            verbose=verbose,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the generative provider, if any."""
        if self.writer.provider is not None:
            await self.writer.provider.close()

    def _phase(self, title: str) -> None:
        if self.verbose:
            console.print(f"\n[bold blue]═══ {title} PHASE ═══[/bold blue]")

    async def load_categories(self) -> list[CategoryCandidate]:
        """Current store categories; empty (with a warning) when unavailable."""
        if self.category_source is None:
            return []
        try:
            return await self.category_source.load_categories()
        except Exception as e:
            console.print(
                f"[yellow]Could not load categories from {self.category_source.name}: {e}[/yellow]"
            )
            return []

    async def analyze(
        self,
        image: ImageInput,
        categories: Optional[list[CategoryCandidate]] = None,
    ) -> AnalysisResult:
        """
        Analyze one product image.

        Args:
            image: Image URL, gs:// URI, local path or bytes
            categories: Store categories; fetched from the category source when None

        Returns:
            A complete AnalysisResult

        Raises:
            VisionError: the vision stage failed (VisionConfigurationError
                when credentials are missing or rejected)
        """
        self._phase("VISION")
        signals = await self.vision.extract(image)
        if self.verbose:
            console.print(
                f"[green]✓ {len(signals.labels)} labels, {len(signals.objects)} objects, "
                f"{len(signals.dominant_colors)} colors[/green]"
            )
            if signals.is_empty:
                console.print("[yellow]Vision found nothing in this image[/yellow]")

        if categories is None:
            categories = await self.load_categories()

        generative = GenerativeCandidate()
        if self.writer.is_configured:
            self._phase("GENERATIVE")
            generative = await self.writer.write(image, signals)
            if self.verbose:
                kept = [f for f in ("name", "description") if getattr(generative, f)]
                console.print(f"[dim]Generative fields kept: {', '.join(kept) or 'none'}[/dim]")

        self._phase("MERGE")
        return self.build_result(signals, categories, generative)

    def build_result(
        self,
        signals: VisionSignals,
        categories: Iterable[CategoryCandidate],
        generative: Optional[GenerativeCandidate] = None,
    ) -> AnalysisResult:
        """Run the pure stages over the signals and assemble the result."""
        generative = generative or GenerativeCandidate()

        category_match = match_category(
            signals, list(categories), threshold=self.config.category_threshold
        )
        merged = merge_fields(signals, generative)

        suggested = None
        if category_match.category is not None:
            suggested = SuggestedCategory(
                id=category_match.category.id,
                name=category_match.category.name,
                confidence=category_match.confidence,
            )

        confidence = ConfidenceBreakdown(
            overall=overall_confidence(
                merged.name.confidence,
                category_match.confidence,
                merged.description.confidence,
            ),
            name=merged.name.confidence,
            category=category_match.confidence,
            description=merged.description.confidence,
        )

        return AnalysisResult(
            name=merged.name.value,
            description=merged.description.value,
            suggested_category=suggested,
            alternatives=[CategoryRef(id=c.id, name=c.name) for c in category_match.alternatives],
            features=extract_features(signals),
            colors=signals.dominant_colors[:RESULT_COLORS],
            style=classify_style(signals).value,
            material=classify_material(signals).value,
            brand=merged.brand.value,
            color=merged.color.value,
            gender=classify_gender(signals).value,
            confidence=confidence,
        )

    async def analyze_batch(
        self,
        images: Iterable[str],
        categories: Optional[list[CategoryCandidate]] = None,
    ) -> list[BatchItemResult]:
        """
        Analyze several images one after another.

        Categories are fetched once for the batch when not given. A vision
        failure on one image is recorded and the batch moves on; a
        configuration failure stops the batch since every image would hit it.
        """
        if categories is None:
            categories = await self.load_categories()

        results = []
        for image in images:
            try:
                result = await self.analyze(image, categories)
                results.append(BatchItemResult(image=image, result=result))
            except VisionConfigurationError:
                raise
            except PipelineError as e:
                console.print(f"[red]✗ {image}: {e}[/red]")
                results.append(BatchItemResult(image=image, error=e))
        return results
