"""
Product Writer - generative name + description

One vision chat call per image returns both the product name and the
description as a JSON object. The prompt is grounded with what the vision
stage already found (main item, confident labels, objects, colors, OCR
text) so the model focuses on the product rather than the backdrop.

Usage:
    from product_vision.ai import OpenAIClient, ProductWriter

    writer = ProductWriter(OpenAIClient())
    candidate = await writer.write(image_url, signals)
    # GenerativeCandidate(name="Black Suede Buckle Mules", description="...")

Validation:
- reply is not a JSON object  -> name and description both None
- name longer than 150 chars  -> name None, description kept
- description under 50 chars  -> description None, name kept
"""

import json
import re
from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console

from product_vision.ai.base import GenerativeProvider
from product_vision.classifiers.attributes import classify_material
from product_vision.classifiers.brand import brand_candidate_tokens
from product_vision.classifiers.main_item import (
    PLACEHOLDER_ITEM,
    identify_main_item,
    is_non_fashion,
)
from product_vision.color_namer import hex_colors_to_names
from product_vision.models import GenerativeCandidate, VisionSignals
from product_vision.utils.images import ImageInput

console = Console()

# Fields that survive validation are trusted above the rule-based output
GENERATIVE_CONFIDENCE = 0.9

HIGH_CONFIDENCE = 0.7
MAX_FASHION_LABELS = 5
MAX_OBJECTS = 5
MAX_COLORS = 3


# =============================================================================
# PROMPT CONTEXT
# =============================================================================


@dataclass
class GenerationContext:
    """What the vision stage found, condensed for the prompt."""

    main_product: str = PLACEHOLDER_ITEM
    main_item_found: bool = False
    labels: list[str] = field(default_factory=list)
    objects: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    material: Optional[str] = None
    text: str = ""
    potential_brand: Optional[str] = None


def build_context(signals: VisionSignals) -> GenerationContext:
    main_item = identify_main_item(signals)
    labels = [
        l.term
        for l in signals.labels
        if l.score > HIGH_CONFIDENCE and not is_non_fashion(l.term)
    ][:MAX_FASHION_LABELS]

    text = " ".join(signals.text.split())
    brand_tokens = brand_candidate_tokens(text)

    return GenerationContext(
        main_product=main_item.item if main_item else PLACEHOLDER_ITEM,
        main_item_found=main_item is not None,
        labels=labels,
        objects=[
            o.term
            for o in signals.objects
            if o.score > HIGH_CONFIDENCE and not is_non_fashion(o.term)
        ][:MAX_OBJECTS],
        colors=hex_colors_to_names(signals.dominant_colors[:MAX_COLORS]),
        material=classify_material(signals).value,
        text=text,
        potential_brand=" ".join(brand_tokens[:2]) or None,
    )


def build_prompt(context: GenerationContext) -> str:
    """Combined name + description prompt for one image."""
    detected = []
    if context.main_item_found:
        detected.append(
            f"- **MAIN PRODUCT: {context.main_product}** "
            "(This is the primary fashion item - focus on this item)"
        )
    detected.append(f"- Product types/items: {', '.join(context.labels) or 'Not specified'}")
    detected.append(f"- Objects detected: {', '.join(context.objects) or 'None'}")
    detected.append(f"- Dominant colors: {', '.join(context.colors) or 'Not specified'}")
    if context.material:
        detected.append(f"- Likely material: {context.material}")
    if context.text:
        detected.append(f"- Text/brand visible in image: {context.text}")
    if context.potential_brand:
        detected.append(f"- Potential brand name: {context.potential_brand}")

    brand_example = context.potential_brand or "brand name"
    main_product = context.main_product

    return f"""Analyze this product image carefully and generate both a product name and description for an e-commerce website.

Detected information from image analysis:
{chr(10).join(detected)}

Generate the following in JSON format:
{{
  "name": "An accurate, descriptive product name following e-commerce naming conventions. RULES: 1) If a brand name or logo text is visible (like '{brand_example}'), include it (e.g., 'Toga Virilis Strap-Detail Clogs'). 2) Use the MOST SPECIFIC product type you can identify (e.g., 'clogs', 'mules', 'loafers', 'sneakers' - NOT generic 'shoes'). 3) Include distinctive design features if clearly visible (e.g., 'strap-detail', 'buckle', 'slip-on', 'lace-up'). 4) Judge the material from its visible TEXTURE: smooth leather (glossy), suede (matte fuzzy), nubuck (matte smooth), canvas, synthetic. 5) Include the color if clearly visible, using readable names like 'Black' or 'Navy', never hex codes. 6) Pattern: [Brand] [Feature] [Product Type], or [Color] [Material] [Feature] [Product Type] when no brand is visible. 7) 3-6 words. Examples: 'Toga Virilis Strap-Detail Clogs', 'Black Suede Buckle Mules', 'Navy Canvas Sneakers'.",
  "description": "A detailed product description (4-6 sentences) that focuses on the main product ({main_product}), describes what is visible (details, style, design elements, materials), describes the material texture accurately (e.g., 'matte suede', 'smooth leather', 'textured canvas'), names the colors in readable words, mentions branding only if it is part of the product design, mentions distinctive features (buckles, straps, closures) and the overall style, and is professional and suitable for a fashion e-commerce site."
}}

IMPORTANT:
- Return ONLY valid JSON, no additional text or explanation
- The name should be 3-6 words
- The description should be 4-6 sentences
- Focus on the main product ({main_product}), ignore non-product elements
- If a brand name is visible in text, include it in the name
- Use specific product type names (clogs, mules, loafers) not generic terms
- Use readable color names, not hex codes"""


# =============================================================================
# RESPONSE PARSING
# =============================================================================


def parse_generation_response(response: Optional[str]) -> GenerativeCandidate:
    """
    Parse and validate the model reply.

    Never raises: anything that is not a JSON object gives an empty
    candidate, and each field is length-checked on its own.
    """
    if not response:
        return GenerativeCandidate()

    json_match = re.search(r"\{[\s\S]*\}", response)
    if not json_match:
        console.print("[yellow]No JSON found in generative response[/yellow]")
        return GenerativeCandidate()

    try:
        data = json.loads(json_match.group())
    except json.JSONDecodeError as e:
        console.print(f"[yellow]Generative JSON parse error: {e}[/yellow]")
        return GenerativeCandidate()

    if not isinstance(data, dict):
        return GenerativeCandidate()

    candidate = GenerativeCandidate(name=data.get("name"), description=data.get("description"))

    if isinstance(data.get("name"), str) and data["name"].strip() and candidate.name is None:
        console.print("[yellow]Generated name too long, discarded[/yellow]")
    if isinstance(data.get("description"), str) and candidate.description is None:
        console.print("[yellow]Generated description too short, discarded[/yellow]")

    return candidate


# =============================================================================
# STAGE
# =============================================================================


class ProductWriter:
    """Generative fallback stage; a no-op without a provider."""

    def __init__(self, provider: Optional[GenerativeProvider] = None):
        self.provider = provider

    @property
    def is_configured(self) -> bool:
        return self.provider is not None

    async def write(self, image: ImageInput, signals: VisionSignals) -> GenerativeCandidate:
        """
        Ask the provider for a name and description.

        Returns an empty candidate when unconfigured, when the provider
        raises, or when the reply does not validate. Not retried.
        """
        if self.provider is None:
            return GenerativeCandidate()

        prompt = build_prompt(build_context(signals))

        try:
            response = await self.provider.generate_with_image(prompt, image, json_mode=True)
        except Exception as e:
            console.print(
                f"[red]Generative stage failed ({self.provider.name}), "
                f"using rule-based text: {e}[/red]"
            )
            return GenerativeCandidate()

        return parse_generation_response(response)
