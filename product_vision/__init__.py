"""
Product attribute inference from a single product photo.

Usage:
    from product_vision import AttributePipeline

    pipeline = AttributePipeline.from_config()
    result = await pipeline.analyze("https://cdn.example.com/p/123.jpg")
    result.to_dict()   # camelCase JSON for the admin UI
"""

from .errors import (
    GenerativeConfigurationError,
    PipelineError,
    VisionAnalysisError,
    VisionConfigurationError,
    VisionError,
    VisionTransportError,
)
from .models import AnalysisResult, CategoryCandidate, VisionSignals, VisionTerm
from .pipeline import AttributePipeline, BatchItemResult

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "AttributePipeline",
    "BatchItemResult",
    "CategoryCandidate",
    "GenerativeConfigurationError",
    "PipelineError",
    "VisionAnalysisError",
    "VisionConfigurationError",
    "VisionError",
    "VisionSignals",
    "VisionTerm",
    "VisionTransportError",
]
