"""Category sources and result output."""

from .category_loader import (
    CategorySource,
    FileCategorySource,
    StaticCategorySource,
    SupabaseCategorySource,
    create_category_source,
    parse_category_rows,
)
from .result_writer import ResultWriter

__all__ = [
    "CategorySource",
    "FileCategorySource",
    "ResultWriter",
    "StaticCategorySource",
    "SupabaseCategorySource",
    "create_category_source",
    "parse_category_rows",
]
