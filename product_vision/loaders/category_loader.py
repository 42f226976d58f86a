"""
Category sources for the category matcher.

The store's categories are owned by the catalog, not by the pipeline, so
they are fetched fresh for every request:

- SupabaseCategorySource: ``categories`` table (id, name, slug, keywords)
- FileCategorySource: a local JSON file with the same rows
- StaticCategorySource: an in-memory list (tests, scripts)

The optional ``keywords`` column lets a category carry its own matcher
keywords instead of relying on the built-in table keyed by slug.
"""

import abc
import asyncio
import json
from pathlib import Path
from typing import Any, Iterable, Optional

import aiofiles
from pydantic import ValidationError
from rich.console import Console
from supabase import Client, create_client

from config.settings import CatalogConfig
from product_vision.models import CategoryCandidate

console = Console()


def parse_category_rows(rows: Iterable[dict[str, Any]]) -> list[CategoryCandidate]:
    """
    Validate raw category rows, skipping malformed ones.

    ``_id`` is accepted as an alias of ``id``; rows are sorted by name.
    """
    categories = []
    for row in rows:
        data = dict(row)
        if "id" not in data and "_id" in data:
            data["id"] = data["_id"]
        keywords = data.get("keywords")
        if isinstance(keywords, str):
            data["keywords"] = [k.strip() for k in keywords.split(",") if k.strip()]
        try:
            categories.append(CategoryCandidate.model_validate(data))
        except ValidationError as e:
            console.print(f"[yellow]Skipping invalid category row {row!r}: {e}[/yellow]")
    return sorted(categories, key=lambda c: c.name.lower())


class CategorySource(abc.ABC):
    """Contract for anything that can list the store categories."""

    name: str = "base"

    @abc.abstractmethod
    async def load_categories(self) -> list[CategoryCandidate]:
        """Fetch the current category list."""


class StaticCategorySource(CategorySource):
    name = "static"

    def __init__(self, categories: Iterable[CategoryCandidate]):
        self._categories = list(categories)

    async def load_categories(self) -> list[CategoryCandidate]:
        return list(self._categories)


class FileCategorySource(CategorySource):
    """Categories from a JSON file: a list of rows or ``{"categories": [...]}``."""

    name = "file"

    def __init__(self, path: Path):
        self.path = Path(path)

    async def load_categories(self) -> list[CategoryCandidate]:
        if not self.path.exists():
            console.print(f"[yellow]Categories file not found: {self.path}[/yellow]")
            return []

        async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
            data = json.loads(await f.read())

        rows = data.get("categories", []) if isinstance(data, dict) else data
        return parse_category_rows(rows)


class SupabaseCategorySource(CategorySource):
    """Categories from the Supabase ``categories`` table."""

    name = "supabase"

    def __init__(
        self,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        table_name: str = "categories",
        client: Optional[Client] = None,
    ):
        self.table_name = table_name
        if client is not None:
            self.client = client
            return
        if not supabase_url or not supabase_key:
            raise ValueError(
                "Supabase credentials not found. Set SUPABASE_URL and SUPABASE_KEY."
            )
        self.client = create_client(supabase_url, supabase_key)

    def _fetch_rows(self) -> list[dict]:
        result = self.client.table(self.table_name).select("*").order("name").execute()
        return result.data or []

    async def load_categories(self) -> list[CategoryCandidate]:
        rows = await asyncio.to_thread(self._fetch_rows)
        return parse_category_rows(rows)


def create_category_source(catalog: Optional[CatalogConfig] = None) -> CategorySource:
    """Build the category source selected by the catalog config."""
    catalog = catalog or CatalogConfig()
    if catalog.source == "supabase":
        return SupabaseCategorySource(
            supabase_url=catalog.supabase_url,
            supabase_key=catalog.supabase_key,
            table_name=catalog.table_name,
        )
    if catalog.source == "file":
        return FileCategorySource(catalog.categories_file)
    raise ValueError(f"Unknown category source: {catalog.source!r} (use 'supabase' or 'file')")
