"""
Result writer for saving analysis results as JSON files.

Results are only ever written by the CLI for offline review; the pipeline
itself never persists anything.
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

import aiofiles
from rich.console import Console

from config.settings import StorageConfig
from product_vision.models import AnalysisResult

console = Console()


class ResultWriter:
    """Saves ``AnalysisResult`` objects under the configured output directory."""

    def __init__(self, storage_config: Optional[StorageConfig] = None):
        self.config = storage_config or StorageConfig()
        self.config.ensure_dirs()

    def _sanitize_filename(self, name: str) -> str:
        """Create a safe filename from a product name."""
        name = re.sub(r"[^\w\s-]", "", name.lower())
        name = re.sub(r"[\s]+", "_", name)
        return name[:50] or "product"

    def result_path(self, result: AnalysisResult, timestamp: Optional[datetime] = None) -> Path:
        stamp = (timestamp or datetime.now()).strftime("%Y%m%d_%H%M%S")
        return self.config.output_dir / f"{stamp}_{self._sanitize_filename(result.name)}.json"

    async def save_result(
        self,
        result: AnalysisResult,
        image: str,
        timestamp: Optional[datetime] = None,
    ) -> Path:
        """
        Write one result with the image it was computed from.

        Returns:
            Path of the written file
        """
        path = self.result_path(result, timestamp)
        payload = {
            "image": image,
            "analyzed_at": (timestamp or datetime.now()).isoformat(),
            "result": result.to_dict(),
        }

        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(payload, indent=2, ensure_ascii=False))

        console.print(f"[dim]Saved result to {path}[/dim]")
        return path
