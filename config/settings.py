"""
Configuration settings for the product attribute inference pipeline.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (optional - everything also works from real env vars)
load_dotenv(Path(__file__).parent.parent / ".env")


@dataclass
class VisionConfig:
    """Configuration for the Google Cloud Vision stage."""

    # Service account JSON (or None to use Application Default Credentials)
    credentials_path: Optional[str] = field(
        default_factory=lambda: os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or None
    )
    project_id: Optional[str] = field(
        default_factory=lambda: os.getenv("GOOGLE_CLOUD_PROJECT_ID") or None
    )

    # Per-feature result caps sent with each annotate request
    max_labels: int = 20
    max_objects: int = 10

    # Keep at most this many dominant colors (ordered by score)
    max_dominant_colors: int = 5

    # Image download used for the inline-bytes retry
    download_timeout_seconds: float = 30.0


@dataclass
class GenerativeConfig:
    """Configuration for the optional OpenAI name/description stage."""

    enabled: bool = True
    api_key: Optional[str] = field(default_factory=lambda: os.getenv("OPENAI_API_KEY") or None)

    # Vision-capable chat model (override via env: OPENAI_VISION_MODEL)
    model: str = field(default_factory=lambda: os.getenv("OPENAI_VISION_MODEL", "gpt-4o"))

    temperature: float = 0.3  # Low temp for consistent product copy
    max_tokens: int = 450  # ~20 for the name + ~400 for the description
    timeout_seconds: float = 60.0

    @property
    def is_configured(self) -> bool:
        """True when the stage should run at all."""
        return self.enabled and bool(self.api_key)


@dataclass
class CatalogConfig:
    """Where the store categories come from."""

    # "supabase" or "file"
    source: str = "supabase"
    supabase_url: Optional[str] = field(default_factory=lambda: os.getenv("SUPABASE_URL") or None)
    supabase_key: Optional[str] = field(default_factory=lambda: os.getenv("SUPABASE_KEY") or None)
    table_name: str = "categories"

    # Used when source == "file"
    categories_file: Path = field(
        default_factory=lambda: Path(__file__).parent.parent / "data" / "categories.json"
    )


@dataclass
class StorageConfig:
    """Configuration for saving analysis results from the CLI."""

    output_dir: Path = field(
        default_factory=lambda: Path(__file__).parent.parent / "data" / "results"
    )
    save_results: bool = False

    def ensure_dirs(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    log_dir: Path = field(default_factory=lambda: Path(__file__).parent.parent / "logs")
    log_level: str = "INFO"
    log_to_file: bool = False
    log_to_console: bool = True

    def ensure_dirs(self) -> None:
        """Create log directory if it doesn't exist."""
        self.log_dir.mkdir(parents=True, exist_ok=True)


@dataclass
class PipelineConfig:
    """Main configuration combining all settings."""

    vision: VisionConfig = field(default_factory=VisionConfig)
    generative: GenerativeConfig = field(default_factory=GenerativeConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Category matcher: below this top score there is no confident match
    category_threshold: float = 0.3

    def __post_init__(self):
        """Ensure directories exist for the outputs that are switched on."""
        if self.storage.save_results:
            self.storage.ensure_dirs()
        if self.logging.log_to_file:
            self.logging.ensure_dirs()


# Default configuration instance
config = PipelineConfig()
