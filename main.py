#!/usr/bin/env python3
"""
Product Vision - Main Entry Point

Analyzes product photos and suggests catalog metadata (name, description,
category, brand, color, gender, style, material, features) for review in
the admin tooling.

Usage:
    python main.py https://cdn.example.com/p/123.jpg       # Analyze one image
    python main.py img1.jpg img2.jpg --json                 # Several images, JSON output
    python main.py --ai-status                              # Which providers are configured
"""
import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from rich.console import Console
from rich.table import Table

from config.settings import PipelineConfig
from product_vision.ai import OpenAIClient
from product_vision.errors import GenerativeConfigurationError, VisionConfigurationError
from product_vision.loaders import ResultWriter, create_category_source
from product_vision.models import AnalysisResult
from product_vision.pipeline import AttributePipeline
from product_vision.vision import GoogleVisionProvider

console = Console(record=True)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOT_CONFIGURED = 2


class CustomHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that preserves formatting and adds width."""

    def __init__(self, prog):
        super().__init__(prog, max_help_position=40, width=100)


def parse_args(argv=None):
    """Parse command line arguments."""

    epilog = """
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
EXAMPLES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  Basic Usage:
    python main.py <image-url>                   Analyze one image, print a summary
    python main.py a.jpg b.jpg                   Analyze several images in turn
    python main.py <image-url> --json            Print the raw result JSON

  Categories:
    python main.py <image-url> --no-supabase     Read categories from data/categories.json
    python main.py <image-url> --categories-file my_categories.json

  Generative Stage (requires OPENAI_API_KEY in .env):
    python main.py <image-url> --no-ai           Rule-based name/description only
    python main.py <image-url> --model gpt-4o-mini

  Output:
    python main.py <image-url> --save            Save results under data/results/
    python main.py <image-url> --log-file        Save this run's console output under logs/

  Status:
    python main.py --ai-status                   Check which providers are configured

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
EXIT CODES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  0   all images analyzed
  1   at least one image failed
  2   image analysis is not configured (Google Vision credentials)

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
NOTES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  • Requires GOOGLE_APPLICATION_CREDENTIALS (service account JSON) in .env
  • Suggestions are for human review; nothing is written to the catalog
"""

    parser = argparse.ArgumentParser(
        prog="python main.py",
        description="""
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
                     PRODUCT ATTRIBUTE INFERENCE PIPELINE
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Derives product metadata from a single product photo:
  • Google Cloud Vision labels, objects, text and colors
  • Keyword rules for category, material, style, gender, brand and color
  • Optional OpenAI name + description
""",
        epilog=epilog,
        formatter_class=CustomHelpFormatter,
    )

    parser.add_argument(
        "images",
        nargs="*",
        metavar="IMAGE",
        help="Image URL, gs:// URI or local file path",
    )

    # Category options group
    category_group = parser.add_argument_group(
        "Category Options", "Where the store categories come from"
    )
    category_group.add_argument(
        "--no-supabase",
        action="store_true",
        help="Read categories from the local JSON file instead of Supabase",
    )
    category_group.add_argument(
        "--categories-file",
        type=str,
        metavar="PATH",
        help="JSON file with categories (implies --no-supabase)",
    )
    category_group.add_argument(
        "--threshold",
        type=float,
        default=None,
        metavar="SCORE",
        help="Minimum category score for a suggestion (default: 0.3)",
    )

    # AI options group
    ai_group = parser.add_argument_group(
        "AI Options", "Generative name/description stage (requires OPENAI_API_KEY)"
    )
    ai_group.add_argument(
        "--no-ai",
        action="store_true",
        help="Skip the generative stage, use rule-based text only",
    )
    ai_group.add_argument(
        "--model",
        type=str,
        metavar="NAME",
        help="OpenAI vision model (default: OPENAI_VISION_MODEL or gpt-4o)",
    )
    ai_group.add_argument(
        "--ai-status",
        action="store_true",
        help="Show which providers are configured and exit",
    )

    # Output options group
    output_group = parser.add_argument_group("Output Options", "Printing and saving results")
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of a summary table",
    )
    output_group.add_argument(
        "--save",
        action="store_true",
        help="Save each result as a JSON file",
    )
    output_group.add_argument(
        "-o",
        "--output",
        type=str,
        metavar="DIR",
        help="Directory for saved results (default: data/results)",
    )
    output_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show pipeline phases",
    )
    output_group.add_argument(
        "--log-file",
        action="store_true",
        help="Save the console transcript under logs/",
    )

    return parser.parse_args(argv)


def create_config(args) -> PipelineConfig:
    """Create pipeline configuration from arguments."""
    config = PipelineConfig()

    if args.categories_file:
        config.catalog.source = "file"
        config.catalog.categories_file = Path(args.categories_file)
    elif args.no_supabase:
        config.catalog.source = "file"

    if args.threshold is not None:
        config.category_threshold = args.threshold

    if args.no_ai:
        config.generative.enabled = False
    if args.model:
        config.generative.model = args.model

    if args.save:
        config.storage.save_results = True
        if args.output:
            config.storage.output_dir = Path(args.output)
        config.storage.ensure_dirs()

    if args.log_file:
        config.logging.log_to_file = True
        config.logging.ensure_dirs()

    return config


async def ai_status(config: PipelineConfig) -> int:
    """Check which providers are configured."""
    console.print("\n[bold cyan]Provider Status[/bold cyan]\n")

    vision = GoogleVisionProvider(config.vision)
    if vision.is_configured:
        console.print(
            f"[green]✓ Google Vision credentials found ({config.vision.credentials_path})[/green]"
        )
    else:
        console.print("[red]✗ Google Vision not configured[/red]")
        console.print(
            "[yellow]Set GOOGLE_APPLICATION_CREDENTIALS in .env to a service account JSON "
            "(Application Default Credentials are tried when unset).[/yellow]"
        )

    if not config.generative.is_configured:
        console.print("[yellow]○ OpenAI not configured (rule-based text only)[/yellow]")
    else:
        try:
            async with OpenAIClient(config.generative) as client:
                if await client.is_available():
                    console.print(
                        f"[green]✓ OpenAI is available (model {config.generative.model})[/green]"
                    )
                else:
                    console.print("[red]✗ OpenAI key set but the API is not reachable[/red]")
        except GenerativeConfigurationError as e:
            console.print(f"[yellow]○ {e}[/yellow]")

    try:
        source = create_category_source(config.catalog)
        categories = await source.load_categories()
        console.print(f"[green]✓ {len(categories)} categories from {source.name}[/green]")
    except Exception as e:
        console.print(f"[yellow]○ Categories unavailable: {e}[/yellow]")

    return EXIT_OK if vision.is_configured else EXIT_FAILED


def print_result(image: str, result: AnalysisResult) -> None:
    """Print one result as a summary table."""
    table = Table(title=image, show_header=True, header_style="bold cyan")
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_column("Confidence", justify="right")

    category = result.suggested_category
    table.add_row("Name", result.name, f"{result.confidence.name:.2f}")
    table.add_row(
        "Category",
        category.name if category else "[yellow]no confident match[/yellow]",
        f"{result.confidence.category:.2f}",
    )
    if result.alternatives:
        table.add_row("Alternatives", ", ".join(a.name for a in result.alternatives), "")
    table.add_row("Brand", result.brand or "-", "")
    table.add_row("Color", result.color or "-", "")
    table.add_row("Colors", ", ".join(result.colors) or "-", "")
    table.add_row("Material", result.material or "-", "")
    table.add_row("Style", result.style or "-", "")
    table.add_row("Gender", result.gender or "-", "")
    table.add_row("Features", ", ".join(result.features) or "-", "")
    table.add_row("Overall", "", f"[bold]{result.confidence.overall:.2f}[/bold]")

    console.print("\n")
    console.print(table)
    console.print(f"[dim]{result.description}[/dim]")


async def run_analysis(config: PipelineConfig, args) -> int:
    """Analyze every image given on the command line."""
    pipeline = AttributePipeline.from_config(config, verbose=args.verbose)

    try:
        batch = await pipeline.analyze_batch(args.images)
    except VisionConfigurationError as e:
        console.print(f"\n[bold red]Image analysis is not configured: {e}[/bold red]")
        console.print(
            "[yellow]Set GOOGLE_APPLICATION_CREDENTIALS in .env "
            "(see python main.py --ai-status).[/yellow]"
        )
        return EXIT_NOT_CONFIGURED
    finally:
        await pipeline.close()

    writer = ResultWriter(config.storage) if config.storage.save_results else None

    if args.json:
        console.print_json(
            data=[
                {
                    "image": item.image,
                    "success": item.ok,
                    "data": item.result.to_dict() if item.ok else None,
                    "error": str(item.error) if item.error else None,
                }
                for item in batch
            ]
        )

    for item in batch:
        if not item.ok:
            continue
        if not args.json:
            print_result(item.image, item.result)
        if writer is not None:
            await writer.save_result(item.result, item.image)

    failed = [item for item in batch if not item.ok]
    if failed:
        console.print(f"\n[red]✗ {len(failed)} of {len(batch)} images failed[/red]")
        return EXIT_FAILED

    if not args.json:
        console.print(f"\n[bold green]✓ Analyzed {len(batch)} image(s)[/bold green]")
    return EXIT_OK


def save_transcript(config: PipelineConfig) -> None:
    path = config.logging.log_dir / f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    console.save_text(str(path))


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = create_config(args)

    if args.ai_status:
        return asyncio.run(ai_status(config))

    if not args.images:
        console.print("[yellow]No images given. See python main.py --help[/yellow]")
        return EXIT_FAILED

    try:
        return asyncio.run(run_analysis(config, args))
    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis cancelled by user[/yellow]")
        return 130
    finally:
        if config.logging.log_to_file:
            save_transcript(config)


def cli():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
