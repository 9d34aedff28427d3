import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.table import Table
from .core.inspector import Inspector
from .models.inspection import InspectionResult
from .utils.config_loader import SettingsLoader
from .utils.exceptions import TwConfigError
from .utils.logger import setup_logger

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load, validate and export a utility-CSS configuration descriptor")
    parser.add_argument("-c", "--config", help="Path to the descriptor file (YAML or JSON)")
    parser.add_argument("-b", "--base-dir", help="Directory content globs are resolved against")
    parser.add_argument("-o", "--output-dir", help="Output directory for exports")
    parser.add_argument("-f", "--format", nargs="+", choices=sorted(SettingsLoader.VALID_EXPORT_FORMATS),
                      help="Export formats")
    parser.add_argument("-e", "--env-file", help="Path to .env file")
    parser.add_argument("-l", "--log-level", choices=sorted(SettingsLoader.VALID_LOG_LEVELS),
                      help="Logging level")
    parser.add_argument("--log-file", help="Path to log file")
    return parser

def print_summary(result: InspectionResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Descriptor summary")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("content", "\n".join(result.descriptor.content_globs) or "(none)")
    table.add_row("theme.extend", ", ".join(result.descriptor.theme_extensions) or "(none)")
    table.add_row("plugins", "\n".join(p.package for p in result.plugins) or "(none)")
    table.add_row("files", str(len(result.content.files)))
    table.add_row("warnings", str(len(result.warnings)))
    console.print(table)
    for path in result.exported_files:
        console.print(f"Exported {path}")

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the twconfig CLI."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger("twconfig")

    try:
        settings = SettingsLoader.load_settings(
            env_file=Path(args.env_file) if args.env_file else None,
            descriptor_path=args.config,
            base_dir=args.base_dir,
            output_dir=args.output_dir,
            log_level=args.log_level,
            export_formats=args.format
        )

        log_file = Path(args.log_file) if args.log_file else None
        logger = setup_logger("twconfig", settings.log_level, log_file=log_file)

        logger.info("Loading descriptor...")
        result = asyncio.run(Inspector(settings).run())
        print_summary(result)

    except TwConfigError as e:
        logger.error(f"Error inspecting descriptor: {str(e)}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
