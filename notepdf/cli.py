"""
Command-line interface for notepdf.

Usage:
    notepdf print note.md
    notepdf print note.md --title "Weekly notes" --output-dir exports
    notepdf plan note.md
    notepdf settings show
    notepdf settings set watermark_angle -30
    notepdf version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import NotePdfExporter
from .engine.geometry import DEFAULT_MARGIN, PAGE_SIZES
from .exceptions import ConfigError, NotePdfError, PdfCreationError
from .settings import DEFAULT_SETTINGS, SettingsStore
from .storage import VaultStorage
from .utils.logger import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="notepdf",
        description="notepdf - print plain-text notes to watermarked single-page PDFs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  notepdf print note.md
  notepdf print note.md --output-dir exports --page-size a4
  notepdf plan note.md
  notepdf settings set header_text "Team notes"
  notepdf version
        """,
    )
    parser.add_argument(
        "--settings",
        help="Settings file (default: $NOTEPDF_SETTINGS or ~/.notepdf/settings.json)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    page_options = argparse.ArgumentParser(add_help=False)
    page_options.add_argument(
        "--page-size",
        choices=[name.lower() for name in PAGE_SIZES],
        default="letter",
        help="Page size (default: letter)"
    )
    page_options.add_argument(
        "--margin",
        type=float,
        default=DEFAULT_MARGIN,
        help=f"Page margin in points (default: {DEFAULT_MARGIN:g})"
    )

    print_parser = subparsers.add_parser(
        "print", parents=[page_options], help="Print a note to PDF with watermark"
    )
    print_parser.add_argument("input", help="Note file (plain text)")
    print_parser.add_argument(
        "-t", "--title",
        help="Document title (default: note file name without extension)"
    )
    print_parser.add_argument(
        "-d", "--output-dir",
        default=".",
        help="Directory receiving <title>.pdf (default: current directory)"
    )
    print_parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace an existing PDF with the same name"
    )

    plan_parser = subparsers.add_parser(
        "plan", parents=[page_options], help="Show the page layout as JSON"
    )
    plan_parser.add_argument("input", help="Note file (plain text)")

    settings_parser = subparsers.add_parser("settings", help="Show or change settings")
    settings_sub = settings_parser.add_subparsers(dest="settings_command")
    settings_sub.add_parser("show", help="Print current settings")
    set_parser = settings_sub.add_parser("set", help="Change one setting")
    set_parser.add_argument("key", choices=sorted(DEFAULT_SETTINGS), help="Setting name")
    set_parser.add_argument("value", help="New value (empty string clears a text)")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _read_note(path: Path) -> Optional[str]:
    if not path.is_file():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {path}: {e}", file=sys.stderr)
        return None


def _build_exporter(args, output_dir: str = ".", overwrite: bool = False) -> NotePdfExporter:
    config = SettingsStore(args.settings).load()
    return NotePdfExporter(
        config,
        VaultStorage(output_dir),
        page_size=args.page_size,
        margin=args.margin,
        overwrite=overwrite,
    )


def cmd_print(args) -> int:
    """Handle print command."""
    input_path = Path(args.input)
    content = _read_note(input_path)
    if content is None:
        return 1

    title = args.title or input_path.stem
    try:
        exporter = _build_exporter(args, args.output_dir, args.overwrite)
        path = exporter.create_pdf(title, content)
    except PdfCreationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except NotePdfError as e:
        print(f"❌ Failed to create PDF for '{title}': {e}", file=sys.stderr)
        return 1

    print(f"✅ PDF saved as {path.name}")
    return 0


def cmd_plan(args) -> int:
    """Handle plan command."""
    input_path = Path(args.input)
    content = _read_note(input_path)
    if content is None:
        return 1

    try:
        exporter = _build_exporter(args)
        plan = exporter.build_plan(content)
    except NotePdfError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    geometry = exporter.geometry
    info = {
        "page": {"width": geometry.width, "height": geometry.height, "margin": geometry.margin},
        **plan.to_dict(),
    }
    print(json.dumps(info, indent=2, ensure_ascii=False))
    return 0


def cmd_settings(args) -> int:
    """Handle settings command."""
    store = SettingsStore(args.settings)
    try:
        if args.settings_command == "set":
            config = store.update(args.key, args.value)
            print(f"✅ {args.key} = {config.to_dict()[args.key]!r}")
            return 0
        config = store.load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"⚙️  Settings: {store.path}")
    for key, value in config.to_dict().items():
        print(f"   {key}: {value!r}")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"notepdf v{__version__}")
    print("Plain-text notes to watermarked single-page PDFs")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else "WARNING", log_file=args.log_file)

    if args.command == "print":
        return cmd_print(args)
    elif args.command == "plan":
        return cmd_plan(args)
    elif args.command == "settings":
        return cmd_settings(args)
    elif args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
