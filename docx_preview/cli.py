"""
Command-line interface for docx-preview.

Usage:
    docx-preview render input.docx --output output.html
    docx-preview info input.docx
    docx-preview version
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from rich.console import Console

from .exceptions import DocxPreviewError
from .utils.rich_logger import failure, print_table, setup_logging, success
from .version import __version__

console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docx-preview",
        description="docx-preview - render DOCX documents as HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docx-preview render document.docx --output out.html
  docx-preview render document.docx --no-break-pages --render-changes
  docx-preview info document.docx --json
  docx-preview version
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a DOCX file to a standalone HTML page")
    render_parser.add_argument("input", help="Input DOCX file")
    render_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with .html extension)"
    )
    render_parser.add_argument(
        "--class-name",
        default="word",
        help="CSS class prefix of the output (default: word)"
    )
    render_parser.add_argument(
        "--no-wrapper",
        action="store_true",
        help="Do not wrap sections in a container"
    )
    render_parser.add_argument(
        "--no-break-pages",
        action="store_true",
        help="Ignore explicit page breaks"
    )
    render_parser.add_argument(
        "--render-changes",
        action="store_true",
        help="Show tracked insertions and deletions"
    )
    render_parser.add_argument(
        "--ignore-fonts",
        action="store_true",
        help="Do not embed fonts from the font table"
    )
    render_parser.add_argument(
        "--inline-resources",
        dest="inline_resources",
        action="store_true",
        default=True,
        help="Embed images and fonts as data URLs (default)"
    )
    render_parser.add_argument(
        "--no-inline-resources",
        dest="inline_resources",
        action="store_false",
        help="Reference images and fonts with in-memory blob URLs"
    )
    render_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress and unknown markup"
    )

    info_parser = subparsers.add_parser("info", help="Show document properties and parts")
    info_parser.add_argument("input", help="Input DOCX file")
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def _read_input(path: Path) -> bytes:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_bytes()


def cmd_render(args) -> int:
    """Handle render command."""
    from .api import render_document

    setup_logging("DEBUG" if args.verbose else "WARNING")

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_suffix(".html")

    options = {
        "class_name": args.class_name,
        "in_wrapper": not args.no_wrapper,
        "break_pages": not args.no_break_pages,
        "render_changes": args.render_changes,
        "ignore_fonts": args.ignore_fonts,
        "use_base64_url": args.inline_resources,
        "debug": args.verbose,
    }

    try:
        result = render_document(_read_input(input_path), options)
    except (DocxPreviewError, FileNotFoundError) as e:
        failure(console, str(e))
        return 1

    output_path.write_text(result.to_html(), encoding="utf-8")
    success(console, f"Saved: {output_path}")
    return 0


def _document_info(input_path: Path, document) -> dict:
    info = {
        "file": str(input_path),
        "size_bytes": input_path.stat().st_size,
        "core_properties": asdict(document.core_properties) if document.core_properties else {},
        "extended_properties": asdict(document.extended_properties) if document.extended_properties else {},
        "custom_properties": {p.name: p.value for p in document.custom_properties or []},
        "parts": [
            {"path": part.path, "type": part.rel_type.rsplit("/", 1)[-1] if part.rel_type else None}
            for part in document.parts
        ],
    }
    return info


def cmd_info(args) -> int:
    """Handle info command."""
    from .api import parse

    setup_logging("WARNING")
    input_path = Path(args.input)

    try:
        document = parse(_read_input(input_path), {"debug": False})
    except (DocxPreviewError, FileNotFoundError) as e:
        failure(console, str(e))
        return 1

    info = _document_info(input_path, document)

    if args.json:
        print(json.dumps(info, indent=2, ensure_ascii=False, default=str))
        return 0

    print_table(console, f"File: {input_path}", {"Size": f"{info['size_bytes']:,} bytes"})
    print_table(console, "Core properties", info["core_properties"])
    print_table(console, "Extended properties", info["extended_properties"])
    if info["custom_properties"]:
        print_table(console, "Custom properties", info["custom_properties"])
    print_table(console, "Parts", {p["path"]: p["type"] for p in info["parts"]})
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    console.print(f"docx-preview v{__version__}")
    return 0


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "info":
        return cmd_info(args)
    elif args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
