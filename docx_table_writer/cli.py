"""
Command-line interface for DOCX Table Writer.

Usage:
    docx-table-writer render tables.json --output document.xml
    docx-table-writer render tables.json --config export.json --pretty
    docx-table-writer grid tables.json
    docx-table-writer version
"""

import argparse
import sys
from typing import List, Optional

from .config import ExportConfig
from .engine.table_grid import MarginRedistributor, TableGridResolver
from .exceptions import DocxTableWriterError
from .export.xml_exporter import XMLExporter
from .importers.json_importer import JSONTableImporter
from .utils.logger import LOG_LEVELS
from .utils.rich_logger import print_grid_report, setup_rich_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docx-table-writer",
        description="DOCX Table Writer - WordprocessingML tables with unified column grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docx-table-writer render tables.json -o document.xml
  docx-table-writer render tables.json --pretty
  docx-table-writer grid tables.json
        """,
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Write WordprocessingML for a JSON table document")
    render_parser.add_argument("input", help="Input JSON file")
    render_parser.add_argument(
        "-o", "--output",
        help="Output XML file (default: standard output)"
    )
    render_parser.add_argument(
        "--config",
        help="Export configuration JSON file"
    )
    render_parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level (overrides the configuration)"
    )
    render_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the generated XML"
    )

    grid_parser = subparsers.add_parser("grid", help="Show the resolved column grid of every table")
    grid_parser.add_argument("input", help="Input JSON file")
    grid_parser.add_argument(
        "--config",
        help="Export configuration JSON file"
    )
    grid_parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level (overrides the configuration)"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def _load_config(args) -> ExportConfig:
    config = ExportConfig.from_file(args.config) if args.config else ExportConfig()
    if args.log_level:
        config.log_level = args.log_level
    if getattr(args, "pretty", False):
        config.pretty_print = True
    setup_rich_logging(config.log_level)
    return config


def cmd_render(args) -> int:
    """Handle render command."""
    config = _load_config(args)
    sections = JSONTableImporter(json_path=args.input).to_sections()
    exporter = XMLExporter(sections, config)

    if args.output:
        if not exporter.export(args.output):
            print(f"Error: Cannot write {args.output}", file=sys.stderr)
            return 1
        print(f"Saved: {args.output}")
    else:
        sys.stdout.write(exporter.regenerate_wordml())
        sys.stdout.write("\n")
    return 0


def cmd_grid(args) -> int:
    """Handle grid command."""
    config = _load_config(args)
    sections = JSONTableImporter(json_path=args.input).to_sections()

    resolutions = []
    for section_index, section in enumerate(sections):
        for table_index, table in enumerate(section.get_tables()):
            # Work on a copy: redistribution rewrites cell widths
            fitted = table.clone()
            if config.redistribute_margins:
                MarginRedistributor().redistribute(fitted)
            title = f"Section {section_index + 1}, table {table_index + 1}"
            resolutions.append((title, fitted, TableGridResolver().resolve(fitted)))

    if not resolutions:
        print("No tables found")
        return 0

    print_grid_report(resolutions)
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"DOCX Table Writer v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if getattr(args, "version", False):
        return cmd_version()

    try:
        if args.command == "render":
            return cmd_render(args)
        elif args.command == "grid":
            return cmd_grid(args)
        elif args.command == "version":
            return cmd_version(args)
    except DocxTableWriterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # No command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
