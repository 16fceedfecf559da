"""Command-line interface for tagdown."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import requests
from rich.console import Console

from . import __version__
from .converter import convert, register
from .logging_config import setup_logging
from .models.options import ConversionOptions
from .plugins.loader import load_plugins_from_file

logger = logging.getLogger(__name__)

USER_AGENT = f"tagdown/{__version__}"
DEFAULT_TIMEOUT = 30


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="tagdown",
        description="Convert HTML into Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a local file
  tagdown page.html -o page.md

  # Convert a web page, resolving relative links against its URL
  tagdown https://example.com/docs --absolute

  # Read from stdin and emit inline links
  cat page.html | tagdown --inline

  # Register extra plugins
  tagdown page.html --plugins my_plugins.py
        """,
    )

    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="HTML file, http(s) URL, or '-' for stdin (default: stdin)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write Markdown to this file (default: stdout)",
    )

    # Conversion options
    options_group = parser.add_argument_group("conversion options")
    options_group.add_argument(
        "--absolute",
        action="store_true",
        default=None,
        help="Emit absolute URLs for links and images",
    )
    options_group.add_argument(
        "--inline",
        action="store_true",
        default=None,
        help="Emit inline links and images instead of references",
    )
    options_group.add_argument(
        "--base-uri",
        type=str,
        default=None,
        metavar="URI",
        help="Base URI used to resolve relative URLs",
    )
    options_group.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help="Fail on elements nested deeper than N",
    )
    options_group.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="Load conversion options from a YAML or JSON file",
    )
    options_group.add_argument(
        "--plugins",
        type=Path,
        nargs="+",
        default=None,
        metavar="FILE",
        help="Python files providing extra plugins",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress everything but errors",
    )

    return parser


def read_source(source: str) -> tuple[str, Optional[str]]:
    """
    Read HTML from a file, URL or stdin.

    Args:
        source: File path, http(s) URL, or '-' for stdin

    Returns:
        Tuple of HTML text and the URL of its location (None for stdin)
    """
    if source == "-":
        return sys.stdin.read(), None

    if source.startswith(("http://", "https://")):
        logger.debug(f"Fetching {source}")
        response = requests.get(source, timeout=DEFAULT_TIMEOUT, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
        return response.text, response.url or source

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8"), path.resolve().as_uri()


def build_options(args: argparse.Namespace, url: Optional[str] = None) -> ConversionOptions:
    """Merge options from a config file, the source location and command-line flags."""
    options = ConversionOptions.from_file(args.config) if args.config else ConversionOptions()

    overrides: dict = {}
    if url and options.base_uri is None:
        overrides["base_uri"] = url
    if args.absolute is not None:
        overrides["absolute"] = args.absolute
    if args.inline is not None:
        overrides["inline"] = args.inline
    if args.base_uri is not None:
        overrides["base_uri"] = args.base_uri
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth

    return ConversionOptions.parse({**options.model_dump(), **overrides})


def run_converter(args: argparse.Namespace) -> int:
    """Run a conversion with given arguments."""
    console = Console(stderr=True)

    if args.verbose:
        setup_logging("DEBUG")
    elif args.quiet:
        setup_logging("ERROR")
    else:
        setup_logging("WARNING")

    try:
        for plugin_file in args.plugins or []:
            for plugin in load_plugins_from_file(plugin_file):
                register(plugin)

        html, url = read_source(args.source)
        options = build_options(args, url)
        markdown = convert(html, options)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if args.verbose:
            console.print_exception()
        return 1

    if args.output:
        args.output.write_text(markdown + "\n", encoding="utf-8")
        if not args.quiet:
            console.print(f"[green]Wrote[/green] {args.output}")
    else:
        sys.stdout.write(markdown + "\n")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    return run_converter(args)


if __name__ == "__main__":
    sys.exit(main())
