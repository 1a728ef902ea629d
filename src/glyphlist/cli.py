# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Click-based CLI for glyphlist.

This module provides commands to look glyph names up in the Adobe Glyph
List and to audit the glyph names used by fonts and PDF files.
"""

# Standard Library
import sys
from pathlib import Path

# Third Party
import click
from colorama import Fore, Style, init

# Local
from . import __version__
from .config import GlyphListConfig
from .entry import AGLUnicode
from .exceptions import GlyphListLoadError, InspectionError
from .inspection import (
    GlyphResolution,
    font_glyph_names,
    pdf_differences,
    resolve_glyph_names,
)
from .loader import load_glyph_table
from .resolver import AdobeGlyphList
from .utils import setup_logging

# Exit codes (click reports a missing file argument as a usage error, code 2)
EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_INSPECTION_FAILED = 3


def print_success(msg: str) -> None:
    """Prints a success message in green.

    Args:
        msg: The message to output.
    """
    click.echo(f"{Fore.GREEN}✓{Style.RESET_ALL} {msg}")


def print_error(msg: str) -> None:
    """Prints an error message in red.

    Args:
        msg: The error message to output.
    """
    click.echo(f"{Fore.RED}✗ Error:{Style.RESET_ALL} {msg}", err=True)


def print_warning(msg: str) -> None:
    """Prints a warning in yellow.

    Args:
        msg: The warning to output.
    """
    click.echo(f"{Fore.YELLOW}⚠{Style.RESET_ALL} {msg}")


def format_entry(glyph_name: str, entry: AGLUnicode) -> str:
    """Formats a resolved glyph as ``name -> U+XXXX "text"``."""
    return f'{glyph_name} -> {entry.format_code_points()} "{entry.unicode_string}"'


def _print_resolutions(
    resolutions: list[GlyphResolution], unresolved_only: bool, quiet: bool
) -> int:
    """Prints resolutions and returns the number of unresolved names."""
    missing = 0
    for resolution in resolutions:
        if resolution.resolved:
            if not unresolved_only and not quiet:
                click.echo(format_entry(resolution.glyph_name, resolution.unicode))
        else:
            missing += 1
            if not quiet:
                print_warning(f"{resolution.glyph_name}: not in Adobe Glyph List")
    return missing


def _glyph_list(ctx: click.Context) -> AdobeGlyphList:
    """Returns the resolver configured by the group options.

    A configured glyph list file (from --glyph-list or GLYPHLIST_PATH) is
    loaded eagerly so that read and parse errors reach the user instead of
    degrading to empty lookups.
    """
    config: GlyphListConfig = ctx.obj["config"]
    if config.path is not None:
        try:
            return AdobeGlyphList(load_glyph_table(config=config))
        except GlyphListLoadError as e:
            print_error(str(e))
            sys.exit(EXIT_GENERAL_ERROR)
    return AdobeGlyphList(config=config)


@click.group()
@click.option(
    "--glyph-list",
    "glyph_list_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Glyph list file to use instead of the bundled Adobe Glyph List.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on malformed glyph list lines instead of skipping them.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only output errors.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Detailed output (debug logging).",
)
@click.version_option(version=__version__)
@click.pass_context
def main(
    ctx: click.Context,
    glyph_list_path: str | None,
    strict: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Resolves PostScript glyph names to Unicode via the Adobe Glyph List."""
    # Initialize colorama for Windows compatibility
    init()
    setup_logging(verbose=verbose, quiet=quiet)

    env_config = GlyphListConfig.from_env()
    config = GlyphListConfig(
        path=Path(glyph_list_path) if glyph_list_path else env_config.path,
        strict=strict or env_config.strict,
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["quiet"] = quiet


@main.command()
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--fail-missing",
    is_flag=True,
    help="Exit with an error if any name is not in the glyph list.",
)
@click.pass_context
def lookup(ctx: click.Context, names: tuple[str, ...], fail_missing: bool) -> None:
    """Looks up one or more glyph NAMES."""
    glyph_list = _glyph_list(ctx)
    missing = _print_resolutions(
        resolve_glyph_names(names, glyph_list),
        unresolved_only=False,
        quiet=ctx.obj["quiet"],
    )
    if missing and fail_missing:
        sys.exit(EXIT_GENERAL_ERROR)
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--unresolved-only",
    is_flag=True,
    help="Only list glyph names without Adobe Glyph List mapping.",
)
@click.pass_context
def font(ctx: click.Context, font_file: str, unresolved_only: bool) -> None:
    """Resolves the glyph names of FONT_FILE (TrueType, OpenType or Type1)."""
    glyph_list = _glyph_list(ctx)
    quiet = ctx.obj["quiet"]
    font_path = Path(font_file)

    try:
        names = font_glyph_names(font_path)
    except InspectionError as e:
        print_error(str(e))
        sys.exit(EXIT_INSPECTION_FAILED)

    resolutions = resolve_glyph_names(names, glyph_list)
    missing = _print_resolutions(resolutions, unresolved_only, quiet)
    if not quiet:
        print_success(
            f"{font_path.name}: {len(resolutions) - missing} of "
            f"{len(resolutions)} glyph names resolved"
        )
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("pdf_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--unresolved-only",
    is_flag=True,
    help="Only list glyph names without Adobe Glyph List mapping.",
)
@click.pass_context
def pdf(ctx: click.Context, pdf_file: str, unresolved_only: bool) -> None:
    """Resolves the /Differences glyph names of the fonts in PDF_FILE."""
    glyph_list = _glyph_list(ctx)
    quiet = ctx.obj["quiet"]
    pdf_path = Path(pdf_file)

    try:
        entries = pdf_differences(pdf_path)
    except InspectionError as e:
        print_error(str(e))
        sys.exit(EXIT_INSPECTION_FAILED)

    missing = 0
    for item in entries:
        entry = glyph_list.get(item.glyph_name)
        location = f"p{item.page_number} {item.font_key} ({item.base_font}) {item.code}"
        if entry.is_empty:
            missing += 1
            if not quiet:
                print_warning(f"{location} {item.glyph_name}: not in Adobe Glyph List")
        elif not unresolved_only and not quiet:
            click.echo(f"{location} {format_entry(item.glyph_name, entry)}")

    if not quiet:
        print_success(
            f"{pdf_path.name}: {len(entries) - missing} of "
            f"{len(entries)} /Differences glyph names resolved"
        )
    sys.exit(EXIT_SUCCESS)
