"""
Command-line interface for keytrans.

Provides commands for:
- Translating a localization file into every target locale
- Listing the locale table
- Previewing the normalizer on a single value

Usage:
    keytrans translate en.yml translated.yml
    keytrans translate en.yml out.yml --locale fr-FR --locale de-DE
    keytrans locales --non-english
    keytrans normalize "« Bonjour (0) »" --locale fr-FR
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from keytrans import __version__
from keytrans.config import APP_NAME, DEFAULT_BACKEND, DEFAULT_FORMAT, TranslatorConfig
from keytrans.errors import ConfigurationError, TranslationServiceError
from keytrans.locales import LocaleTable
from keytrans.normalize import normalize as normalize_value
from keytrans.pipeline import TranslationPipeline

app = typer.Typer(
    name=APP_NAME,
    help="keytrans: translate localization keys through a machine-translation service",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def version_callback(value: bool):
    if value:
        console.print(f"keytrans v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """keytrans: machine translation of localization keys."""
    pass


@app.command()
def translate(
    source: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Source file in the base language",
    ),
    destination: Path = typer.Argument(
        ..., help="File the translated blocks are appended to",
    ),
    backend: str = typer.Option(
        DEFAULT_BACKEND, "--backend", "-b",
        help="Translation backend (google, dummy)",
    ),
    file_format: str = typer.Option(
        DEFAULT_FORMAT, "--format", "-f",
        help="Source file format",
    ),
    locales: Optional[List[str]] = typer.Option(
        None, "--locale", "-l",
        help="Target locale (repeatable); default is every locale except en-US",
    ),
    catalog_dir: Optional[Path] = typer.Option(
        None, "--catalog-dir", "-c",
        help="Directory of existing <locale>/*.yml files; keys found there are skipped",
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Log every translation request",
    ),
):
    """Translate every key of SOURCE and append the locale blocks to DESTINATION."""
    setup_logging(verbose)

    config = TranslatorConfig(
        source=source,
        destination=destination,
        backend=backend,
        format=file_format,
        locales=locales or None,
        catalog_dir=catalog_dir,
    )

    try:
        pipeline = TranslationPipeline.from_config(config)
        with console.status("Translating...") as status:
            pipeline.progress_callback = lambda msg, pct: status.update(msg)
            outputs = pipeline.run(config.locales)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/] {e}", style="bold")
        raise typer.Exit(2)
    except TranslationServiceError as e:
        console.print(f"[red]Translation failed:[/] {e}", style="bold")
        console.print(f"[dim]Blocks for completed locales remain in {destination}[/]")
        raise typer.Exit(1)

    table = Table(title="Translated locales")
    table.add_column("Locale", style="cyan")
    table.add_column("Lines", justify="right")
    table.add_column("Translated", justify="right")
    for output in outputs:
        table.add_row(output.locale, str(len(output.lines)), str(output.translated))
    console.print(table)
    console.print(f"[green]✓[/] Appended to {destination}")


@app.command()
def locales(
    non_english: bool = typer.Option(
        False, "--non-english",
        help="Only list locales that are not English variants",
    ),
):
    """Show the locale table."""
    locale_table = LocaleTable()
    entries = locale_table.non_english_locales() if non_english else locale_table.entries

    table = Table(title="Locales")
    table.add_column("Locale", style="cyan")
    table.add_column("Service code")
    table.add_column("Target", justify="center")
    for entry in entries:
        is_target = entry.source_locale != locale_table.base_locale
        table.add_row(entry.source_locale, entry.service_code, "✓" if is_target else "base")
    console.print(table)


@app.command()
def normalize(
    text: str = typer.Argument(..., help="Translated text to clean up"),
    locale: str = typer.Option(
        "fr-FR", "--locale", "-l",
        help="Target locale the text was translated into",
    ),
):
    """Show what the normalizer makes of a translated value."""
    console.print(normalize_value(text, locale), markup=False, highlight=False)


if __name__ == "__main__":
    app()
