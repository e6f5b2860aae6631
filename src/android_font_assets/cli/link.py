from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from android_font_assets.core.link import LinkReport, link_fonts, unlink_fonts
from android_font_assets.core.metadata import FontReadError
from android_font_assets.core.project import get_android_root

console = Console()

RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Android project root (default: $ANDROID_PROJECT_ROOT or ./android)."),
]


def _print_report(report: LinkReport) -> None:
    for path in report.copied:
        console.print(f"[green]Copied[/green] {path}")
    for path in report.descriptors:
        console.print(f"[green]Wrote[/green] {path}")
    for path in report.removed:
        console.print(f"[yellow]Removed[/yellow] {path}")
    if report.main_application is None:
        console.print("[red]MainApplication not found.[/red]")
    for failure in report.failures:
        console.print(f"[red]{failure.kind.value}[/red]: {failure.message}")


def link(
    font_paths: Annotated[list[Path], typer.Argument(help="Font files (.ttf/.otf) to link.")],
    root: RootOption = None,
) -> None:
    """Copy fonts into the project and register them with ReactFontManager."""
    try:
        report = link_fonts(root or get_android_root(), font_paths)
    except (FontReadError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    _print_report(report)
    if not report.ok:
        raise typer.Exit(1)


def unlink(
    families: Annotated[list[str], typer.Argument(help="Font family names to remove.")],
    root: RootOption = None,
) -> None:
    """Remove linked font families from the project."""
    report = unlink_fonts(root or get_android_root(), families)
    _print_report(report)
    if not report.ok:
        raise typer.Exit(1)
