from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from android_font_assets.core.fonts import build_font_family, fallback_weight, render_font_family
from android_font_assets.core.metadata import FontReadError, read_font_metadata
from android_font_assets.models import FontFileRecord

fonts_app = typer.Typer(help="Inspect fonts and font-family descriptors.")
console = Console()


@fonts_app.command("descriptor")
def descriptor(
    font_paths: Annotated[list[Path], typer.Argument(help="Font files belonging to one family.")],
) -> None:
    """Print the font-family XML for the given font files."""
    try:
        metadata = [read_font_metadata(path) for path in font_paths]
    except (FontReadError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    records = [
        FontFileRecord(name=Path(m.path).name, weight=fallback_weight(m.weight), is_italic=m.is_italic)
        for m in metadata
    ]
    typer.echo(render_font_family(build_font_family(records)), nl=False)


@fonts_app.command("weight")
def weight(
    value: Annotated[int, typer.Argument(help="Font weight, e.g. the OS/2 usWeightClass.")],
) -> None:
    """Show the 100-900 fallback bucket for a font weight."""
    typer.echo(fallback_weight(value))
