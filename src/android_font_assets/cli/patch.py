from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from android_font_assets.core.dialects import dialect_from_flag
from android_font_assets.core.patcher import insert_line_in_class_method

console = Console()


def patch(
    file: Annotated[Path, typer.Argument(help="Java or Kotlin source file to patch.")],
    class_name: Annotated[str, typer.Option("--class", help="Class containing the method.")],
    method: Annotated[str, typer.Option(help="Method to insert into.")],
    code: Annotated[str, typer.Option(help="Statement to insert.")],
    after: Annotated[str | None, typer.Option(help="Insert after this line instead of at the end.")] = None,
    kotlin: Annotated[
        bool | None, typer.Option("--kotlin/--java", help="Source dialect (default: from the file extension).")
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print the result instead of writing it.")] = False,
) -> None:
    """Insert a statement into a class method, once."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    resolved_dialect = dialect_from_flag(file.suffix == ".kt" if kotlin is None else kotlin)
    original = file.read_text(encoding="utf-8")
    result = insert_line_in_class_method(original, class_name, method, code, after, resolved_dialect)

    if result.failure is not None:
        console.print(f"[red]{result.failure.kind.value}[/red]: {result.failure.message}")
        raise typer.Exit(1)

    if dry_run:
        typer.echo(result.text, nl=False)
    elif result.text == original:
        console.print(f"[yellow]Unchanged[/yellow] {file}")
    else:
        file.write_text(result.text, encoding="utf-8")
        console.print(f"[green]Patched[/green] {file}")
