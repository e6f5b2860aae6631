import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from android_font_assets.cli.fonts import fonts_app
from android_font_assets.cli.link import link, unlink
from android_font_assets.cli.patch import patch

app = typer.Typer(
    name="android-font-assets",
    help="Link custom fonts into React Native Android projects.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("link")(link)
app.command("unlink")(unlink)
app.command("patch")(patch)
app.add_typer(fonts_app, name="fonts")


def main() -> None:
    app()
