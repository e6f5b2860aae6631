import logging

from android_font_assets.core.dialects import GRAMMARS, Dialect
from android_font_assets.models import FailureKind, PatchFailure, PatchResult

logger = logging.getLogger(__name__)

REACT_FONT_MANAGER_IMPORT = "com.facebook.react.views.text.ReactFontManager"


def add_import(text: str, import_path: str, dialect: Dialect) -> PatchResult:
    """Add ``import_path`` after the package declaration unless already imported."""
    grammar = GRAMMARS[dialect]

    if grammar.import_pattern(import_path).search(text):
        return PatchResult(text=text)

    package_match = grammar.package_pattern.search(text)
    if package_match is None:
        message = f"No package declaration to attach import {import_path} to."
        logger.warning(message)
        return PatchResult(
            text=text,
            failure=PatchFailure(kind=FailureKind.IMPORT_ANCHOR_MISSING, message=message),
        )

    end = package_match.end()
    return PatchResult(text=f"{text[:end]}\n\n{grammar.import_statement(import_path)}{text[end:]}")


def remove_lines(text: str, substring: str) -> str:
    return "\n".join(line for line in text.split("\n") if substring not in line)


def remove_import(text: str, import_path: str, dialect: Dialect) -> str:
    """Remove lines that are exactly the import of ``import_path``."""
    statement = GRAMMARS[dialect].import_statement(import_path)
    return "\n".join(line for line in text.split("\n") if line.strip() != statement)


def add_custom_font_call(font_name: str, font_id: str, dialect: Dialect) -> str:
    return GRAMMARS[dialect].statement(
        f'ReactFontManager.getInstance().addCustomFont(this, "{font_name}", R.font.{font_id})'
    )
