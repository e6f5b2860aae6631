import logging

from android_font_assets.core.dialects import Dialect
from android_font_assets.core.locator import DEFAULT_LOCATOR
from android_font_assets.core.ports.locator import AnchorLocator
from android_font_assets.models import FailureKind, PatchFailure, PatchResult, Span

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "    "


def insert_snippet(
    text: str,
    span: Span,
    snippet: str,
    after_line: str | None = None,
    indent: str = DEFAULT_INDENT,
    where: str = "target body",
) -> PatchResult:
    """Insert ``snippet`` into the body delimited by ``span``, at most once.

    With ``after_line`` the snippet goes right after its first occurrence in the
    body; otherwise it goes right before the closing brace.
    """
    body = span.body(text)

    if snippet.strip() in body:
        logger.debug("Snippet already present, skipping insert")
        return PatchResult(text=text)

    insert_position = span.end
    if after_line:
        anchor = after_line.strip()
        line_index = body.find(anchor)
        if line_index == -1:
            message = f'Line "{after_line}" not found in {where}.'
            logger.error(message)
            return PatchResult(
                text=text,
                failure=PatchFailure(kind=FailureKind.ANCHOR_LINE_NOT_FOUND, message=message),
            )
        insert_position = span.start + 1 + line_index + len(anchor)

    return PatchResult(text=f"{text[:insert_position]}\n{indent}{snippet}{text[insert_position:]}")


def insert_line_in_class_method(
    text: str,
    class_name: str,
    method_name: str,
    snippet: str,
    after_line: str | None = None,
    dialect: Dialect = Dialect.JAVA,
    locator: AnchorLocator = DEFAULT_LOCATOR,
) -> PatchResult:
    located = locator.locate(text, class_name, method_name, dialect)
    if isinstance(located, PatchFailure):
        return PatchResult(text=text, failure=located)

    return insert_snippet(
        text,
        located,
        snippet,
        after_line,
        where=f"method {method_name} of class {class_name}",
    )
