import logging
from collections.abc import Mapping

from android_font_assets.core.braces import match_delimiter
from android_font_assets.core.dialects import GRAMMARS, Dialect, DialectGrammar
from android_font_assets.models import FailureKind, PatchFailure, Span

logger = logging.getLogger(__name__)


def _failure(kind: FailureKind, message: str) -> PatchFailure:
    logger.error(message)
    return PatchFailure(kind=kind, message=message)


class RegexAnchorLocator:
    """Find a method body inside a class with regexes and brace counting.

    Implements the ``AnchorLocator`` protocol. Comments and string literals are
    not understood, which is acceptable for generated Android entry points.
    """

    def __init__(self, grammars: Mapping[Dialect, DialectGrammar] = GRAMMARS) -> None:
        self._grammars = grammars

    def locate(self, text: str, class_name: str, method_name: str, dialect: Dialect) -> Span | PatchFailure:
        grammar = self._grammars[dialect]

        class_match = grammar.class_pattern(class_name).search(text)
        if class_match is None:
            return _failure(FailureKind.CLASS_NOT_FOUND, f"Class {class_name} not found.")

        method_start: int | None = None
        for method_match in grammar.method_pattern(method_name).finditer(text):
            if method_match.start() > class_match.start():
                method_start = method_match.start()
                break

        if method_start is None:
            return _failure(
                FailureKind.METHOD_NOT_FOUND,
                f"Method {method_name} not found in class {class_name}.",
            )

        open_index = text.find("{", method_start)
        close_index = match_delimiter(text, open_index) if open_index != -1 else None
        if close_index is None:
            return _failure(
                FailureKind.BODY_NOT_FOUND,
                f"Could not find closing brace for method {method_name} in class {class_name}.",
            )

        logger.debug("Located %s.%s body at [%d, %d]", class_name, method_name, open_index, close_index)
        return Span(start=open_index, end=close_index)


DEFAULT_LOCATOR = RegexAnchorLocator()
