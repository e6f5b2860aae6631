from typing import Protocol

from android_font_assets.core.dialects import Dialect
from android_font_assets.models import PatchFailure, Span


class AnchorLocator(Protocol):
    def locate(self, text: str, class_name: str, method_name: str, dialect: Dialect) -> Span | PatchFailure: ...
