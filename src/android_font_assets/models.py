from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

ANDROID_RES_AUTO_NAMESPACE = "http://schemas.android.com/apk/res-auto"


class Span(BaseModel):
    """Offsets of a body's opening and closing braces within a source text."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "Span":
        if self.start > self.end:
            raise ValueError(f"Span start {self.start} is after end {self.end}")
        return self

    def body(self, text: str) -> str:
        return text[self.start + 1 : self.end]


class FailureKind(str, Enum):
    CLASS_NOT_FOUND = "class_not_found"
    METHOD_NOT_FOUND = "method_not_found"
    BODY_NOT_FOUND = "body_not_found"
    ANCHOR_LINE_NOT_FOUND = "anchor_line_not_found"
    IMPORT_ANCHOR_MISSING = "import_anchor_missing"


class PatchFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str


class PatchResult(BaseModel):
    """Outcome of a patch operation.

    ``text`` is always usable: on failure it is the input, unchanged.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    failure: PatchFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class FontFileRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    weight: int = Field(ge=1, le=1000)
    is_italic: bool = False


class FontDescriptorEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    style: Literal["normal", "italic"]
    weight: int
    font: str

    @property
    def key(self) -> tuple[str, int]:
        return (self.style, self.weight)


class FontDescriptorDocument(BaseModel):
    namespace: str = ANDROID_RES_AUTO_NAMESPACE
    fonts: list[FontDescriptorEntry] = Field(default_factory=list)


class FontMetadata(BaseModel):
    path: str
    family: str
    full_name: str
    postscript_name: str | None = None
    weight: int = 400
    is_italic: bool = False
