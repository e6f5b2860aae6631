from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePath

from lxml import etree

from android_font_assets.models import (
    ANDROID_RES_AUTO_NAMESPACE,
    FontDescriptorDocument,
    FontDescriptorEntry,
    FontFileRecord,
)

_ROOT_TAG = "font-family"
_FONT_TAG = "font"
_NS_PREFIX = "app"


@dataclass(frozen=True)
class XmlFormat:
    declaration: str = '<?xml version="1.0" encoding="utf-8"?>'
    pretty_print: bool = True
    indent: str = "  "


XML_FORMAT = XmlFormat()


def fallback_weight(weight: int) -> int:
    """Calculate a fallback weight that is a multiple of 100 between 100 and 900.

    Reference: https://developer.mozilla.org/en-US/docs/Web/CSS/font-weight#fallback_weights
    """
    if weight <= 500:
        return max(weight // 100 * 100, 100)
    return min(-(-weight // 100) * 100, 900)


def font_resource_id(file_name: str) -> str:
    return PurePath(file_name).stem


def font_reference(file_name: str) -> str:
    return f"@font/{font_resource_id(file_name)}"


def build_entry(record: FontFileRecord) -> FontDescriptorEntry:
    return FontDescriptorEntry(
        style="italic" if record.is_italic else "normal",
        weight=record.weight,
        font=font_reference(record.name),
    )


def _upsert(fonts: list[FontDescriptorEntry], entry: FontDescriptorEntry) -> None:
    # Android rejects duplicate style/weight pairs; later entries take the earlier slot.
    for index, existing in enumerate(fonts):
        if existing.key == entry.key:
            fonts[index] = entry
            return
    fonts.append(entry)


def build_font_family(records: Iterable[FontFileRecord]) -> FontDescriptorDocument:
    fonts: list[FontDescriptorEntry] = []
    for record in records:
        _upsert(fonts, build_entry(record))
    return FontDescriptorDocument(fonts=fonts)


def merge_font_family(existing: FontDescriptorDocument, records: Iterable[FontFileRecord]) -> FontDescriptorDocument:
    fonts = list(existing.fonts)
    for record in records:
        _upsert(fonts, build_entry(record))
    return FontDescriptorDocument(namespace=existing.namespace, fonts=fonts)


def _attr(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def render_font_family(document: FontDescriptorDocument, fmt: XmlFormat = XML_FORMAT) -> str:
    root = etree.Element(_ROOT_TAG, nsmap={_NS_PREFIX: document.namespace})
    for entry in document.fonts:
        font = etree.SubElement(root, _FONT_TAG)
        font.set(_attr(document.namespace, "fontStyle"), entry.style)
        font.set(_attr(document.namespace, "fontWeight"), str(entry.weight))
        font.set(_attr(document.namespace, "font"), entry.font)

    if fmt.pretty_print:
        etree.indent(root, space=fmt.indent)
    body = etree.tostring(root, encoding="unicode", pretty_print=fmt.pretty_print)
    return f"{fmt.declaration}\n{body}" if fmt.declaration else body


def parse_font_family(xml: str | bytes) -> FontDescriptorDocument:
    data = xml.encode("utf-8") if isinstance(xml, str) else xml
    try:
        root = etree.fromstring(data)
    except etree.XMLSyntaxError as e:
        raise ValueError(f"Invalid font-family XML: {e}") from e

    if root.tag != _ROOT_TAG:
        raise ValueError(f"Expected <{_ROOT_TAG}> root element, found <{root.tag}>")

    namespace = root.nsmap.get(_NS_PREFIX, ANDROID_RES_AUTO_NAMESPACE)
    fonts = [
        FontDescriptorEntry(
            style=element.get(_attr(namespace, "fontStyle"), "normal"),
            weight=int(element.get(_attr(namespace, "fontWeight"), "400")),
            font=element.get(_attr(namespace, "font"), ""),
        )
        for element in root.findall(_FONT_TAG)
    ]
    return FontDescriptorDocument(namespace=namespace, fonts=fonts)
