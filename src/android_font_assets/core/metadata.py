import logging
from collections.abc import Mapping
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError
from slugify import slugify

from android_font_assets.models import FontMetadata

logger = logging.getLogger(__name__)

FONT_EXTENSIONS: frozenset[str] = frozenset({".ttf", ".otf"})

_FAMILY_NAME_ID = 1
_FULL_NAME_ID = 4
_POSTSCRIPT_NAME_ID = 6
_TYPOGRAPHIC_FAMILY_NAME_ID = 16

_FS_SELECTION_ITALIC = 1 << 0
_MAC_STYLE_ITALIC = 1 << 1


class FontReadError(Exception):
    pass


def normalize_string(value: str) -> str:
    """Turn a display name into an Android resource identifier."""
    return slugify(value, lowercase=True).replace("-", "_")


def pick_family_name(family: Mapping[str, str], preferred: Mapping[str, str] | None = None) -> str:
    available = preferred or family
    if not available:
        raise ValueError("Font has no family name")
    return available.get("en") or next(iter(available.values()))


def _language_key(platform_id: int, lang_id: int) -> str:
    if (platform_id == 3 and lang_id & 0xFF == 0x09) or (platform_id == 1 and lang_id == 0):
        return "en"
    return f"{platform_id}-{lang_id:#06x}"


def _names_by_language(font: TTFont, name_id: int) -> dict[str, str]:
    names: dict[str, str] = {}
    for record in font["name"].names:
        if record.nameID != name_id:
            continue
        try:
            value = record.toUnicode()
        except UnicodeDecodeError:
            continue
        names.setdefault(_language_key(record.platformID, record.langID), value)
    return names


def _is_italic(font: TTFont) -> bool:
    if "OS/2" in font and font["OS/2"].fsSelection & _FS_SELECTION_ITALIC:
        return True
    return bool("head" in font and font["head"].macStyle & _MAC_STYLE_ITALIC)


def read_font_metadata(path: str | Path) -> FontMetadata:
    font_path = Path(path)
    if font_path.suffix.lower() not in FONT_EXTENSIONS:
        raise FontReadError(f"Unsupported font file type {font_path.suffix!r} for {path}; expected .ttf or .otf")

    try:
        font = TTFont(font_path, lazy=True)
    except FileNotFoundError:
        raise FileNotFoundError(f"Font file not found: {path}") from None
    except (TTLibError, OSError) as e:
        raise FontReadError(f"Could not read font {path}: {e}") from e

    try:
        family = pick_family_name(
            _names_by_language(font, _FAMILY_NAME_ID),
            _names_by_language(font, _TYPOGRAPHIC_FAMILY_NAME_ID),
        )
        full_name = font["name"].getDebugName(_FULL_NAME_ID) or family
        weight = font["OS/2"].usWeightClass if "OS/2" in font else 400
        metadata = FontMetadata(
            path=str(font_path),
            family=family,
            full_name=full_name,
            postscript_name=font["name"].getDebugName(_POSTSCRIPT_NAME_ID),
            weight=weight,
            is_italic=_is_italic(font),
        )
    except (KeyError, ValueError) as e:
        raise FontReadError(f"Incomplete metadata in font {path}: {e}") from e
    finally:
        font.close()

    logger.debug("Read %s: family=%s weight=%d italic=%s", path, metadata.family, metadata.weight, metadata.is_italic)
    return metadata
