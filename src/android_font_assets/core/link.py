import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from android_font_assets.core.dialects import GRAMMARS, Dialect
from android_font_assets.core.editor import (
    REACT_FONT_MANAGER_IMPORT,
    add_custom_font_call,
    add_import,
    remove_import,
    remove_lines,
)
from android_font_assets.core.fonts import (
    fallback_weight,
    font_resource_id,
    merge_font_family,
    parse_font_family,
    render_font_family,
)
from android_font_assets.core.metadata import normalize_string, read_font_metadata
from android_font_assets.core.patcher import insert_line_in_class_method
from android_font_assets.core.project import (
    detect_dialect,
    get_font_res_folder_path,
    get_main_application_path,
)
from android_font_assets.models import FontDescriptorDocument, FontFileRecord, FontMetadata, PatchFailure

logger = logging.getLogger(__name__)

MAIN_APPLICATION_CLASS = "MainApplication"
ON_CREATE_METHOD = "onCreate"


@dataclass
class LinkReport:
    dialect: Dialect
    main_application: Path | None = None
    copied: list[Path] = field(default_factory=list)
    descriptors: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    failures: list[PatchFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.main_application is not None and not self.failures


def _copy_fonts(
    fonts: list[FontMetadata], res_folder: Path
) -> tuple[dict[str, list[FontFileRecord]], list[Path]]:
    families: dict[str, list[FontFileRecord]] = {}
    copied: list[Path] = []
    for metadata in fonts:
        file_id = normalize_string(metadata.postscript_name or metadata.full_name)
        destination = res_folder / f"{file_id}{Path(metadata.path).suffix.lower()}"
        shutil.copyfile(metadata.path, destination)
        copied.append(destination)
        families.setdefault(metadata.family, []).append(
            FontFileRecord(
                name=destination.name,
                weight=fallback_weight(metadata.weight),
                is_italic=metadata.is_italic,
            )
        )
    return families, copied


def _write_descriptor(res_folder: Path, family: str, records: list[FontFileRecord]) -> Path:
    xml_path = res_folder / f"{normalize_string(family)}.xml"
    existing = (
        parse_font_family(xml_path.read_bytes()) if xml_path.exists() else FontDescriptorDocument()
    )
    xml_path.write_text(render_font_family(merge_font_family(existing, records)), encoding="utf-8")
    return xml_path


def _patch_main_application(text: str, families: Iterable[str], dialect: Dialect) -> tuple[str, list[PatchFailure]]:
    failures: list[PatchFailure] = []
    import_result = add_import(text, REACT_FONT_MANAGER_IMPORT, dialect)
    if import_result.failure is not None:
        failures.append(import_result.failure)
    text = import_result.text

    after_line = GRAMMARS[dialect].statement("super.onCreate()")
    # Each call lands right after super.onCreate(); go backwards to keep input order.
    for family in reversed(list(families)):
        result = insert_line_in_class_method(
            text,
            MAIN_APPLICATION_CLASS,
            ON_CREATE_METHOD,
            add_custom_font_call(family, normalize_string(family), dialect),
            after_line=after_line,
            dialect=dialect,
        )
        if result.failure is not None:
            failures.append(result.failure)
        text = result.text
    return text, failures


def link_fonts(
    android_root: str | Path, font_paths: Iterable[str | Path], dialect: Dialect | None = None
) -> LinkReport:
    """Copy fonts into ``res/font``, write family descriptors and register them in MainApplication."""
    root = Path(android_root)
    resolved_dialect = dialect or detect_dialect(root)
    report = LinkReport(dialect=resolved_dialect)
    # Fail before touching res/font if any font is unreadable.
    fonts = [read_font_metadata(font_path) for font_path in font_paths]

    res_folder = get_font_res_folder_path(root)
    res_folder.mkdir(parents=True, exist_ok=True)

    families, report.copied = _copy_fonts(fonts, res_folder)
    for family, records in families.items():
        report.descriptors.append(_write_descriptor(res_folder, family, records))
    logger.info("Linked %d font file(s) in %d family(ies)", len(report.copied), len(families))

    main_application = get_main_application_path(root, resolved_dialect)
    if main_application is None:
        logger.error("%s not found under %s", MAIN_APPLICATION_CLASS, root)
        return report
    report.main_application = main_application

    original = main_application.read_text(encoding="utf-8")
    patched, report.failures = _patch_main_application(original, families, resolved_dialect)
    if patched != original:
        main_application.write_text(patched, encoding="utf-8")
        logger.info("Patched %s", main_application)
    return report


def _custom_font_marker(family: str) -> str:
    return f'addCustomFont(this, "{family}",'


def unlink_fonts(android_root: str | Path, families: Iterable[str], dialect: Dialect | None = None) -> LinkReport:
    """Undo ``link_fonts`` for the given family names."""
    root = Path(android_root)
    resolved_dialect = dialect or detect_dialect(root)
    report = LinkReport(dialect=resolved_dialect)
    family_list = list(families)

    res_folder = get_font_res_folder_path(root)
    for family in family_list:
        xml_path = res_folder / f"{normalize_string(family)}.xml"
        if not xml_path.exists():
            logger.warning("No font descriptor for family %s", family)
            continue
        for entry in parse_font_family(xml_path.read_bytes()).fonts:
            font_id = font_resource_id(entry.font)
            for font_file in res_folder.glob(f"{font_id}.*"):
                if font_file.suffix != ".xml":
                    font_file.unlink()
                    report.removed.append(font_file)
        xml_path.unlink()
        report.removed.append(xml_path)

    main_application = get_main_application_path(root, resolved_dialect)
    if main_application is None:
        logger.error("%s not found under %s", MAIN_APPLICATION_CLASS, root)
        return report
    report.main_application = main_application

    original = main_application.read_text(encoding="utf-8")
    text = original
    for family in family_list:
        text = remove_lines(text, _custom_font_marker(family))
    if "addCustomFont(" not in text:
        text = remove_import(text, REACT_FONT_MANAGER_IMPORT, resolved_dialect)
    if text != original:
        main_application.write_text(text, encoding="utf-8")
        logger.info("Unregistered %d family(ies) from %s", len(family_list), main_application)
    return report
