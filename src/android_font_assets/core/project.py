import os
from pathlib import Path

from android_font_assets.core.dialects import GRAMMARS, Dialect, dialect_from_flag

_JAVA_SOURCES = Path("app/src/main/java")
_FONT_RES_FOLDER = Path("app/src/main/res/font")
_MAIN_APPLICATION = "MainApplication"


def get_android_root() -> Path:
    return Path(os.getenv("ANDROID_PROJECT_ROOT", "android"))


def is_project_using_kotlin(root_path: str | Path) -> bool:
    return next((Path(root_path) / _JAVA_SOURCES).glob(f"**/{_MAIN_APPLICATION}.kt"), None) is not None


def detect_dialect(root_path: str | Path) -> Dialect:
    return dialect_from_flag(is_project_using_kotlin(root_path))


def get_project_file_path(root_path: str | Path, name: str, dialect: Dialect | None = None) -> Path | None:
    """Return the first ``<name>.java`` or ``<name>.kt`` under the app's source root."""
    resolved_dialect = dialect or detect_dialect(root_path)
    extension = GRAMMARS[resolved_dialect].source_extension
    matches = sorted((Path(root_path) / _JAVA_SOURCES).glob(f"**/{name}.{extension}"))
    return matches[0] if matches else None


def get_main_application_path(root_path: str | Path, dialect: Dialect | None = None) -> Path | None:
    return get_project_file_path(root_path, _MAIN_APPLICATION, dialect)


def get_font_res_folder_path(root_path: str | Path) -> Path:
    return Path(root_path) / _FONT_RES_FOLDER
