"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

_REPO_ROOT = Path(__file__).parent.parent

JAVA_MAIN_APPLICATION = """package com.app;

import android.app.Application;
import com.facebook.react.ReactApplication;

public class MainApplication extends Application implements ReactApplication {
  @Override
  public void onCreate() {
    super.onCreate();
    SoLoader.init(this, false);
  }
}
"""

KOTLIN_MAIN_APPLICATION = """package com.app

import android.app.Application
import com.facebook.react.ReactApplication

class MainApplication : Application(), ReactApplication {
  override fun onCreate() {
    super.onCreate()
    SoLoader.init(this, false)
  }
}
"""

FontFactory = Callable[..., Path]


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def java_main_application() -> str:
    return JAVA_MAIN_APPLICATION


@pytest.fixture
def kotlin_main_application() -> str:
    return KOTLIN_MAIN_APPLICATION


@pytest.fixture
def make_font(tmp_path: Path) -> FontFactory:
    """Return a factory that writes a minimal TrueType font and returns its path."""

    def _make(
        family: str = "Roboto",
        style: str = "Regular",
        weight: int = 400,
        italic: bool = False,
        typographic_family: str | None = None,
    ) -> Path:
        ps_name = f"{family}-{style}".replace(" ", "")
        name_strings = {
            "familyName": family,
            "styleName": style,
            "fullName": f"{family} {style}",
            "psName": ps_name,
        }
        if typographic_family:
            name_strings["typographicFamily"] = typographic_family

        fb = FontBuilder(1000, isTTF=True)
        fb.setupGlyphOrder([".notdef"])
        fb.setupCharacterMap({})
        fb.setupGlyf({".notdef": TTGlyphPen(None).glyph()})
        fb.setupHorizontalMetrics({".notdef": (500, 0)})
        fb.setupHorizontalHeader(ascent=800, descent=-200)
        fb.setupNameTable(name_strings)
        fb.setupOS2(usWeightClass=weight, fsSelection=0x01 if italic else 0x40)
        fb.setupPost()

        fonts_dir = tmp_path / "fonts"
        fonts_dir.mkdir(exist_ok=True)
        path = fonts_dir / f"{ps_name}.ttf"
        fb.save(str(path))
        return path

    return _make


@pytest.fixture
def android_project(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a factory that lays out a bare Android app with a MainApplication source."""

    def _make(source: str, extension: str = "java") -> Path:
        root = tmp_path / "android"
        package_dir = root / "app" / "src" / "main" / "java" / "com" / "app"
        package_dir.mkdir(parents=True)
        (package_dir / f"MainApplication.{extension}").write_text(source, encoding="utf-8")
        return root

    return _make
