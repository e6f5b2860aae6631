"""End-to-end tests for linking fonts into a temporary Android project."""

from collections.abc import Callable
from pathlib import Path

import pytest

from android_font_assets.core.dialects import Dialect
from android_font_assets.core.fonts import parse_font_family
from android_font_assets.core.link import link_fonts, unlink_fonts
from android_font_assets.core.metadata import FontReadError
from android_font_assets.models import FailureKind

FontFactory = Callable[..., Path]
ProjectFactory = Callable[..., Path]

_JAVA_SOURCE = Path("app/src/main/java/com/app/MainApplication.java")
_KOTLIN_SOURCE = Path("app/src/main/java/com/app/MainApplication.kt")
_RES_FONT = Path("app/src/main/res/font")


def test_link_java_project(make_font: FontFactory, android_project: ProjectFactory, java_main_application: str) -> None:
    root = android_project(java_main_application, "java")
    fonts = [
        make_font("Roboto", "Regular", 400),
        make_font("Roboto", "Bold Italic", 700, italic=True),
        make_font("Lato", "Light", 250),
    ]

    report = link_fonts(root, fonts)

    assert report.ok
    assert report.dialect is Dialect.JAVA
    assert sorted(p.name for p in (root / _RES_FONT).iterdir()) == [
        "lato.xml",
        "lato_light.ttf",
        "roboto.xml",
        "roboto_bolditalic.ttf",
        "roboto_regular.ttf",
    ]

    roboto = parse_font_family((root / _RES_FONT / "roboto.xml").read_bytes())
    assert [(e.style, e.weight, e.font) for e in roboto.fonts] == [
        ("normal", 400, "@font/roboto_regular"),
        ("italic", 700, "@font/roboto_bolditalic"),
    ]
    lato = parse_font_family((root / _RES_FONT / "lato.xml").read_bytes())
    assert [e.weight for e in lato.fonts] == [200]

    source = (root / _JAVA_SOURCE).read_text(encoding="utf-8")
    assert source.startswith("package com.app;\n\nimport com.facebook.react.views.text.ReactFontManager;\n")
    assert (
        "    super.onCreate();\n"
        '    ReactFontManager.getInstance().addCustomFont(this, "Roboto", R.font.roboto);\n'
        '    ReactFontManager.getInstance().addCustomFont(this, "Lato", R.font.lato);\n'
        "    SoLoader.init(this, false);"
    ) in source


def test_link_is_idempotent(
    make_font: FontFactory, android_project: ProjectFactory, java_main_application: str
) -> None:
    root = android_project(java_main_application, "java")
    font = make_font("Roboto", "Regular", 400)

    link_fonts(root, [font])
    source_once = (root / _JAVA_SOURCE).read_text(encoding="utf-8")
    xml_once = (root / _RES_FONT / "roboto.xml").read_text(encoding="utf-8")
    link_fonts(root, [font])

    assert (root / _JAVA_SOURCE).read_text(encoding="utf-8") == source_once
    assert (root / _RES_FONT / "roboto.xml").read_text(encoding="utf-8") == xml_once


def test_link_merges_into_existing_descriptor(
    make_font: FontFactory, android_project: ProjectFactory, kotlin_main_application: str
) -> None:
    root = android_project(kotlin_main_application, "kt")

    link_fonts(root, [make_font("Roboto", "Regular", 400)])
    link_fonts(root, [make_font("Roboto", "Medium", 500)])

    roboto = parse_font_family((root / _RES_FONT / "roboto.xml").read_bytes())
    assert [e.font for e in roboto.fonts] == ["@font/roboto_regular", "@font/roboto_medium"]
    source = (root / _KOTLIN_SOURCE).read_text(encoding="utf-8")
    assert source.count('addCustomFont(this, "Roboto", R.font.roboto)\n') == 1
    assert "import com.facebook.react.views.text.ReactFontManager\n" in source


def test_link_reports_patch_failures(make_font: FontFactory, android_project: ProjectFactory) -> None:
    source = "package com.app;\n\npublic class MainApplication extends Application {\n}\n"
    root = android_project(source, "java")

    report = link_fonts(root, [make_font()])

    assert not report.ok
    assert [f.kind for f in report.failures] == [FailureKind.METHOD_NOT_FOUND]
    assert (root / _RES_FONT / "roboto.xml").exists()
    assert "ReactFontManager;" in (root / _JAVA_SOURCE).read_text(encoding="utf-8")


def test_unlink_restores_sources(
    make_font: FontFactory, android_project: ProjectFactory, java_main_application: str
) -> None:
    root = android_project(java_main_application, "java")
    link_fonts(root, [make_font("Roboto", "Regular", 400), make_font("Lato", "Regular", 400)])

    report = unlink_fonts(root, ["Roboto"])

    assert report.ok
    assert sorted(p.name for p in (root / _RES_FONT).iterdir()) == ["lato.xml", "lato_regular.ttf"]
    source = (root / _JAVA_SOURCE).read_text(encoding="utf-8")
    assert "Roboto" not in source
    assert 'addCustomFont(this, "Lato", R.font.lato);' in source

    unlink_fonts(root, ["Lato"])

    source = (root / _JAVA_SOURCE).read_text(encoding="utf-8")
    assert "ReactFontManager" not in source
    assert "super.onCreate();\n    SoLoader.init(this, false);" in source


def test_unlink_unknown_family_is_a_no_op(android_project: ProjectFactory, java_main_application: str) -> None:
    root = android_project(java_main_application, "java")

    report = unlink_fonts(root, ["Missing"])

    assert report.ok
    assert report.removed == []
    assert (root / _JAVA_SOURCE).read_text(encoding="utf-8") == java_main_application


def test_kotlin_prefix_import_survives_link_and_unlink(
    make_font: FontFactory, android_project: ProjectFactory, kotlin_main_application: str
) -> None:
    source = kotlin_main_application.replace(
        "import android.app.Application\n",
        "import android.app.Application\nimport com.facebook.react.views.text.ReactFontManagerCompat\n",
    )
    root = android_project(source, "kt")

    report = link_fonts(root, [make_font("Roboto", "Regular", 400)])

    linked = (root / _KOTLIN_SOURCE).read_text(encoding="utf-8")
    assert report.ok
    assert "import com.facebook.react.views.text.ReactFontManager\n" in linked

    unlink_fonts(root, ["Roboto"])

    unlinked = (root / _KOTLIN_SOURCE).read_text(encoding="utf-8")
    assert "import com.facebook.react.views.text.ReactFontManager\n" not in unlinked
    assert "import com.facebook.react.views.text.ReactFontManagerCompat\n" in unlinked


def test_unreadable_font_leaves_project_untouched(
    make_font: FontFactory, android_project: ProjectFactory, java_main_application: str, tmp_path: Path
) -> None:
    root = android_project(java_main_application, "java")
    broken = tmp_path / "Broken-Regular.ttf"
    broken.write_bytes(b"definitely not a font file")

    with pytest.raises(FontReadError):
        link_fonts(root, [make_font("Roboto", "Regular", 400), broken])

    assert not (root / _RES_FONT).exists()
    assert (root / _JAVA_SOURCE).read_text(encoding="utf-8") == java_main_application
