import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Dialect(str, Enum):
    JAVA = "java"
    KOTLIN = "kotlin"


@dataclass(frozen=True)
class DialectGrammar:
    """Regex fragments and statement conventions for one source dialect.

    The ``*_template`` strings take a regex-escaped identifier via ``{name}``.
    """

    dialect: Dialect
    source_extension: str
    terminator: str
    class_template: str
    method_template: str
    package_pattern: re.Pattern[str]

    def class_pattern(self, class_name: str) -> re.Pattern[str]:
        return re.compile(self.class_template.format(name=re.escape(class_name)), re.MULTILINE)

    def method_pattern(self, method_name: str) -> re.Pattern[str]:
        return re.compile(self.method_template.format(name=re.escape(method_name)), re.MULTILINE)

    def statement(self, code: str) -> str:
        return f"{code}{self.terminator}"

    def import_statement(self, import_path: str) -> str:
        return self.statement(f"import {import_path}")

    def import_pattern(self, import_path: str) -> re.Pattern[str]:
        return re.compile(
            rf"import\s+{re.escape(import_path)}(?![\w.]){re.escape(self.terminator)}", re.MULTILINE
        )


_JAVA = DialectGrammar(
    dialect=Dialect.JAVA,
    source_extension="java",
    terminator=";",
    class_template=r"class\s+{name}(\s+extends\s+\S+)?(\s+implements\s+\S+)?\s*\{{",
    method_template=r"(public|protected|private)\s+(static\s+)?\S+\s+{name}\s*\(",
    package_pattern=re.compile(r"package\s+[\w.]+;"),
)

_KOTLIN = DialectGrammar(
    dialect=Dialect.KOTLIN,
    source_extension="kt",
    terminator="",
    class_template=r"class\s+{name}\s*:\s*\S+\(\)\s*,?\s*(\S+\s*)?\{{",
    method_template=r"override\s+fun\s+{name}\s*\(\)",
    package_pattern=re.compile(r"package\s+[\w.]+"),
)

GRAMMARS: Mapping[Dialect, DialectGrammar] = MappingProxyType({Dialect.JAVA: _JAVA, Dialect.KOTLIN: _KOTLIN})


def dialect_from_flag(is_kotlin: bool) -> Dialect:
    return Dialect.KOTLIN if is_kotlin else Dialect.JAVA
