"""Language tags and their mapping to highlighter families.

Language identifiers follow the DWARF ``DW_LANG_*`` codes that debuggers
record in debug info, so a host can pass the tag it already has.  Textual
names (``"c++"``, ``"objc"``, ``"java"``) are resolved through Pygments'
lexer alias registry.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import PurePath

from pygments.lexers import (
    AdaLexer,
    CLexer,
    CppLexer,
    DLexer,
    DelphiLexer,
    FortranLexer,
    GoLexer,
    HaskellLexer,
    JavaLexer,
    JuliaLexer,
    ObjectiveCLexer,
    ObjectiveCppLexer,
    OcamlLexer,
    PythonLexer,
    RustLexer,
    SwiftLexer,
    find_lexer_class_by_name,
)
from pygments.util import ClassNotFound


class LanguageType(IntEnum):
    UNKNOWN = 0x0000
    C89 = 0x0001
    C = 0x0002
    ADA83 = 0x0003
    C_PLUS_PLUS = 0x0004
    COBOL74 = 0x0005
    COBOL85 = 0x0006
    FORTRAN77 = 0x0007
    FORTRAN90 = 0x0008
    PASCAL83 = 0x0009
    MODULA2 = 0x000A
    JAVA = 0x000B
    C99 = 0x000C
    ADA95 = 0x000D
    FORTRAN95 = 0x000E
    PLI = 0x000F
    OBJC = 0x0010
    OBJC_PLUS_PLUS = 0x0011
    UPC = 0x0012
    D = 0x0013
    PYTHON = 0x0014
    OPENCL = 0x0015
    GO = 0x0016
    MODULA3 = 0x0017
    HASKELL = 0x0018
    C_PLUS_PLUS_03 = 0x0019
    C_PLUS_PLUS_11 = 0x001A
    OCAML = 0x001B
    RUST = 0x001C
    C11 = 0x001D
    SWIFT = 0x001E
    JULIA = 0x001F
    DYLAN = 0x0020
    C_PLUS_PLUS_14 = 0x0021
    FORTRAN03 = 0x0022
    FORTRAN08 = 0x0023


C_FAMILY = frozenset({
    LanguageType.C89,
    LanguageType.C,
    LanguageType.C99,
    LanguageType.C11,
    LanguageType.C_PLUS_PLUS,
    LanguageType.C_PLUS_PLUS_03,
    LanguageType.C_PLUS_PLUS_11,
    LanguageType.C_PLUS_PLUS_14,
    LanguageType.OBJC,
    LanguageType.OBJC_PLUS_PLUS,
})

# Compared against the lower-cased suffix, so ".C" and ".CC" match too.
C_FAMILY_EXTENSIONS = frozenset({".c", ".cc", ".cpp", ".cxx", ".h", ".hpp"})

LEXER_MAP = {
    CLexer: LanguageType.C,
    CppLexer: LanguageType.C_PLUS_PLUS,
    ObjectiveCLexer: LanguageType.OBJC,
    ObjectiveCppLexer: LanguageType.OBJC_PLUS_PLUS,
    JavaLexer: LanguageType.JAVA,
    PythonLexer: LanguageType.PYTHON,
    GoLexer: LanguageType.GO,
    HaskellLexer: LanguageType.HASKELL,
    JuliaLexer: LanguageType.JULIA,
    OcamlLexer: LanguageType.OCAML,
    RustLexer: LanguageType.RUST,
    SwiftLexer: LanguageType.SWIFT,
    DelphiLexer: LanguageType.PASCAL83,
    AdaLexer: LanguageType.ADA95,
    FortranLexer: LanguageType.FORTRAN95,
    DLexer: LanguageType.D,
}

# Standard revisions have no Pygments alias of their own.
REVISION_NAMES = {
    "c89": LanguageType.C89,
    "c99": LanguageType.C99,
    "c11": LanguageType.C11,
    "c++03": LanguageType.C_PLUS_PLUS_03,
    "c++11": LanguageType.C_PLUS_PLUS_11,
    "c++14": LanguageType.C_PLUS_PLUS_14,
}


def language_from_name(name: str | None) -> LanguageType:
    """Resolve a textual language name to a tag, or UNKNOWN if unresolvable."""
    if not name:
        return LanguageType.UNKNOWN
    key = name.strip().lower()
    if key in REVISION_NAMES:
        return REVISION_NAMES[key]
    member = LanguageType.__members__.get(key.upper().replace("-", "_"))
    if member is not None:
        return member
    try:
        lexer_cls = find_lexer_class_by_name(key)
    except ClassNotFound:
        return LanguageType.UNKNOWN
    return LEXER_MAP.get(lexer_cls, LanguageType.UNKNOWN)


def is_c_family(language: LanguageType) -> bool:
    return language in C_FAMILY


def has_c_family_extension(path: str | None) -> bool:
    """True if the final component of *path* carries a C-family suffix."""
    if not path:
        return False
    return PurePath(path).suffix.lower() in C_FAMILY_EXTENSIONS


def coerce_language(value: LanguageType | int | str | None) -> LanguageType:
    """Accept a tag, a raw DWARF code or a name; anything else is UNKNOWN."""
    if isinstance(value, LanguageType):
        return value
    if value is None or isinstance(value, str):
        return language_from_name(value)
    try:
        return LanguageType(value)
    except ValueError:
        return LanguageType.UNKNOWN
