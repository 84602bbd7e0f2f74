"""Tests for language tags and name resolution — no mocking needed."""

from pygments.lexers import CLexer, CppLexer, JavaLexer, ObjectiveCLexer

from sourcelight.lang import (
    C_FAMILY,
    LEXER_MAP,
    LanguageType,
    coerce_language,
    has_c_family_extension,
    is_c_family,
    language_from_name,
)


class TestLanguageFromName:
    def test_enum_member_names(self):
        assert language_from_name("java") is LanguageType.JAVA
        assert language_from_name("C_PLUS_PLUS_14") is LanguageType.C_PLUS_PLUS_14
        assert language_from_name("objc-plus-plus") is LanguageType.OBJC_PLUS_PLUS

    def test_pygments_aliases(self):
        assert language_from_name("c++") is LanguageType.C_PLUS_PLUS
        assert language_from_name("cpp") is LanguageType.C_PLUS_PLUS
        assert language_from_name("obj-c") is LanguageType.OBJC
        assert language_from_name("hs") is LanguageType.HASKELL

    def test_revisions(self):
        assert language_from_name("C99") is LanguageType.C99
        assert language_from_name(" c++03 ") is LanguageType.C_PLUS_PLUS_03

    def test_unknown(self):
        assert language_from_name(None) is LanguageType.UNKNOWN
        assert language_from_name("") is LanguageType.UNKNOWN
        assert language_from_name("klingon") is LanguageType.UNKNOWN

    def test_lexer_without_tag_is_unknown(self):
        # Pygments knows YAML, but no DWARF tag is mapped to it.
        assert language_from_name("yaml") is LanguageType.UNKNOWN


class TestCoerceLanguage:
    def test_passes_tags_through(self):
        assert coerce_language(LanguageType.OBJC) is LanguageType.OBJC

    def test_raw_codes(self):
        assert coerce_language(0x0002) is LanguageType.C
        assert coerce_language(0x8001) is LanguageType.UNKNOWN

    def test_names(self):
        assert coerce_language("c") is LanguageType.C
        assert coerce_language(None) is LanguageType.UNKNOWN


class TestCFamily:
    def test_members(self):
        assert len(C_FAMILY) == 10
        assert is_c_family(LanguageType.C_PLUS_PLUS_11)
        assert not is_c_family(LanguageType.JAVA)
        assert not is_c_family(LanguageType.UNKNOWN)

    def test_extensions(self):
        assert has_c_family_extension("src/a.CXX")
        assert not has_c_family_extension("src/a.cs")
        assert not has_c_family_extension(None)
        assert not has_c_family_extension("")


class TestLexerMap:
    def test_lexers_are_correct_types(self):
        assert LEXER_MAP[CLexer] is LanguageType.C
        assert LEXER_MAP[CppLexer] is LanguageType.C_PLUS_PLUS
        assert LEXER_MAP[ObjectiveCLexer] is LanguageType.OBJC
        assert LEXER_MAP[JavaLexer] is LanguageType.JAVA
