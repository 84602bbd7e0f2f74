"""Tests for style resolution and JSON style files."""

import json

import pytest

from sourcelight.config import load_style, resolve_style, style_from_dict
from sourcelight.errors import StyleConfigError, StyleNotFoundError
from sourcelight.style import HighlightStyle


class TestResolveStyle:
    def test_none(self):
        assert resolve_style("none").configured() == {}
        assert resolve_style(None).configured() == {}

    def test_vim(self):
        assert resolve_style("vim") == HighlightStyle.make_vim_style()

    def test_pygments(self):
        assert resolve_style("monokai").keyword.is_set()

    def test_unknown(self):
        with pytest.raises(StyleNotFoundError):
            resolve_style("no-such-style-xyz")


class TestLoadStyle:
    def test_none_returns_none(self):
        assert load_style(None) is None

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(StyleConfigError):
            load_style(str(tmp_path / "nope.json"))

    def test_loads_valid_json(self, tmp_path):
        f = tmp_path / "style.json"
        f.write_text(json.dumps({
            "keyword": ["<k>", "</k>"],
            "comment": ["${ansi.fg.blue}", "${ansi.normal}"],
        }))
        style = load_style(str(f))
        assert style.keyword.apply("if") == "<k>if</k>"
        assert style.comment.prefix == "\033[34m"
        assert not style.identifier.is_set()

    def test_base_style_is_extended(self, tmp_path):
        f = tmp_path / "style.json"
        f.write_text(json.dumps({"base": "vim", "braces": ["<b>", "</b>"]}))
        style = load_style(str(f))
        assert style.keyword.is_set()
        assert style.braces.apply("{") == "<b>{</b>"

    def test_rejects_invalid_json(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text("{not json")
        with pytest.raises(StyleConfigError):
            load_style(str(f))

    def test_rejects_non_dict(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text(json.dumps(["not", "a", "dict"]))
        with pytest.raises(StyleConfigError):
            load_style(str(f))


class TestStyleFromDict:
    def test_unknown_category(self):
        with pytest.raises(StyleConfigError, match="Unknown style category 'bogus'"):
            style_from_dict({"bogus": ["a", "b"]})

    @pytest.mark.parametrize("value", [
        "<k>",
        ["<k>"],
        ["<k>", "</k>", "x"],
        ["<k>", 3],
    ])
    def test_bad_pairs(self, value):
        with pytest.raises(StyleConfigError):
            style_from_dict({"keyword": value})

    def test_bad_base(self):
        with pytest.raises(StyleConfigError):
            style_from_dict({"base": 1})

    def test_unknown_base(self):
        with pytest.raises(StyleNotFoundError):
            style_from_dict({"base": "no-such-style-xyz"})

    def test_selected(self):
        style = style_from_dict({"selected": ["[", "]"]})
        assert style.selected.apply("x") == "[x]"
