"""Tests for source loading, script compaction and options."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
import rjsmin

from purifycss.compress import compress_code, widen_with_compressed
from purifycss.config import DEFAULT_OPTIONS, PurifyOptions
from purifycss.pipeline import purify
from purifycss.sources import concat_files, load_content, load_css


# ---------------------------------------------------------------------------
# compress_code
# ---------------------------------------------------------------------------


class TestCompressCode:
    def test_strips_comments_and_whitespace(self):
        out = compress_code("var  x = 'btn-primary';   // note\n")
        assert "note" not in out
        assert "'btn-primary'" in out

    def test_falls_back_to_raw_text(self, monkeypatch):
        def boom(script, keep_bang_comments=False):
            raise ValueError("nope")

        monkeypatch.setattr(rjsmin, "jsmin", boom)
        assert compress_code("var a = 1;") == "var a = 1;"


class TestWidenWithCompressed:
    def test_raw_text_kept_ahead_of_compacted(self):
        code = "var  x = 'a';\n"
        assert widen_with_compressed(code) == code + " " + compress_code(code)

    def test_unchanged_code_not_repeated(self):
        assert widen_with_compressed("var a=1;") == "var a=1;"

    def test_jsx_text_after_url_survives(self):
        # rjsmin reads the // of the URL as a line comment.
        jsx = (
            "const A = () => <p>see http://example.com</p>; "
            'const B = () => <div className="keep">x</div>;'
        )
        assert "keep" not in compress_code(jsx)
        assert 'classname="keep"' in widen_with_compressed(jsx).lower()


# ---------------------------------------------------------------------------
# concat_files / load_*
# ---------------------------------------------------------------------------


class TestConcatFiles:
    def test_joined_with_trailing_space(self, tmp_path: Path):
        (tmp_path / "a.css").write_text("a{}")
        (tmp_path / "b.css").write_text("b{}")
        assert concat_files([tmp_path / "a.css", tmp_path / "b.css"]) == "a{} b{} "

    def test_only_scripts_compressed(self, tmp_path: Path):
        (tmp_path / "page.html").write_text("<a href='http://x'>  </a>")
        (tmp_path / "app.js").write_text("var  a = 1; // kept\n")
        files = [tmp_path / "page.html", tmp_path / "app.js"]
        text = concat_files(files, compress=True)
        assert text.startswith("<a href='http://x'>  </a> var  a = 1; // kept\n ")
        assert "var a=1;" in text

    def test_jsx_class_names_survive_compression(self, tmp_path: Path):
        (tmp_path / "App.jsx").write_text(
            "const A = () => <p>see http://example.com</p>; "
            'const B = () => <div className="keep">x</div>;'
        )
        assert purify([tmp_path / "App.jsx"], ".keep{x:1}") == ".keep{x:1}"

    def test_no_compression_by_default(self, tmp_path: Path):
        (tmp_path / "app.js").write_text("var  a = 1; // kept\n")
        assert "kept" in concat_files([tmp_path / "app.js"])

    def test_read_error_propagates(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            concat_files([tmp_path / "missing.html"])


class TestLoaders:
    def test_css_string_passthrough(self):
        assert load_css("A { }") == "A { }"

    def test_css_files(self, tmp_path: Path):
        (tmp_path / "a.css").write_text("a{}")
        assert load_css([str(tmp_path / "a.css")]) == "a{} "

    def test_content_string_lower_cased(self):
        assert load_content("<DIV Class='X'>") == "<div class='x'>"

    def test_content_files_lower_cased(self, tmp_path: Path):
        (tmp_path / "page.html").write_text("<SPAN>")
        assert load_content([tmp_path / "page.html"]) == "<span> "


# ---------------------------------------------------------------------------
# PurifyOptions
# ---------------------------------------------------------------------------


class TestPurifyOptions:
    def test_defaults(self):
        assert DEFAULT_OPTIONS == PurifyOptions(
            output=None, minify=False, info=False, rejected=False
        )

    def test_merged_overrides(self):
        merged = DEFAULT_OPTIONS.merged(minify=True, output="out.css")
        assert merged.minify is True
        assert merged.output == "out.css"
        assert merged.info is False

    def test_merged_ignores_none(self):
        base = PurifyOptions(output="a.css")
        assert base.merged(output=None).output == "a.css"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_OPTIONS.minify = True  # type: ignore[misc]
