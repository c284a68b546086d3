# -*- coding: utf-8 -*-
"""
Tests for the command line entry point.
"""
import io
from unittest.mock import patch

import pytest

from markup_cleaner.__main__ import _build_arg_parser, clean, main
from markup_cleaner.config import settings


class TestArgParser:
    """Tests for argument parsing."""

    def test_no_command(self):
        """Without a command nothing is selected."""
        args = _build_arg_parser().parse_args([])

        assert args.command is None

    def test_serve_defaults(self):
        """Host and port default to the settings."""
        args = _build_arg_parser().parse_args(["serve"])

        assert args.host == settings.HOST
        assert args.port == settings.PORT

    def test_unknown_format_is_rejected(self, tmp_path):
        """Only raw, beautify and minify are accepted."""
        source = tmp_path / "in.html"
        source.write_text("<p>x</p>", encoding="utf-8")

        with pytest.raises(SystemExit):
            _build_arg_parser().parse_args(["clean", str(source), "--format", "pretty"])


class TestClean:
    """Tests for the clean command."""

    def test_clean_raw(self):
        """Raw output is the normalized fragment."""
        assert clean("<p>H2: Pricing</p>") == "<h2>Pricing</h2>"

    def test_clean_minify(self):
        """Minified output has no layout whitespace."""
        assert clean("<ul>\n  <li>a</li>\n</ul>", "minify") == "<ul><li>a</li></ul>"

    def test_clean_file(self, tmp_path, capsys):
        """The file is normalized and printed."""
        source = tmp_path / "export.html"
        source.write_text(
            '<meta charset="utf-8"><p class="MsoNormal">Call 1300 123 456</p>',
            encoding="utf-8",
        )

        assert main(["clean", str(source)]) == 0

        assert capsys.readouterr().out == (
            '<p>Call <a href="tel:1300123456">1300 123 456</a></p>\n'
        )

    def test_clean_stdin(self, monkeypatch, capsys):
        """A dash reads the markup from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("<p>H1: Title</p>"))

        assert main(["clean", "-"]) == 0

        assert capsys.readouterr().out == "<h1>Title</h1>\n"


class TestServe:
    """Tests for the serve command."""

    def test_serve_runs_uvicorn(self):
        """The service app is handed to uvicorn."""
        with patch("markup_cleaner.__main__.uvicorn.run") as run:
            assert main(["serve", "--port", "9001"]) == 0

        run.assert_called_once()
        assert run.call_args.args == ("markup_cleaner.api:app",)
        assert run.call_args.kwargs["port"] == 9001

    def test_default_command_is_serve(self):
        """Running without a command starts the service."""
        with patch("markup_cleaner.__main__.uvicorn.run") as run:
            assert main([]) == 0

        assert run.call_args.kwargs["host"] == settings.HOST
        assert run.call_args.kwargs["port"] == settings.PORT
