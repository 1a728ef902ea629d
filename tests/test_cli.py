# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Unit tests for cli.py."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from conftest import write_glyph_list

from glyphlist import __version__
from glyphlist.cli import (
    EXIT_FILE_NOT_FOUND,
    EXIT_GENERAL_ERROR,
    EXIT_INSPECTION_FAILED,
    EXIT_SUCCESS,
    main,
)
from glyphlist.config import GLYPHLIST_PATH_ENV, GLYPHLIST_STRICT_ENV
from glyphlist.exceptions import InspectionError


@pytest.fixture
def runner() -> CliRunner:
    """CLI Test Runner."""
    return CliRunner()


class TestCliHelp:
    """Tests for --help and --version."""

    def test_cli_help(self, runner: CliRunner) -> None:
        """--help lists global options and commands."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "--glyph-list" in result.output
        assert "--strict" in result.output
        assert "--quiet" in result.output
        assert "--verbose" in result.output
        for command in ("lookup", "font", "pdf"):
            assert command in result.output

    def test_cli_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestCliLookup:
    """Tests for the lookup command."""

    def test_lookup_bundled(self, runner: CliRunner) -> None:
        """Known names print their code points and text."""
        result = runner.invoke(main, ["lookup", "Aacute", "dalethatafpatah"])

        assert result.exit_code == EXIT_SUCCESS
        assert 'Aacute -> U+00C1 "\u00c1"' in result.output
        assert "dalethatafpatah -> U+05D3 U+05B2" in result.output

    def test_lookup_custom_list(self, runner: CliRunner, glyph_list_file: Path) -> None:
        result = runner.invoke(
            main, ["--glyph-list", str(glyph_list_file), "lookup", "Aringacute"]
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "Aringacute -> U+00C5 U+0301" in result.output

    def test_lookup_env_list(
        self,
        runner: CliRunner,
        glyph_list_file: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """GLYPHLIST_PATH selects the glyph list."""
        monkeypatch.setenv(GLYPHLIST_PATH_ENV, str(glyph_list_file))

        result = runner.invoke(main, ["lookup", "Aringacute"])

        assert "U+00C5 U+0301" in result.output

    def test_lookup_empty_list_does_not_fall_back(
        self, runner: CliRunner, tmp_dir: Path
    ) -> None:
        """A glyph list without mappings resolves nothing."""
        path = write_glyph_list(tmp_dir, "# no mappings\n")

        result = runner.invoke(main, ["--glyph-list", str(path), "lookup", "A"])

        assert result.exit_code == EXIT_SUCCESS
        assert "A -> U+0041" not in result.output
        assert "A: not in Adobe Glyph List" in result.output

    def test_env_list_strict_malformed(
        self,
        runner: CliRunner,
        tmp_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """GLYPHLIST_STRICT applies to a list selected by GLYPHLIST_PATH."""
        path = write_glyph_list(tmp_dir, "A 0041\nbroken\n")
        monkeypatch.setenv(GLYPHLIST_PATH_ENV, str(path))
        monkeypatch.setenv(GLYPHLIST_STRICT_ENV, "1")

        result = runner.invoke(main, ["lookup", "A"])

        assert result.exit_code == EXIT_GENERAL_ERROR
        assert "Line 2" in result.output

    def test_env_list_strict_flag(
        self,
        runner: CliRunner,
        tmp_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """--strict applies to a list selected by GLYPHLIST_PATH."""
        path = write_glyph_list(tmp_dir, "A 0041\nbroken\n")
        monkeypatch.setenv(GLYPHLIST_PATH_ENV, str(path))

        result = runner.invoke(main, ["--strict", "lookup", "A"])

        assert result.exit_code == EXIT_GENERAL_ERROR

    def test_env_list_missing_file(
        self,
        runner: CliRunner,
        tmp_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """An unreadable GLYPHLIST_PATH is reported as an error."""
        monkeypatch.setenv(GLYPHLIST_PATH_ENV, str(tmp_dir / "missing.txt"))

        result = runner.invoke(main, ["lookup", "A"])

        assert result.exit_code == EXIT_GENERAL_ERROR

    def test_lookup_missing_name(self, runner: CliRunner) -> None:
        """Unknown names are reported but do not fail by default."""
        result = runner.invoke(main, ["lookup", "__not_in_list__"])

        assert result.exit_code == EXIT_SUCCESS
        assert "__not_in_list__: not in Adobe Glyph List" in result.output

    def test_lookup_fail_missing(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["lookup", "--fail-missing", "A", "__not_in_list__"]
        )

        assert result.exit_code == EXIT_GENERAL_ERROR

    def test_lookup_quiet(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["-q", "lookup", "A", "__not_in_list__"])

        assert result.exit_code == EXIT_SUCCESS
        assert result.output == ""

    def test_lookup_requires_names(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["lookup"])

        assert result.exit_code != EXIT_SUCCESS

    def test_missing_glyph_list_file(self, runner: CliRunner, tmp_dir: Path) -> None:
        result = runner.invoke(
            main, ["--glyph-list", str(tmp_dir / "missing.txt"), "lookup", "A"]
        )

        assert result.exit_code == EXIT_FILE_NOT_FOUND

    def test_strict_malformed_list(self, runner: CliRunner, tmp_dir: Path) -> None:
        """--strict reports malformed lines of an explicit glyph list."""
        path = write_glyph_list(tmp_dir, "A 0041\nbroken\n")

        result = runner.invoke(
            main, ["--glyph-list", str(path), "--strict", "lookup", "A"]
        )

        assert result.exit_code == EXIT_GENERAL_ERROR
        assert "Line 2" in result.output

    def test_lenient_malformed_list(self, runner: CliRunner, tmp_dir: Path) -> None:
        path = write_glyph_list(tmp_dir, "A 0041\nbroken\n")

        result = runner.invoke(main, ["--glyph-list", str(path), "lookup", "A"])

        assert result.exit_code == EXIT_SUCCESS
        assert "A -> U+0041" in result.output


class TestCliFont:
    """Tests for the font command."""

    def test_font(self, runner: CliRunner, sample_font: Path) -> None:
        result = runner.invoke(main, ["font", str(sample_font)])

        assert result.exit_code == EXIT_SUCCESS
        assert "Aacute -> U+00C1" in result.output
        assert "customglyph: not in Adobe Glyph List" in result.output
        assert "sample.ttf: 2 of 4 glyph names resolved" in result.output

    def test_font_unresolved_only(self, runner: CliRunner, sample_font: Path) -> None:
        result = runner.invoke(main, ["font", "--unresolved-only", str(sample_font)])

        assert result.exit_code == EXIT_SUCCESS
        assert "Aacute -> " not in result.output
        assert ".notdef: not in Adobe Glyph List" in result.output

    def test_font_inspection_error(self, runner: CliRunner, sample_font: Path) -> None:
        with patch(
            "glyphlist.cli.font_glyph_names",
            side_effect=InspectionError("Could not read font 'sample.ttf'"),
        ):
            result = runner.invoke(main, ["font", str(sample_font)])

        assert result.exit_code == EXIT_INSPECTION_FAILED
        assert "Could not read font" in result.output

    def test_font_missing_file(self, runner: CliRunner, tmp_dir: Path) -> None:
        result = runner.invoke(main, ["font", str(tmp_dir / "missing.ttf")])

        assert result.exit_code == EXIT_FILE_NOT_FOUND


class TestCliPdf:
    """Tests for the pdf command."""

    def test_pdf(self, runner: CliRunner, sample_pdf: Path) -> None:
        result = runner.invoke(main, ["pdf", str(sample_pdf)])

        assert result.exit_code == EXIT_SUCCESS
        assert "p1 /F1 (Helvetica) 66 Aacute -> U+00C1" in result.output
        assert "p1 /F1 (Helvetica) 67 customglyph: not in" in result.output
        assert "sample.pdf: 2 of 3 /Differences glyph names resolved" in result.output

    def test_pdf_unresolved_only(self, runner: CliRunner, sample_pdf: Path) -> None:
        result = runner.invoke(main, ["pdf", "--unresolved-only", str(sample_pdf)])

        assert "Aacute -> " not in result.output
        assert "customglyph" in result.output

    def test_pdf_invalid_file(self, runner: CliRunner, tmp_dir: Path) -> None:
        bogus = tmp_dir / "bogus.pdf"
        bogus.write_bytes(b"not a pdf")

        result = runner.invoke(main, ["pdf", str(bogus)])

        assert result.exit_code == EXIT_INSPECTION_FAILED
        assert "Could not open PDF" in result.output
