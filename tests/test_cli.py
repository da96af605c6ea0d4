"""Tests for the jsonsyntax command-line interface."""

from __future__ import annotations

import io
import json
import runpy
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from jsonsyntax.cli import EXIT_INVALID, EXIT_OK, EXIT_UNREADABLE, EXIT_USAGE, main


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[..., str]:
    """Write a document to a temporary file and return its path."""

    def _write(text: str, encoding: str = "utf-8") -> str:
        path = tmp_path / "doc.json"
        path.write_text(text, encoding=encoding)
        return str(path)

    return _write


class TestFileInput:
    """Validating files."""

    def test_valid_file(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """Valid documents print the success message and exit 0."""
        assert main([write_doc('{"a": [1, 2]}')]) == EXIT_OK
        assert capsys.readouterr().out == "Successful parse!\n"

    def test_invalid_file(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """Invalid documents print one error line to stdout and exit 1."""
        assert main([write_doc('{"a":1,}')]) == EXIT_INVALID
        assert capsys.readouterr().out == (
            "ERROR(1:8): expected another pair after ',' (next: '}')\n"
        )

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Unopenable input exits 3 with a message on stderr."""
        assert main([str(tmp_path / "absent.json")]) == EXIT_UNREADABLE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot open" in captured.err

    def test_undecodable_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Bytes that do not decode exit 3."""
        path = tmp_path / "bad.json"
        path.write_bytes(b'["\xff"]')

        assert main([str(path)]) == EXIT_UNREADABLE
        assert "[ERROR]" in capsys.readouterr().err

    def test_crlf_preserved(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """CRLF files are read without newline translation."""
        path = tmp_path / "crlf.json"
        path.write_bytes(b"[\r\n1,\r\n]")

        assert main([str(path)]) == EXIT_INVALID
        assert capsys.readouterr().out.startswith("ERROR(5:1)")

    def test_encoding_option(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """--encoding selects the decoder."""
        path = write_doc('["café"]', encoding="latin-1")

        assert main(["--encoding", "latin-1", path]) == EXIT_OK
        capsys.readouterr()

    def test_unknown_encoding(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown codec is an input error."""
        assert main(["--encoding", "no-such-codec", write_doc("[]")]) == EXIT_UNREADABLE
        capsys.readouterr()


class TestStdinInput:
    """Validating standard input."""

    def test_stdin_default(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """No FILE argument reads standard input."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("[1, 2, 3]"))

        assert main([]) == EXIT_OK
        assert capsys.readouterr().out == "Successful parse!\n"

    def test_stdin_dash(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """'-' reads standard input."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("true"))

        assert main(["-"]) == EXIT_INVALID
        assert capsys.readouterr().out.startswith("ERROR(1:1): expected an object or array")

    def test_stdin_binary_buffer(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Real stdin is re-wrapped with the requested encoding."""
        raw = io.TextIOWrapper(io.BytesIO('["é"]'.encode("utf-16")), encoding="ascii")
        monkeypatch.setattr(sys, "stdin", raw)

        assert main(["--encoding", "utf-16"]) == EXIT_OK
        assert capsys.readouterr().out == "Successful parse!\n"


class TestOptions:
    """Output and validation options."""

    def test_json_format(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """--format json prints a JSON object."""
        assert main(["--format", "json", write_doc("[1,]")]) == EXIT_INVALID
        data = json.loads(capsys.readouterr().out)
        assert data["code"] == "EXPECTED_VALUE_AFTER_COMMA"
        assert (data["row"], data["column"]) == (1, 4)

    def test_rust_format(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """--format rust prints the multi-line report."""
        assert main(["--format", "rust", write_doc("[1,]")]) == EXIT_INVALID
        assert capsys.readouterr().out.startswith("error[EXPECTED_VALUE_AFTER_COMMA]")

    def test_strict_whitespace(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """--strict-whitespace rejects spaced documents."""
        path = write_doc("[1, 2]")

        assert main([path]) == EXIT_OK
        assert main(["--strict-whitespace", path]) == EXIT_INVALID
        capsys.readouterr()

    def test_max_depth(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """--max-depth limits nesting."""
        assert main(["--max-depth", "2", write_doc("[[[]]]")]) == EXIT_INVALID
        assert "maximum nesting depth (2) exceeded" in capsys.readouterr().out

    def test_escape(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """--escape keeps the report on one line."""
        path = write_doc("[1\n]")

        assert main(["--escape", "--strict-whitespace", path]) == EXIT_INVALID
        assert capsys.readouterr().out == "ERROR(2:0): expected a ']' to end array (next: '\\n')\n"

    def test_trace_goes_to_stderr(self, write_doc, capsys: pytest.CaptureFixture[str]) -> None:
        """--trace writes the rule tree to stderr only."""
        assert main(["--trace", write_doc("[]")]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "Successful parse!\n"
        assert captured.err.startswith("+-document: enter")

    @pytest.mark.parametrize("argv", [["--max-depth", "0"], ["--max-depth", "x"], ["--bogus"]])
    def test_usage_errors(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        """Bad arguments exit 2."""
        assert main(argv) == EXIT_USAGE
        assert "usage:" in capsys.readouterr().err

    def test_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--help exits 0."""
        assert main(["--help"]) == EXIT_OK
        assert "--strict-whitespace" in capsys.readouterr().out


class TestModuleEntryPoint:
    """python -m jsonsyntax."""

    def test_run_module(
        self,
        write_doc,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """The package runs as a module and exits with main()'s code."""
        monkeypatch.setattr(sys, "argv", ["jsonsyntax", write_doc("{}")])

        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("jsonsyntax", run_name="__main__")

        assert exc_info.value.code == EXIT_OK
        assert capsys.readouterr().out == "Successful parse!\n"
