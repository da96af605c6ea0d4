"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    CLASSIC = "classic"  # ERROR(row:col): message (next: 'x') (default)
    RUST = "rust"  # Rust compiler-style output
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (classic, rust, json)
        color: Enable ANSI color codes (for terminal output, rust style only)
        escape_found: Render control characters in the lookahead as escapes
            (``\\n`` instead of a raw newline) so the report stays on one line

    Example:
        >>> from jsonsyntax.diagnostics import ErrorTemplate, SourceLocation
        >>> diagnostic = ErrorTemplate.expected_value_after_colon(SourceLocation(1, 6, 5), "}")
        >>> print(DiagnosticFormatter().format(diagnostic))
        ERROR(1:6): expected a value after ':' (next: '}')

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.RUST)
        >>> print(formatter.format(diagnostic))
        error[EXPECTED_VALUE_AFTER_COLON]: expected a value after ':'
          --> row 1, column 6
          = found: '}'
          = rule: pair
          = help: Values are strings, numbers, objects, arrays, true, false or null
    """

    output_format: OutputFormat = OutputFormat.CLASSIC
    color: bool = False
    escape_found: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.CLASSIC:
                return self._format_classic(diagnostic)
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_result(self, result: "ValidationResult", success_message: str) -> str:
        """Format a ValidationResult as the single report line of a run.

        Args:
            result: Outcome of one validation run
            success_message: Text reported when the document is valid

        Returns:
            ``success_message`` for valid documents, otherwise the formatted
            diagnostic
        """
        if result.diagnostic is None:
            if self.output_format is OutputFormat.JSON:
                import json  # noqa: PLC0415

                return json.dumps({"valid": True, "message": success_message})
            return success_message
        return self.format(result.diagnostic)

    def _found(self, diagnostic: Diagnostic) -> str:
        found = diagnostic.found if diagnostic.found is not None else ""
        if self.escape_found and not found.isprintable():
            return found.encode("unicode_escape").decode("ascii")
        return found

    def _format_classic(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as the one-line validator report.

        Example output:
            ERROR(1:6): expected a value after ':' (next: '}')
        """
        if diagnostic.location is None:
            return f"ERROR: {diagnostic.message}"
        location = diagnostic.location
        return (
            f"ERROR({location.row}:{location.column}): {diagnostic.message} "
            f"(next: '{self._found(diagnostic)}')"
        )

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[EXPECTED_COLON]: expected a ':' after object name
              --> row 1, column 5
              = found: '1'
              = rule: pair
        """
        severity_str = "\033[1;31merror\033[0m" if self.color else "error"

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.location:
            parts.append(
                f"  --> row {diagnostic.location.row}, column {diagnostic.location.column}"
            )

        if diagnostic.found is not None:
            parts.append(f"  = found: '{self._found(diagnostic)}'")

        if diagnostic.rule:
            parts.append(f"  = rule: {diagnostic.rule}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"valid": false, "code": "EXPECTED_COLON", "message": "...", "row": 1, ...}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | bool | None] = {
            "valid": False,
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
        }

        if diagnostic.location:
            data["row"] = diagnostic.location.row
            data["column"] = diagnostic.location.column
            data["offset"] = diagnostic.location.offset

        if diagnostic.found is not None:
            data["found"] = diagnostic.found

        if diagnostic.rule:
            data["rule"] = diagnostic.rule

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
