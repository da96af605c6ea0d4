"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps every message of the validator:
        - Testable in isolation
        - Consistently worded
        - Documented in one place

    Every template receives the lookahead location and its rendering
    (``found``) captured at the point of detection.
    """

    _VALID_ESCAPES = "\\\" \\\\ \\/ \\b \\f \\n \\r \\t \\uXXXX"

    @staticmethod
    def _syntax(
        code: DiagnosticCode,
        message: str,
        location: SourceLocation,
        found: str,
        rule: str,
        hint: str | None = None,
    ) -> Diagnostic:
        return Diagnostic(
            code=code,
            message=message,
            location=location,
            found=found,
            rule=rule,
            hint=hint,
        )

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    @staticmethod
    def expected_root(location: SourceLocation, found: str) -> Diagnostic:
        """Document does not start with an object or an array.

        Covers empty input as well as scalar roots such as ``true``.

        Returns:
            Diagnostic for EXPECTED_ROOT
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_ROOT,
            "expected an object or array",
            location,
            found,
            "document",
            hint="A JSON document must start with '{' or '['",
        )

    @staticmethod
    def expected_eof(location: SourceLocation, found: str) -> Diagnostic:
        """Content remains after the top-level object or array.

        Returns:
            Diagnostic for EXPECTED_EOF
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_EOF,
            "expected end of input",
            location,
            found,
            "document",
            hint="Remove everything after the closing '}' or ']'",
        )

    # ------------------------------------------------------------------
    # Object / pair
    # ------------------------------------------------------------------

    @staticmethod
    def expected_pair_after_comma(location: SourceLocation, found: str) -> Diagnostic:
        """Object member separator not followed by a pair.

        Returns:
            Diagnostic for EXPECTED_PAIR_AFTER_COMMA
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_PAIR_AFTER_COMMA,
            "expected another pair after ','",
            location,
            found,
            "object",
            hint="Trailing commas are not allowed in JSON objects",
        )

    @staticmethod
    def expected_pair_or_close_brace(location: SourceLocation, found: str) -> Diagnostic:
        """Object neither continues with a pair nor closes.

        Returns:
            Diagnostic for EXPECTED_PAIR_OR_CLOSE_BRACE
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_PAIR_OR_CLOSE_BRACE,
            "expected a pair or '}' to end object",
            location,
            found,
            "object",
            hint="Object members are separated by ',' and names must be double-quoted",
        )

    @staticmethod
    def expected_colon(location: SourceLocation, found: str) -> Diagnostic:
        """Object member name not followed by ':'.

        Returns:
            Diagnostic for EXPECTED_COLON
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_COLON,
            "expected a ':' after object name",
            location,
            found,
            "pair",
        )

    @staticmethod
    def expected_value_after_colon(location: SourceLocation, found: str) -> Diagnostic:
        """Object member has a name but no value.

        Returns:
            Diagnostic for EXPECTED_VALUE_AFTER_COLON
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_VALUE_AFTER_COLON,
            "expected a value after ':'",
            location,
            found,
            "pair",
            hint="Values are strings, numbers, objects, arrays, true, false or null",
        )

    # ------------------------------------------------------------------
    # Array
    # ------------------------------------------------------------------

    @staticmethod
    def expected_value_after_comma(location: SourceLocation, found: str) -> Diagnostic:
        """Array element separator not followed by a value.

        Returns:
            Diagnostic for EXPECTED_VALUE_AFTER_COMMA
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_VALUE_AFTER_COMMA,
            "expected another value after ','",
            location,
            found,
            "array",
            hint="Trailing commas are not allowed in JSON arrays",
        )

    @staticmethod
    def expected_close_bracket(location: SourceLocation, found: str) -> Diagnostic:
        """Array neither continues with a value nor closes.

        Returns:
            Diagnostic for EXPECTED_CLOSE_BRACKET
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_CLOSE_BRACKET,
            "expected a ']' to end array",
            location,
            found,
            "array",
        )

    # ------------------------------------------------------------------
    # String
    # ------------------------------------------------------------------

    @staticmethod
    def unterminated_string(location: SourceLocation, found: str) -> Diagnostic:
        """String body ended without a closing quote.

        Also reported when a backslash is followed by an unknown escape
        character, since the string body cannot continue past it.

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.UNTERMINATED_STRING,
            "expected a '\"' to end a string",
            location,
            found,
            "string",
            hint=f"Valid escape sequences are {ErrorTemplate._VALID_ESCAPES}",
        )

    @staticmethod
    def invalid_unicode_escape(location: SourceLocation, found: str) -> Diagnostic:
        """Unicode escape with fewer than four hex digits.

        Returns:
            Diagnostic for INVALID_UNICODE_ESCAPE
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.INVALID_UNICODE_ESCAPE,
            "expected exactly 4 hex digits after '\\u'",
            location,
            found,
            "escape",
            hint="Write code points as \\uXXXX, e.g. \\u00e9",
        )

    # ------------------------------------------------------------------
    # Number
    # ------------------------------------------------------------------

    @staticmethod
    def expected_integer_digit(location: SourceLocation, found: str) -> Diagnostic:
        """Minus sign not followed by an integer part.

        Returns:
            Diagnostic for EXPECTED_INTEGER_DIGIT
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_INTEGER_DIGIT,
            "expected a digit after '-'",
            location,
            found,
            "number",
        )

    @staticmethod
    def expected_fraction_digit(location: SourceLocation, found: str) -> Diagnostic:
        """Decimal point not followed by a digit.

        Returns:
            Diagnostic for EXPECTED_FRACTION_DIGIT
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_FRACTION_DIGIT,
            "expected an integer after '.'",
            location,
            found,
            "number",
        )

    @staticmethod
    def expected_exponent_digit(location: SourceLocation, found: str) -> Diagnostic:
        """Exponent marker (and optional sign) not followed by a digit.

        Returns:
            Diagnostic for EXPECTED_EXPONENT_DIGIT
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.EXPECTED_EXPONENT_DIGIT,
            "expected a number after exponent character",
            location,
            found,
            "number",
        )

    # ------------------------------------------------------------------
    # Keywords
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_token(keyword: str, location: SourceLocation, found: str) -> Diagnostic:
        """Keyword started but not completed.

        Args:
            keyword: The keyword being matched (``true``, ``false`` or ``null``)
            location: Lookahead location at the mismatch
            found: Rendering of the mismatching lookahead

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.UNEXPECTED_TOKEN,
            f"unexpected token in '{keyword}'",
            location,
            found,
            keyword,
            hint="Keywords are lowercase: true, false, null",
        )

    # ------------------------------------------------------------------
    # Limits
    # ------------------------------------------------------------------

    @staticmethod
    def nesting_depth_exceeded(
        max_depth: int, rule: str, location: SourceLocation, found: str
    ) -> Diagnostic:
        """Objects or arrays nested deeper than allowed.

        Args:
            max_depth: Configured nesting limit
            rule: Rule that tried to open the extra level (``object`` or ``array``)
            location: Lookahead location after the opening token
            found: Rendering of the lookahead

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return ErrorTemplate._syntax(
            DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            f"maximum nesting depth ({max_depth}) exceeded",
            location,
            found,
            rule,
            hint="Raise ValidatorConfig.max_nesting_depth for deeply nested documents",
        )
