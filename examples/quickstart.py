"""Quickstart example for jsonsyntax.

This example demonstrates syntax validation of JSON documents, the
diagnostic formats, strict whitespace, nesting limits and rule tracing.
"""

import io
import sys

from jsonsyntax import (
    JSONSyntaxError,
    JSONValidator,
    TreeTracer,
    ValidatorConfig,
    check,
    is_valid,
    validate,
)
from jsonsyntax.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Valid and invalid documents
print("=" * 50)
print("Example 1: Validate")
print("=" * 50)

for source in ['{"a":1}', "[1,2,3]", '{"a":1,}', '{"a":}', '["\\u12"]', "{}  extra", "true"]:
    result = validate(source)
    if result.is_valid:
        print(f"{source!r:14} -> Successful parse!")
    else:
        print(f"{source!r:14} -> {result.diagnostic.format_error()}")
# Output (third line): '{"a":1,}'     -> ERROR(1:8): expected another pair after ',' (next: '}')

# Example 2: Raising API
print("\n" + "=" * 50)
print("Example 2: check() raises")
print("=" * 50)

try:
    check('{\n  "name": "jsonsyntax",\n  "tags": ["a", "b",]\n}')
except JSONSyntaxError as e:
    print(e)
# Output: ERROR(3:21): expected another value after ',' (next: ']')

# Example 3: Richer diagnostics
print("\n" + "=" * 50)
print("Example 3: Rust-style and JSON reports")
print("=" * 50)

result = validate('{"a" 1}')
for output_format in (OutputFormat.RUST, OutputFormat.JSON):
    print(DiagnosticFormatter(output_format=output_format).format(result.diagnostic))

# Example 4: Strict whitespace and nesting limits
print("\n" + "=" * 50)
print("Example 4: Configuration")
print("=" * 50)

strict = ValidatorConfig(insignificant_whitespace=False)
print(f"strict, compact: {is_valid('[1,2]', config=strict)}")
print(f"strict, spaced:  {is_valid('[1, 2]', config=strict)}")

shallow = JSONValidator(ValidatorConfig(max_nesting_depth=2))
print(shallow.validate("[[[]]]").diagnostic.format_error())
# Output: ERROR(1:4): maximum nesting depth (2) exceeded (next: ']')

# Example 5: Streams and tracing
print("\n" + "=" * 50)
print("Example 5: Streaming input with a rule trace")
print("=" * 50)

result = JSONValidator().validate(io.StringIO("[true]"), tracer=TreeTracer(sys.stdout))
print(f"valid: {result.is_valid}, consumed: {result.consumed} code points")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
