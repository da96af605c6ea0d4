"""Hypothesis strategies for jsonsyntax property-based testing.

Strategies are organized by domain:

- documents: valid JSON documents, whitespace runs and near-JSON noise

Usage:
    from tests.strategies import json_documents, json_noise
    from tests.strategies.documents import whitespace_runs

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - json_documents: root kind and rendering style
    - json_noise: whether the noise starts like a container
"""

from .documents import (
    JSON_NOISE_ALPHABET,
    json_documents,
    json_noise,
    json_values,
    nested_arrays,
    whitespace_runs,
)

__all__ = [
    "JSON_NOISE_ALPHABET",
    "json_documents",
    "json_noise",
    "json_values",
    "nested_arrays",
    "whitespace_runs",
]
