"""
Kleene Logic Package

A closed three-valued logic (Kleene's strong K3) as one immutable value
type: TRUE, FALSE and UNKNOWN.

ARCHITECTURAL GUARANTEE:
------------------------
UNKNOWN is never silently collapsed into FALSE:
    - bool() on a value raises instead of guessing
    - only definite values short-circuit evaluation
    - default_to() is the single explicit collapse point
    - decoding never substitutes a default for malformed input

The value type lives in `kleene.logic`.
The JSON codec lives in `kleene.serialization`.
"""

from kleene.logic import Kleene, KleeneFormatError, lazy_and, lazy_or
from kleene.serialization import (
    KleeneDecodeError,
    KleeneJSONEncoder,
    kleene_from_json,
    kleene_from_json_value,
    kleene_object_hook,
    kleene_to_json,
    kleene_to_json_value,
)

__version__ = "0.1.0"

__all__ = [
    "Kleene",
    "KleeneFormatError",
    "KleeneDecodeError",
    "KleeneJSONEncoder",
    "kleene_from_json",
    "kleene_from_json_value",
    "kleene_object_hook",
    "kleene_to_json",
    "kleene_to_json_value",
    "lazy_and",
    "lazy_or",
]
