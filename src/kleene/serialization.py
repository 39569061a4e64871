"""
JSON helpers for Kleene values.

Decoding is permissive about the token shape, encoding is not:

    decode: true, false, null, a Kleene string, or an integer in {-1, 0, 1}
    encode: always one of the strings "True", "False", "Unknown"

Producers such as databases and other services can hand over whatever
they store, while our own output stays self-describing.

All helpers operate on tokens already decoded by the `json` module
(bool, None, str, int, float, dict, list). They hold no state and do no
I/O of their own.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Dict

from kleene.logic import Kleene


class KleeneDecodeError(ValueError):
    """Raised when a JSON token cannot be decoded as a Kleene value."""

    def __init__(self, token: Any, message: str):
        super().__init__(message)
        self.token = token


_JSON_KINDS = {dict: "object", list: "array", tuple: "array"}


class _NumberText(str):
    """Literal text of a non-integer JSON number, kept for error messages."""


def _describe_int(token: int) -> str:
    # str() of a huge int can itself raise ValueError (int_max_str_digits).
    if token.bit_length() > 64:
        sign = "-" if token < 0 else ""
        return f"{sign}<{token.bit_length()}-bit integer>"
    return str(token)


def kleene_to_json_value(value: Kleene) -> str:
    return str(value)


def kleene_from_json_value(token: Any) -> Kleene:
    """
    Decode a single JSON token.

    Args:
        token: A value as produced by json.loads

    Returns:
        The decoded Kleene value

    Raises:
        KleeneDecodeError: If the token is not an accepted shape.
            Malformed tokens are never replaced by a default.
    """
    # bool is an int subclass, so it must be checked first.
    if isinstance(token, bool):
        return Kleene.from_bool(token)
    if token is None:
        return Kleene.UNKNOWN
    if isinstance(token, _NumberText):
        raise KleeneDecodeError(token, f"Invalid Kleene numeric value: {token}")
    if isinstance(token, str):
        value = Kleene.try_parse(token)
        if value is None:
            raise KleeneDecodeError(token, f"Invalid Kleene string value: {token!r}")
        return value
    if isinstance(token, int):
        if token not in (-1, 0, 1):
            raise KleeneDecodeError(token, f"Invalid Kleene numeric value: {_describe_int(token)}")
        return Kleene.from_raw(token)
    if isinstance(token, float):
        # 1.0 is rejected even though it equals 1.
        raise KleeneDecodeError(token, f"Invalid Kleene numeric value: {token!r}")
    kind = _JSON_KINDS.get(type(token), type(token).__name__)
    raise KleeneDecodeError(token, f"Invalid token for Kleene: {kind}")


def kleene_to_json(value: Kleene) -> str:
    return json.dumps(kleene_to_json_value(value))


def kleene_from_json(s: str) -> Kleene:
    """
    Decode a JSON document holding exactly one Kleene token.

    Fractional, exponent and non-finite numbers are reported with their
    literal text, so "1e0" is named as written rather than as 1.0.
    """
    return kleene_from_json_value(
        json.loads(s, parse_float=_NumberText, parse_constant=_NumberText)
    )


class KleeneJSONEncoder(json.JSONEncoder):
    """
    json.JSONEncoder that writes Kleene values as their canonical strings.

    Example:
        json.dumps({"tame": Kleene.UNKNOWN}, cls=KleeneJSONEncoder)
        -> '{"tame": "Unknown"}'
    """

    def default(self, o):
        if isinstance(o, Kleene):
            return kleene_to_json_value(o)
        return super().default(o)


def kleene_object_hook(*fields: str) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    """
    Build an object_hook for json.loads that decodes the named fields.

    Only keys present in an object are touched. A field holding null
    decodes to UNKNOWN, and a malformed field raises KleeneDecodeError.

    Example:
        json.loads(text, object_hook=kleene_object_hook("carnivore", "tame"))
    """
    names = frozenset(fields)

    def hook(d: Dict[str, Any]) -> Dict[str, Any]:
        for key in names.intersection(d):
            d[key] = kleene_from_json_value(d[key])
        return d

    return hook
