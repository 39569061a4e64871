"""
Kleene Value Type

Defines the single value of Kleene's strong three-valued logic (K3).

Truth values are an ordered set backed by a small integer:

    FALSE   = -1
    UNKNOWN =  0
    TRUE    = +1

The encoding is algebraic, not cosmetic:

    NOT(x)   = -x
    AND(a,b) = min(a, b)
    OR(a,b)  = max(a, b)
    XOR(a,b) = -(a * b)

XOR is not canonical in K3. The lift used here lets UNKNOWN propagate
and behaves like boolean XOR on definite values.

CONTROL FLOW RULE:
    Only definite knowledge controls flow.

        k.is_true      fires only for TRUE
        k.is_false     fires only for FALSE
        UNKNOWN        satisfies neither guard

    `if k.is_true: ... else: ...` merges FALSE and UNKNOWN in the else
    arm. Use `branch()` or a `match` statement for three-way decisions.

    bool(k) raises TypeError. A single truthiness hook cannot keep UNKNOWN
    apart from FALSE, so Python's `if k`, `not k`, `and`, `or` are refused.
"""

from enum import Enum
from typing import Callable, Optional, TypeVar, Union

T = TypeVar("T")


class KleeneFormatError(ValueError):
    """Raised when text is not a recognised Kleene literal."""

    def __init__(self, text):
        super().__init__(f"Invalid Kleene value: {text!r}")
        self.text = text


class Kleene(Enum):
    """
    A Kleene truth value.

    The three members are the only instances that exist. Every operator
    returns one of them, so identity, equality and encoding equality
    coincide.

    Properties:
        raw: Encoded value (-1, 0, +1) for storage and FFI boundaries
        label: Canonical text ("False", "Unknown", "True")
        is_true / is_false: The two truthiness guards
        is_unknown / is_known: Whether the value is definite

    IMPORTANT:
        Members are immutable and hold no state beyond their encoding.
        They are safe to share between threads.
    """

    FALSE = -1
    UNKNOWN = 0
    TRUE = 1

    # -----------------------------
    # Construction / conversion
    # -----------------------------

    @classmethod
    def from_raw(cls, raw: int) -> "Kleene":
        """
        Map a raw integer onto a Kleene value.

        Out-of-range input is clamped into [-1, 1], so this never fails
        for a number:

            from_raw(-7) -> FALSE
            from_raw(0)  -> UNKNOWN
            from_raw(42) -> TRUE
        """
        if raw <= -1:
            return cls.FALSE
        if raw >= 1:
            return cls.TRUE
        return cls.UNKNOWN

    @classmethod
    def _missing_(cls, value):
        # Kleene(5) clamps like from_raw instead of failing the value lookup.
        if isinstance(value, int):
            return cls.from_raw(value)
        return None

    @classmethod
    def from_bool(cls, value: bool) -> "Kleene":
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def from_optional_bool(cls, value: Optional[bool]) -> "Kleene":
        """None becomes UNKNOWN; a bool is converted with from_bool."""
        if value is None:
            return cls.UNKNOWN
        return cls.from_bool(value)

    def to_optional_bool(self) -> Optional[bool]:
        """
        Collapse to an optional bool: UNKNOWN -> None.

        Exact inverse of from_optional_bool.
        """
        if self is Kleene.UNKNOWN:
            return None
        return self is Kleene.TRUE

    def default_to(self, fallback: Union["Kleene", bool]) -> Union["Kleene", bool]:
        """
        Replace UNKNOWN with a fallback.

        This is the one explicit way to collapse uncertainty.

        Args:
            fallback: A Kleene value, or a plain bool

        Returns:
            With a Kleene fallback: self when definite, otherwise fallback.
            With a bool fallback: the definite value as a bool, otherwise
            fallback.

        Raises:
            TypeError: If fallback is neither Kleene nor bool
        """
        if isinstance(fallback, Kleene):
            return fallback if self is Kleene.UNKNOWN else self
        if isinstance(fallback, bool):
            return fallback if self is Kleene.UNKNOWN else self is Kleene.TRUE
        raise TypeError(f"Unsupported fallback type: {type(fallback)}")

    @property
    def raw(self) -> int:
        return self.value

    # -----------------------------
    # Truthiness projection
    # -----------------------------

    @property
    def is_true(self) -> bool:
        """True only for TRUE. UNKNOWN is not true."""
        return self.value == 1

    @property
    def is_false(self) -> bool:
        """True only for FALSE. UNKNOWN is not false."""
        return self.value == -1

    @property
    def is_unknown(self) -> bool:
        return self.value == 0

    @property
    def is_known(self) -> bool:
        return self.value != 0

    def __bool__(self):
        raise TypeError(
            f"{self!r} has no boolean value; use .is_true, .is_false or .branch()"
        )

    # -----------------------------
    # K3 operators
    # -----------------------------

    def __invert__(self) -> "Kleene":
        return Kleene.from_raw(-self.value)

    def __and__(self, other) -> "Kleene":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Kleene.from_raw(min(self.value, other.value))

    def __or__(self, other) -> "Kleene":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Kleene.from_raw(max(self.value, other.value))

    def __xor__(self, other) -> "Kleene":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Kleene.from_raw(-(self.value * other.value))

    # All three are commutative.
    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    # -----------------------------
    # Short-circuit combinators
    # -----------------------------

    def and_then(self, right: Callable[[], "Kleene"]) -> "Kleene":
        """
        Lazy AND.

        `right` is skipped only when self is FALSE. For TRUE and UNKNOWN it
        is called exactly once, because pruning on UNKNOWN could hide a side
        effect that would have resolved the uncertainty.
        """
        if self is Kleene.FALSE:
            return Kleene.FALSE
        return self & right()

    def or_else(self, right: Callable[[], "Kleene"]) -> "Kleene":
        """
        Lazy OR.

        `right` is skipped only when self is TRUE, and is otherwise called
        exactly once.
        """
        if self is Kleene.TRUE:
            return Kleene.TRUE
        return self | right()

    def branch(
        self,
        if_true: Optional[Callable[[], T]] = None,
        if_false: Optional[Callable[[], T]] = None,
        if_unknown: Optional[Callable[[], T]] = None,
    ) -> Optional[T]:
        """
        Three-way dispatch on the value.

        Calls the handler matching this value and returns its result.
        A missing handler means "do nothing" and yields None.

        Example:
            diet.branch(
                if_true=lambda: "meat",
                if_false=lambda: "greens",
                if_unknown=lambda: "mixed food",
            )
        """
        if self is Kleene.TRUE:
            handler = if_true
        elif self is Kleene.FALSE:
            handler = if_false
        else:
            handler = if_unknown
        return handler() if handler is not None else None

    # -----------------------------
    # Equality and ordering
    # -----------------------------

    def __hash__(self):
        return hash(self.value)

    # False < Unknown < True, so min/max agree with AND/OR.
    def __lt__(self, other):
        if not isinstance(other, Kleene):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, Kleene):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, Kleene):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, Kleene):
            return NotImplemented
        return self.value >= other.value

    # -----------------------------
    # Text
    # -----------------------------

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    def __str__(self) -> str:
        return _LABELS[self.value]

    def __format__(self, format_spec: str) -> str:
        return format(_LABELS[self.value], format_spec)

    @classmethod
    def try_parse(cls, text: Optional[str]) -> Optional["Kleene"]:
        """
        Parse text without raising.

        Accepted (after trimming surrounding whitespace):
            - "true", "false", "unknown" in any case
            - exactly "1", "0", "-1"

        Numerals are matched as literal strings, not parsed as integers:
        "+1", "01" and "1.0" are rejected.

        Case folding is ASCII only. Look-alikes such as "UN\\u212aNOWN"
        (KELVIN SIGN) are rejected even though str.lower() maps them to
        ASCII letters.

        Returns:
            The parsed value, or None if the text is not accepted
        """
        if not isinstance(text, str):
            return None
        text = text.strip()
        if not text.isascii():
            return None
        return _TOKENS.get(text.lower())

    @classmethod
    def parse(cls, text: str) -> "Kleene":
        """
        Parse text, accepting the same inputs as try_parse.

        Raises:
            KleeneFormatError: If the text is not accepted
        """
        value = cls.try_parse(text)
        if value is None:
            raise KleeneFormatError(text)
        return value


_LABELS = {-1: "False", 0: "Unknown", 1: "True"}

_TOKENS = {
    "false": Kleene.FALSE,
    "unknown": Kleene.UNKNOWN,
    "true": Kleene.TRUE,
    "-1": Kleene.FALSE,
    "0": Kleene.UNKNOWN,
    "1": Kleene.TRUE,
}


def _coerce(value) -> Optional[Kleene]:
    """Lift an operator operand to Kleene; None means unsupported."""
    if isinstance(value, Kleene):
        return value
    if isinstance(value, bool):
        return Kleene.from_bool(value)
    return None


def lazy_and(left: Kleene, right: Callable[[], Kleene]) -> Kleene:
    """Function form of Kleene.and_then."""
    return left.and_then(right)


def lazy_or(left: Kleene, right: Callable[[], Kleene]) -> Kleene:
    """Function form of Kleene.or_else."""
    return left.or_else(right)
