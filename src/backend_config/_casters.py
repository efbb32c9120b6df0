"""Cast helpers and the field reader used by the section decoders.

A caster is a callable that returns the value unchanged (or converted) and
raises ``TypeError`` when the value is the wrong kind, or ``ValueError`` when
it is the right kind but not acceptable. ``read_field`` turns those into
``TypeMismatchError`` / ``InvalidValueError`` with section context attached.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from ._types import (
    UNDEFINED,
    InvalidValueError,
    MissingFieldError,
    TypeMismatchError,
    _Undefined,
    kind_of,
)


# ---------------------------------------------------------------------------
# Kind
# ---------------------------------------------------------------------------


class Kind:
    """Accept values of the given Python types, reject everything else.

    >>> Kind("int", int, exclude=(bool,))(8080)
    8080
    """

    def __init__(self, expected: str, *types: type, exclude: tuple[type, ...] = ()) -> None:
        self.expected = expected
        self.types = types
        self.exclude = exclude

    def __call__(self, value: Any) -> Any:
        if isinstance(value, self.types) and not isinstance(value, self.exclude):
            return value
        raise TypeError(f"expected {self.expected}, got {kind_of(value)}")

    def __repr__(self) -> str:
        return f"Kind({self.expected!r})"


# YAML booleans are ints in Python; an int field must not accept them.
STR = Kind("str", str)
INT = Kind("int", int, exclude=(bool,))
BOOL = Kind("bool", bool)
MAPPING = Kind("mapping", dict)


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------


class Choices:
    """Validate that a value is one of a fixed set of choices.

    >>> Choices(["http", "https"])("https")
    'https'
    """

    def __init__(
        self,
        choices: Sequence[Any],
        cast: Callable[[Any], Any] = STR,
    ) -> None:
        self.choices = choices
        self.cast = cast
        self.expected = getattr(cast, "expected", "a valid choice")

    def __call__(self, value: Any) -> Any:
        casted = self.cast(value)
        if casted not in self.choices:
            raise ValueError(
                f"{casted!r} is not a valid choice. Must be one of {list(self.choices)}"
            )
        return casted


# ---------------------------------------------------------------------------
# Range
# ---------------------------------------------------------------------------


class Range:
    """Validate that an integer lies within ``[minimum, maximum]``."""

    def __init__(
        self,
        minimum: int | None = None,
        maximum: int | None = None,
        cast: Callable[[Any], Any] = INT,
    ) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self.cast = cast
        self.expected = getattr(cast, "expected", "a number")

    def __call__(self, value: Any) -> Any:
        casted = self.cast(value)
        if self.minimum is not None and casted < self.minimum:
            raise ValueError(f"{casted} is below the minimum of {self.minimum}")
        if self.maximum is not None and casted > self.maximum:
            raise ValueError(f"{casted} is above the maximum of {self.maximum}")
        return casted


PORT = Range(1, 65535)
SCHEME = Choices(["http", "https"])
POSITIVE_INT = Range(1)


# ---------------------------------------------------------------------------
# Field reader
# ---------------------------------------------------------------------------


def read_field(
    raw: Mapping[str, Any],
    field: str,
    section: str,
    cast: Callable[[Any], Any],
    *,
    default: Any = UNDEFINED,
) -> Any:
    """Read *field* from a section mapping and cast it.

    A key holding ``null`` counts as absent. Absent keys return *default*
    as-is (not cast), or raise ``MissingFieldError`` when no default is given.
    """
    value = raw.get(field)
    if value is None:
        if isinstance(default, _Undefined):
            raise MissingFieldError(field, section)
        return default

    try:
        return cast(value)
    except TypeError:
        expected = getattr(cast, "expected", "a valid value")
        raise TypeMismatchError(field, expected, kind_of(value), section=section) from None
    except ValueError as exc:
        raise InvalidValueError(field, section, str(exc)) from None


def ensure_mapping(raw: Any, label: str) -> Mapping[str, Any]:
    """Return *raw* if it is a section mapping, else raise ``TypeMismatchError``."""
    if not isinstance(raw, dict):
        raise TypeMismatchError(label, "mapping", kind_of(raw))
    return raw
