"""Foundation types for backend-config.

Provides the missing-value sentinel, the exception taxonomy, and the Secret
wrapper type.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

T = TypeVar("T")

MASK = "********"


# ---------------------------------------------------------------------------
# Sentinel
# ---------------------------------------------------------------------------


class _Undefined:
    """Sentinel for keys absent from a document (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def kind_of(value: Any) -> str:
    """Name the document kind of *value*, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "str"
    if isinstance(value, dict):
        return "mapping"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Base exception for configuration errors."""


class DocumentSyntaxError(ConfigError):
    """Raised when configuration text cannot be parsed."""

    def __init__(self, message: str, source: str | Path | None = None) -> None:
        self.source = str(source) if source is not None else None
        self.message = message
        where = f" in {self.source}" if self.source else ""
        super().__init__(f"Malformed configuration document{where}: {message}")


class MissingFieldError(ConfigError):
    """Raised when a required key is absent from a section."""

    def __init__(self, field: str, section: str) -> None:
        self.field = field
        self.section = section
        super().__init__(f"'{field}' is required in '{section}' but not set.")


class TypeMismatchError(ConfigError):
    """Raised when a key is present but holds the wrong kind of value."""

    def __init__(
        self,
        field: str,
        expected: str,
        actual: str,
        section: str | None = None,
    ) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        self.section = section
        location = f"{section}.{field}" if section else field
        super().__init__(f"'{location}' must be {expected}, got {actual}.")


class MissingSecretError(ConfigError):
    """Raised when a required secret is absent from the secret store."""

    def __init__(self, key: str, section: str | None = None) -> None:
        self.key = key
        self.section = section
        needed_by = f" (needed by '{section}')" if section else ""
        super().__init__(f"Secret '{key}' is required{needed_by} but not set.")


class InvalidValueError(ConfigError):
    """Raised when a value has the right kind but is not acceptable."""

    def __init__(self, field: str, section: str, reason: str) -> None:
        self.field = field
        self.section = section
        self.reason = reason
        super().__init__(f"'{section}.{field}' is invalid: {reason}")


class ConfigFileNotFoundError(ConfigError):
    """Raised when no configuration document exists for a run mode."""

    def __init__(self, path: str | Path, run_mode: str) -> None:
        self.path = Path(path)
        self.run_mode = run_mode
        super().__init__(f"No configuration for run mode '{run_mode}' at {self.path}")


# ---------------------------------------------------------------------------
# Secret
# ---------------------------------------------------------------------------


class Secret(Generic[T]):
    """Wraps a value so it is redacted in ``repr`` / ``str`` output.

    Access the real value via ``.secret_value``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Secret is immutable")

    @property
    def secret_value(self) -> T:
        return self._value  # type: ignore[return-value]

    # -- redaction ----------------------------------------------------------

    def __repr__(self) -> str:
        return f"Secret('{MASK}')"

    def __str__(self) -> str:
        return MASK

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Secret):
            return bool(self._value == other._value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    # -- Pydantic v2 integration --------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        # Extract the inner type arg (e.g., ``str`` from ``Secret[str]``).
        args = get_args(source_type)
        inner_type = args[0] if args else Any

        handler.generate_schema(inner_type)

        def _validate(value: Any) -> "Secret[Any]":
            if isinstance(value, Secret):
                return value
            return Secret(value)

        def _serialize(value: "Secret[Any]", _info: Any) -> str:
            return MASK

        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize,
                info_arg=True,
            ),
            metadata={"pydantic_js_functions": []},
        )
