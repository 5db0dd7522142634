"""Define a container for configuration values that may be unset."""

from __future__ import annotations

from typing import Any, TypeVar

ValueT = TypeVar("ValueT")


class PropertyTypeError(TypeError):
    """Raised when a property holds (or is given) a value of the wrong type.

    This signals a broken caller contract rather than a recoverable failure.
    """


class Property:
    """A named configuration value that is either empty or holds a value of one declared type."""

    def __init__(
        self,
        value_type: type | tuple[type, ...] | None = None,
        description: str = "",
        default: Any = None,
    ) -> None:
        """Initialize an empty property.

        :param value_type: Type (or tuple of types) that values must have (None accepts any type)
        :param description: Human-readable description of the property
        :param default: Value reported while no value has been set (None means empty)
        """
        self.value_type = value_type
        self.description = description

        self._check_type(default)
        self._default = default
        self._value: Any = None

    def __repr__(self) -> str:
        """Return a representation showing the property's current value."""
        return f"Property(value={self.value!r}, description={self.description!r})"

    def _check_type(self, value: Any) -> None:
        """Verify that the given value (if any) has the property's declared type."""
        if value is None or self.value_type is None:
            return
        if not isinstance(value, self.value_type):
            raise PropertyTypeError(
                f"Property expects a value of type {self.value_type}, got {type(value)}: {value}",
            )

    @property
    def value(self) -> Any:
        """The property's value if set, otherwise its default (None when both are empty)."""
        return self._value if self._value is not None else self._default

    @property
    def default(self) -> Any:
        """The value reported while no value has been set."""
        return self._default

    def defined(self) -> bool:
        """Evaluate whether the property holds a value (either set or defaulted)."""
        return self.value is not None

    def set_value(self, value: Any) -> None:
        """Set the property's value (None empties it).

        :raises PropertyTypeError: If the value doesn't have the property's declared type
        """
        self._check_type(value)
        self._value = value

    def set_default(self, default: Any) -> None:
        """Set the property's default value.

        :raises PropertyTypeError: If the default doesn't have the property's declared type
        """
        self._check_type(default)
        self._default = default

    def reset(self) -> None:
        """Clear the property's value so that it reports its default again."""
        self._value = None

    def value_as(self, expected_type: type[ValueT]) -> ValueT:
        """Decode the property's value as the expected payload type.

        :param expected_type: Type the caller requires the stored value to have
        :return: The property's value
        :raises PropertyTypeError: If the property is empty or holds a value of another type
        """
        value = self.value
        if not isinstance(value, expected_type):
            raise PropertyTypeError(
                f"Cannot decode property value {value!r} as {expected_type.__name__}.",
            )
        return value
