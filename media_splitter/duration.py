"""Duration values and window anchors

Responsibilities:
  - Represent a duration as a (value, unit) pair
  - Resolve durations to absolute milliseconds, relative to the media
    duration when expressed in percent
  - Parse duration mappings from a job envelope
  - Define the anchor used to place the selection window
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from .exceptions import ConfigurationError


class DurationUnit(Enum):
    """Units accepted for a duration value."""
    MILLISECOND = "millisecond"
    SECOND = "second"
    PERCENT = "percent"

    @classmethod
    def names(cls) -> str:
        return ", ".join(unit.value for unit in cls)


class DurationPosition(Enum):
    """Where the selected duration is reckoned from."""
    START = "start"
    END = "end"


@dataclass(frozen=True)
class Duration:
    """
    A duration expressed in milliseconds, seconds or percent of the media.

    The default duration is 1 second (``Duration()`` resolves to 1000 ms).
    Job parameters given as an empty mapping fall back to this default.

    Attributes:
        value: Non-negative amount, in ``unit``.
        unit: Unit of ``value``.
    """
    value: int = 1
    unit: DurationUnit = DurationUnit.SECOND

    def to_millis(self, media_duration: int) -> int:
        """
        Resolve to milliseconds.

        Args:
            media_duration: Reference duration in ms, only used for percent.

        Returns:
            Duration in milliseconds. Percent values are truncated.
        """
        if self.unit is DurationUnit.MILLISECOND:
            return self.value
        if self.unit is DurationUnit.SECOND:
            return self.value * 1000
        return media_duration * self.value // 100

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], field_name: str = "duration") -> "Duration":
        """
        Build a duration from a job parameter mapping.

        Args:
            data: Mapping with optional "value" and "unit" keys.
            field_name: Parameter name, used in error messages.

        Raises:
            ConfigurationError: If the mapping is malformed, the value is not a
                non-negative integer, or a value is given without a valid unit.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"{field_name} must be a mapping with 'value' and 'unit', got {data!r}",
                module="duration"
            )
        if not data:
            return cls()

        value = data.get("value", cls.value)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigurationError(
                f"{field_name} value must be a non-negative integer, got {value!r}",
                module="duration"
            )

        unit = data.get("unit")
        if unit is None:
            if "value" in data:
                raise ConfigurationError(
                    f"Expected {field_name} unit, one of: {DurationUnit.names()}",
                    module="duration"
                )
            return cls(value=value)
        return cls(value=value, unit=parse_unit(unit, field_name))

    def __str__(self) -> str:
        suffix = {"millisecond": "ms", "second": "s", "percent": "%"}[self.unit.value]
        return f"{self.value}{suffix}"


def parse_unit(unit: Any, field_name: str = "duration") -> DurationUnit:
    """Convert a unit name into a DurationUnit."""
    if isinstance(unit, DurationUnit):
        return unit
    try:
        return DurationUnit(str(unit).lower())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid {field_name} unit '{unit}', expected one of: {DurationUnit.names()}",
            module="duration"
        ) from e


def parse_position(position: Optional[Any]) -> DurationPosition:
    """Convert a position name into a DurationPosition, defaulting to start."""
    if position is None:
        return DurationPosition.START
    if isinstance(position, DurationPosition):
        return position
    try:
        return DurationPosition(str(position).lower())
    except ValueError as e:
        choices = ", ".join(p.value for p in DurationPosition)
        raise ConfigurationError(
            f"Invalid duration_position '{position}', expected one of: {choices}",
            module="duration"
        ) from e
