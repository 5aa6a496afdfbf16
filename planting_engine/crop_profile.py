"""Crop timing parameters consumed by the planting calculations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any

import voluptuous as vol

__all__ = ["FrostTolerance", "CropTimingProfile", "PROFILE_SCHEMA"]


class FrostTolerance(StrEnum):
    """How well a crop copes with frost. Informational only."""

    SENSITIVE = "sensitive"
    TOLERANT = "tolerant"
    HARDY = "hardy"


def _whole_number(value: Any) -> int:
    """Return ``value`` as an ``int`` without truncating fractions."""

    if isinstance(value, bool):
        raise vol.Invalid("expected a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise vol.Invalid("expected a whole number")


_NON_NEGATIVE = vol.Any(None, vol.All(_whole_number, vol.Range(min=0)))
_POSITIVE = vol.Any(None, vol.All(_whole_number, vol.Range(min=1)))
_SIGNED = vol.Any(None, _whole_number)

PROFILE_SCHEMA = vol.Schema(
    {
        vol.Optional("days_to_maturity", default=None): _NON_NEGATIVE,
        vol.Optional("frost_tolerance", default=FrostTolerance.TOLERANT.value): vol.All(
            str, vol.Lower, vol.Coerce(FrostTolerance)
        ),
        vol.Optional("indoor_start_weeks_before_frost", default=None): _NON_NEGATIVE,
        vol.Optional("transplant_weeks_relative_to_frost", default=None): _SIGNED,
        vol.Optional("direct_sow_weeks_before_frost", default=None): _NON_NEGATIVE,
        vol.Optional("direct_sow_weeks_after_frost", default=None): _NON_NEGATIVE,
        vol.Optional("succession_interval_weeks", default=None): _POSITIVE,
    },
    extra=vol.REMOVE_EXTRA,
)

# Column names used by the crop table for the same fields.
_ALIASES = {
    "indoor_start_weeks": "indoor_start_weeks_before_frost",
    "transplant_weeks": "transplant_weeks_relative_to_frost",
    "succession_planting_weeks": "succession_interval_weeks",
}


@dataclass(slots=True, frozen=True)
class CropTimingProfile:
    """Timing parameters of a crop relative to the last frost date.

    Every timing field is optional and ``None`` means "not configured". A
    value of ``0`` is meaningful: a transplant offset of zero schedules the
    transplant on the frost date itself.
    """

    days_to_maturity: int | None = None
    frost_tolerance: FrostTolerance = FrostTolerance.TOLERANT
    indoor_start_weeks_before_frost: int | None = None
    transplant_weeks_relative_to_frost: int | None = None
    direct_sow_weeks_before_frost: int | None = None
    direct_sow_weeks_after_frost: int | None = None
    succession_interval_weeks: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CropTimingProfile":
        """Return a validated profile built from ``data``.

        Unknown keys are ignored so whole crop records can be passed in.
        :class:`ValueError` is raised when a field has an invalid value.
        """

        values = dict(data)
        for alias, field in _ALIASES.items():
            if alias in values and field not in values:
                values[field] = values[alias]
        # ``None`` stands for "not set" everywhere except frost tolerance
        if values.get("frost_tolerance") is None:
            values.pop("frost_tolerance", None)

        try:
            validated = PROFILE_SCHEMA(values)
        except vol.Invalid as exc:
            field = ".".join(str(p) for p in exc.path) or "profile"
            raise ValueError(f"Invalid crop profile field {field}: {exc.msg}") from exc
        return cls(**validated)

    @property
    def has_timing(self) -> bool:
        """Return ``True`` if any planting offset is configured."""
        return any(
            value is not None
            for value in (
                self.indoor_start_weeks_before_frost,
                self.transplant_weeks_relative_to_frost,
                self.direct_sow_weeks_before_frost,
                self.direct_sow_weeks_after_frost,
            )
        )

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["frost_tolerance"] = FrostTolerance(self.frost_tolerance).value
        return data
