"""Value types produced by fee evaluation."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


def _freeze(obj, name: str) -> None:
    object.__setattr__(obj, name, MappingProxyType(dict(getattr(obj, name))))


@dataclass(frozen=True)
class BandContribution:
    """What a single band adds to the fee.

    ``fixed_fees_applied`` holds every component of the schedule; for bands
    crossed on the way to the highest band reached they are all zero.
    """

    band_label: str
    ev_in_band: float
    sliding_scale_fee: int
    fixed_fees_applied: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        _freeze(self, "fixed_fees_applied")

    @property
    def fixed_fee_total(self) -> int:
        return sum(self.fixed_fees_applied.values())

    @property
    def total(self) -> int:
        return self.fixed_fee_total + self.sliding_scale_fee

    def to_dict(self) -> dict:
        return {
            "band_label": self.band_label,
            "ev_in_band": self.ev_in_band,
            "fixed_fees_applied": dict(self.fixed_fees_applied),
            "sliding_scale_fee": self.sliding_scale_fee,
            "total": self.total,
        }


@dataclass(frozen=True)
class FeeResult:
    enterprise_value: float
    fixed_fee_totals: Mapping[str, int]
    sliding_scale_total: int
    total_fee: int
    percentage_of_ev: float
    breakdown: Tuple[BandContribution, ...]

    is_eligible = True

    def __post_init__(self):
        _freeze(self, "fixed_fee_totals")
        object.__setattr__(self, "breakdown", tuple(self.breakdown))

    @property
    def fixed_fee_total(self) -> int:
        return sum(self.fixed_fee_totals.values())

    def to_dict(self) -> dict:
        return {
            "eligible": True,
            "enterprise_value": self.enterprise_value,
            "fixed_fee_totals": dict(self.fixed_fee_totals),
            "fixed_fee_total": self.fixed_fee_total,
            "sliding_scale_total": self.sliding_scale_total,
            "total_fee": self.total_fee,
            "percentage_of_ev": self.percentage_of_ev,
            "breakdown": [row.to_dict() for row in self.breakdown],
        }


@dataclass(frozen=True)
class Ineligible:
    """EV below the schedule floor. An expected outcome, not an error."""

    enterprise_value: float
    floor: float

    is_eligible = False

    def to_dict(self) -> dict:
        return {
            "eligible": False,
            "enterprise_value": self.enterprise_value,
            "floor": self.floor,
        }
