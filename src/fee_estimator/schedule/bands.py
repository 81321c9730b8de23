"""Fee bands and the ordered, immutable schedule they form.

A band covers EV in ``(min_ev, max_ev]``. Bands are contiguous: the first
band's ``min_ev`` is the eligibility floor and the last band's ``max_ev`` is
the cap above which EV is priced as if it sat at the cap.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from fee_estimator.core.errors import ScheduleError
from fee_estimator.core.logger import get_logger

logger = get_logger("schedule.bands")


@dataclass(frozen=True)
class FeeBand:
    label: str
    min_ev: float
    max_ev: float
    sliding_scale_rate: float
    fixed_fee_components: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("min_ev", "max_ev", "sliding_scale_rate"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ScheduleError(f"{self.label}: {name} must be finite")
        if self.min_ev < 0:
            raise ScheduleError(f"{self.label}: min_ev cannot be negative")
        if self.max_ev <= self.min_ev:
            raise ScheduleError(f"{self.label}: max_ev must exceed min_ev")
        if self.sliding_scale_rate < 0:
            raise ScheduleError(f"{self.label}: sliding_scale_rate cannot be negative")
        for name, amount in self.fixed_fee_components.items():
            if amount < 0:
                raise ScheduleError(f"{self.label}: fixed fee '{name}' cannot be negative")
        object.__setattr__(
            self,
            "fixed_fee_components",
            MappingProxyType(dict(self.fixed_fee_components)),
        )

    @property
    def fixed_fee_total(self) -> int:
        return sum(self.fixed_fee_components.values())


@dataclass(frozen=True)
class FeeSchedule:
    """Ordered bands, validated once and shared read-only."""

    bands: Tuple[FeeBand, ...]

    def __post_init__(self):
        bands = tuple(self.bands)
        if not bands:
            raise ScheduleError("Fee schedule needs at least one band")
        names = tuple(bands[0].fixed_fee_components)
        for lower, upper in zip(bands, bands[1:]):
            if upper.min_ev != lower.max_ev:
                raise ScheduleError(
                    f"Bands '{lower.label}' and '{upper.label}' are not contiguous: "
                    f"{lower.max_ev} != {upper.min_ev}"
                )
        for band in bands:
            if tuple(band.fixed_fee_components) != names:
                raise ScheduleError(
                    f"{band.label}: fixed fee components {list(band.fixed_fee_components)} "
                    f"do not match {list(names)}"
                )
        object.__setattr__(self, "bands", bands)
        self._warn_on_fee_cliffs()

    @property
    def floor(self) -> float:
        return self.bands[0].min_ev

    @property
    def cap(self) -> float:
        return self.bands[-1].max_ev

    @property
    def component_names(self) -> Tuple[str, ...]:
        return tuple(self.bands[0].fixed_fee_components)

    def __len__(self) -> int:
        return len(self.bands)

    def __iter__(self):
        return iter(self.bands)

    def _warn_on_fee_cliffs(self) -> None:
        # Crossing into a band swaps the lower band's fixed fees for the
        # upper band's, so a smaller fixed total above a boundary drops the fee.
        for lower, upper in zip(self.bands, self.bands[1:]):
            if upper.fixed_fee_total < lower.fixed_fee_total:
                logger.warning(
                    f"Fee cliff at {upper.min_ev:,.0f}: fixed fees fall from "
                    f"{lower.fixed_fee_total:,} to {upper.fixed_fee_total:,}"
                )
