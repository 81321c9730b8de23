"""Build fee schedules from YAML config, plus the built-in default schedule."""

import math
from typing import Any, Dict, List

from fee_estimator.core.config import get_setting, load_config
from fee_estimator.core.errors import ScheduleError
from fee_estimator.core.logger import get_logger
from fee_estimator.core.rounding import round_half_up
from fee_estimator.schedule.bands import FeeBand, FeeSchedule

logger = get_logger("schedule.loader")

TERMS_AGREED = "terms_agreed"
COMPLETION = "completion"

DEFAULT_SCHEDULE = FeeSchedule(
    bands=(
        FeeBand(
            label="$2M - $5M",
            min_ev=2_000_000,
            max_ev=5_000_000,
            sliding_scale_rate=0.035,
            fixed_fee_components={TERMS_AGREED: 20_000, COMPLETION: 125_000},
        ),
        FeeBand(
            label="$5M - $10M",
            min_ev=5_000_000,
            max_ev=10_000_000,
            sliding_scale_rate=0.025,
            fixed_fee_components={TERMS_AGREED: 30_000, COMPLETION: 270_000},
        ),
        FeeBand(
            label="$10M - $20M",
            min_ev=10_000_000,
            max_ev=20_000_000,
            sliding_scale_rate=0.02,
            fixed_fee_components={TERMS_AGREED: 40_000, COMPLETION: 400_000},
        ),
        FeeBand(
            label="$20M - $50M",
            min_ev=20_000_000,
            max_ev=50_000_000,
            sliding_scale_rate=0.015,
            fixed_fee_components={TERMS_AGREED: 50_000, COMPLETION: 500_000},
        ),
    )
)


def _band_from_entry(entry: Dict[str, Any], components: List[str]) -> FeeBand:
    try:
        min_ev = float(entry["min_ev"])
        max_ev = float(entry["max_ev"])
        rate = float(entry["sliding_scale_rate"])
    except KeyError as e:
        raise ScheduleError(f"Band entry missing field: {e.args[0]}") from e
    except (TypeError, ValueError) as e:
        raise ScheduleError(f"Band entry has a non-numeric field: {entry}") from e

    fixed = entry.get("fixed_fees") or {}
    unknown = set(fixed) - set(components)
    if unknown:
        raise ScheduleError(f"Unknown fixed fee components: {sorted(unknown)}")
    label = str(entry.get("label") or f"{min_ev:,.0f} - {max_ev:,.0f}")
    return FeeBand(
        label=label,
        min_ev=min_ev,
        max_ev=max_ev,
        sliding_scale_rate=rate,
        fixed_fee_components={
            name: _fixed_fee(label, name, fixed.get(name, 0)) for name in components
        },
    )


def _fixed_fee(label: str, name: str, raw: Any) -> int:
    try:
        amount = float(raw)
    except (TypeError, ValueError) as e:
        raise ScheduleError(f"{label}: fixed fee '{name}' is not a number: {raw!r}") from e
    if not math.isfinite(amount):
        raise ScheduleError(f"{label}: fixed fee '{name}' must be finite")
    return round_half_up(amount)


def schedule_from_config(config: dict) -> FeeSchedule:
    """Build a FeeSchedule from the ``fee_schedule`` section of a config dict.

    Components listed under ``fee_schedule.components`` fix the order of the
    fixed fees; a band that omits one bills zero for it. Bands are sorted by
    ``min_ev`` before validation.
    """
    entries = get_setting(config, "fee_schedule.bands", default=None)
    if not entries:
        raise ScheduleError("Config has no fee_schedule.bands entries")
    components = get_setting(config, "fee_schedule.components", default=None)
    if components is None:
        components = []
        for entry in entries:
            for name in entry.get("fixed_fees") or {}:
                if name not in components:
                    components.append(name)
    bands = [_band_from_entry(entry, list(components)) for entry in entries]
    bands.sort(key=lambda b: b.min_ev)
    return FeeSchedule(bands=tuple(bands))


def load_schedule(path: str) -> FeeSchedule:
    schedule = schedule_from_config(load_config(path))
    logger.info(
        f"Loaded fee schedule from {path}: {len(schedule)} bands, "
        f"floor {schedule.floor:,.0f}, cap {schedule.cap:,.0f}"
    )
    return schedule
