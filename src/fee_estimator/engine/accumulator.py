"""Band traversal: sliding-scale fee per band plus fixed fees for the landing band."""

from typing import List, Tuple

from fee_estimator.core.rounding import round_half_up
from fee_estimator.engine.result import BandContribution
from fee_estimator.schedule.bands import FeeSchedule


def accumulate(
    clamped_ev: float, schedule: FeeSchedule
) -> Tuple[BandContribution, ...]:
    """Walk the schedule upwards and emit one contribution per band reached.

    The sliding-scale rate applies to the slice of EV inside each band and
    accrues across every band traversed. Fixed fees are billed only for the
    highest band reached (the band whose range contains ``clamped_ev``).
    EV on a boundary belongs to the lower band. At exactly the floor the
    first band is reached but empty, so it bills fixed fees only.

    Each sliding fee is rounded to a whole unit here so that breakdown rows
    foot to the totals.
    """
    zero_fees = {name: 0 for name in schedule.component_names}
    rows: List[BandContribution] = []
    for band in schedule.bands:
        ev_in_band = max(0.0, min(clamped_ev, band.max_ev) - band.min_ev)
        highest = clamped_ev <= band.max_ev
        if ev_in_band <= 0 and not highest:
            break
        rows.append(
            BandContribution(
                band_label=band.label,
                ev_in_band=ev_in_band,
                sliding_scale_fee=round_half_up(ev_in_band * band.sliding_scale_rate),
                fixed_fees_applied=(
                    band.fixed_fee_components if highest else zero_fees
                ),
            )
        )
        if highest:
            break
    return tuple(rows)
