"""Sum per-band contributions into a FeeResult."""

from typing import Dict, Sequence

from fee_estimator.core.rounding import round_half_up
from fee_estimator.engine.result import BandContribution, FeeResult
from fee_estimator.schedule.bands import FeeSchedule


def assemble(
    enterprise_value: float,
    contributions: Sequence[BandContribution],
    schedule: FeeSchedule,
) -> FeeResult:
    # Rows are already rounded; totals are plain sums of them.
    fixed_totals: Dict[str, int] = {name: 0 for name in schedule.component_names}
    sliding_total = 0
    for row in contributions:
        sliding_total += row.sliding_scale_fee
        for name, amount in row.fixed_fees_applied.items():
            fixed_totals[name] = fixed_totals.get(name, 0) + amount

    total_fee = sum(fixed_totals.values()) + sliding_total
    # Uncapped EV as denominator, so the percentage keeps falling above the cap.
    if enterprise_value > 0:
        percentage = round_half_up(total_fee / enterprise_value * 100, places=2)
    else:
        percentage = 0.0

    return FeeResult(
        enterprise_value=enterprise_value,
        fixed_fee_totals=fixed_totals,
        sliding_scale_total=sliding_total,
        total_fee=total_fee,
        percentage_of_ev=percentage,
        breakdown=tuple(contributions),
    )
