"""Tabular views of fee results and schedules for display."""

from typing import List

import pandas as pd

from fee_estimator.engine.evaluator import FeeEvaluator
from fee_estimator.engine.result import FeeResult
from fee_estimator.schedule.bands import FeeSchedule


def breakdown_frame(result: FeeResult) -> pd.DataFrame:
    """One row per band contribution, one column per fixed fee component."""
    components = list(result.fixed_fee_totals)
    rows = []
    for row in result.breakdown:
        record = {"band": row.band_label, "ev_in_band": row.ev_in_band}
        for name in components:
            record[name] = row.fixed_fees_applied.get(name, 0)
        record["sliding_scale_fee"] = row.sliding_scale_fee
        record["total"] = row.total
        rows.append(record)
    columns = ["band", "ev_in_band", *components, "sliding_scale_fee", "total"]
    return pd.DataFrame(rows, columns=columns)


def reference_table(schedule: FeeSchedule) -> pd.DataFrame:
    """Fees at the top of every band, for a quick-reference schedule table."""
    evaluator = FeeEvaluator(schedule)
    components = list(schedule.component_names)
    rows: List[dict] = []
    for band in schedule.bands:
        result = evaluator.evaluate(band.max_ev)
        record = {"band": band.label, "enterprise_value": band.max_ev}
        record.update(result.fixed_fee_totals)
        record["sliding_scale_total"] = result.sliding_scale_total
        record["total_fee"] = result.total_fee
        record["percentage_of_ev"] = result.percentage_of_ev
        rows.append(record)
    columns = [
        "band",
        "enterprise_value",
        *components,
        "sliding_scale_total",
        "total_fee",
        "percentage_of_ev",
    ]
    return pd.DataFrame(rows, columns=columns)
