"""Evaluate an enterprise value against a fee schedule."""

from typing import Optional, Union

from fee_estimator.core.logger import get_logger
from fee_estimator.engine.accumulator import accumulate
from fee_estimator.engine.assembler import assemble
from fee_estimator.engine.clamp import clamp_enterprise_value, validate_enterprise_value
from fee_estimator.engine.result import FeeResult, Ineligible
from fee_estimator.schedule.bands import FeeSchedule
from fee_estimator.schedule.loader import DEFAULT_SCHEDULE

logger = get_logger("engine.evaluator")

Evaluation = Union[FeeResult, Ineligible]


class FeeEvaluator:
    def __init__(self, schedule: FeeSchedule = DEFAULT_SCHEDULE):
        self._schedule = schedule

    @property
    def schedule(self) -> FeeSchedule:
        return self._schedule

    def evaluate(self, enterprise_value) -> Evaluation:
        """Price ``enterprise_value`` against the schedule.

        Returns an ``Ineligible`` value below the floor. Raises
        InvalidInputError for NaN, infinite, negative or non-numeric input.
        """
        ev = validate_enterprise_value(enterprise_value)
        clamped = clamp_enterprise_value(ev, self._schedule)
        if clamped is None:
            logger.info(
                f"EV {ev:,.0f} is below the minimum of {self._schedule.floor:,.0f}"
            )
            return Ineligible(enterprise_value=ev, floor=self._schedule.floor)

        result = assemble(ev, accumulate(clamped, self._schedule), self._schedule)
        logger.debug(
            f"EV {ev:,.0f} (priced at {clamped:,.0f}): total fee "
            f"{result.total_fee:,} ({result.percentage_of_ev}%) over "
            f"{len(result.breakdown)} band(s)"
        )
        return result


def evaluate(enterprise_value, schedule: Optional[FeeSchedule] = None) -> Evaluation:
    return FeeEvaluator(schedule or DEFAULT_SCHEDULE).evaluate(enterprise_value)
