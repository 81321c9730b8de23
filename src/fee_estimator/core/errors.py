"""Exception types raised by the fee estimator."""


class FeeEstimatorError(Exception):
    """Base class for fee estimator errors."""


class InvalidInputError(FeeEstimatorError, ValueError):
    """Enterprise value is not a finite, non-negative number."""


class ScheduleError(FeeEstimatorError, ValueError):
    """Fee schedule configuration is malformed."""
