"""Half-up rounding on Decimal, used for every displayed fee amount."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number, places: int = 0) -> Union[int, float]:
    """Round half away from zero. ``places=0`` returns an int."""
    exponent = Decimal(1).scaleb(-places)
    amount = Decimal(str(value))
    with localcontext() as ctx:
        # Quantize needs room for every integer digit plus the kept places.
        ctx.prec = max(28, amount.adjusted() + places + 2)
        rounded = amount.quantize(exponent, rounding=ROUND_HALF_UP)
    if places == 0:
        return int(rounded)
    return float(rounded)
