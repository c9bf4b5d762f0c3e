# splitter/services/allocation.py
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence, Tuple, Union

Number = Union[int, float, Decimal]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_amount(value: Number) -> int:
    # halves away from zero: 2.5 -> 3, -2.5 -> -3
    return int(_to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def allocate_proportional(amount: int, weighted_targets: Sequence[Tuple[int, Number]]) -> List[Tuple[int, int]]:
    """Split ``amount`` across ``weighted_targets`` in proportion to their weights.

    Every target but the last gets ``round_amount(amount * w / W)``; the last one
    gets whatever is left, so the shares always add up to ``amount`` exactly.
    "Last" is the last element of ``weighted_targets`` as given. Returns an empty
    list when the summed weight is not positive.
    """
    weights = [(member_id, _to_decimal(w)) for member_id, w in weighted_targets]
    total_weight = sum((w for _, w in weights), Decimal(0))
    if total_weight <= 0:
        return []

    shares: List[Tuple[int, int]] = []
    remaining = amount
    for idx, (member_id, weight) in enumerate(weights):
        if idx == len(weights) - 1:
            share = remaining
        else:
            share = round_amount(Decimal(amount) * weight / total_weight)
            remaining -= share
        shares.append((member_id, share))
    return shares
