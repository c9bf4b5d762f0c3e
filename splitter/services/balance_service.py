# splitter/services/balance_service.py
import logging
from typing import Dict, List, Optional, Sequence
from splitter.models.member import Member
from splitter.models.movement import MoneyMovement
from splitter.models.settlement import AggregationRow, MemberBalance
from splitter.services.allocation import allocate_proportional, round_amount

logger = logging.getLogger(__name__)


def aggregate_payments(
    members: Sequence[Member],
    movements: Sequence[MoneyMovement],
    owner_id: Optional[int] = None,
) -> Dict[int, AggregationRow]:
    # one row per member in roster order; ownerless payments go to owner_id,
    # payers and targets outside the roster are skipped
    rows: Dict[int, AggregationRow] = {m.member_id: AggregationRow(member_id=m.member_id) for m in members}
    weights = {m.member_id: m.split_weight for m in members}

    for movement in movements:
        amount = movement.signed_amount
        payer_id = movement.payer_member_id if movement.payer_member_id is not None else owner_id
        if payer_id in rows:
            rows[payer_id].total_paid += amount
        else:
            logger.debug("payer %s of movement %s is not in the roster, skipped", payer_id, movement.movement_id)

        if not movement.target_member_ids:
            continue
        # a target listed twice still gets one share
        targets = [(mid, weights[mid]) for mid in dict.fromkeys(movement.target_member_ids) if mid in rows]
        for member_id, share in allocate_proportional(amount, targets):
            rows[member_id].total_share += share

    return rows


def derive_balances(members: Sequence[Member], aggregation: Dict[int, AggregationRow]) -> List[MemberBalance]:
    balances: List[MemberBalance] = []
    for m in members:
        row = aggregation[m.member_id]
        paid = round_amount(row.total_paid)
        share = round_amount(row.total_share)
        balances.append(MemberBalance(
            member_id=m.member_id, display_name=m.display_name,
            split_weight=m.split_weight, is_owner=m.is_owner,
            total_paid=paid, share_amount=share, balance=paid - share,
        ))
    return balances
