# splitter/services/split_engine.py
import logging
from typing import List, Optional, Sequence
from splitter.errors import (
    DuplicateMemberId,
    InvalidSettlementInput,
    NegativeAmount,
    NonPositiveWeight,
    SettlementInputError,
    UnknownMemberReference,
)
from splitter.models.member import OWNER_SENTINEL_ID, Member
from splitter.models.movement import MoneyMovement
from splitter.models.settlement import SettlementResult
from splitter.services.balance_service import aggregate_payments, derive_balances
from splitter.services.settlement_service import suggest_transfers
from splitter.services.split_strategies import (
    EqualSplitStrategy,
    StrategyResult,
    WeightedSplitStrategy,
    collect_participants,
)

logger = logging.getLogger(__name__)


def resolve_owner_id(members: Sequence[Member]) -> Optional[int]:
    # flagged owner first, then a bare sentinel row
    for m in members:
        if m.is_owner:
            return m.member_id
    for m in members:
        if m.member_id == OWNER_SENTINEL_ID:
            return m.member_id
    return None


def validate_input(
    members: Sequence[Member],
    movements: Sequence[MoneyMovement],
    skip_unknown_members: bool = False,
) -> List[SettlementInputError]:
    issues: List[SettlementInputError] = []
    seen = set()
    for m in members:
        if m.member_id in seen:
            issues.append(DuplicateMemberId(m.member_id))
        seen.add(m.member_id)
        if m.split_weight <= 0:
            issues.append(NonPositiveWeight(m.member_id, m.split_weight))

    owner_id = resolve_owner_id(members)
    for idx, movement in enumerate(movements):
        if movement.amount < 0:
            issues.append(NegativeAmount(idx, movement.amount))
        if skip_unknown_members:
            continue
        if movement.payer_member_id is None:
            if owner_id is None:
                issues.append(UnknownMemberReference(None, idx, "payer"))
        elif movement.payer_member_id not in seen:
            issues.append(UnknownMemberReference(movement.payer_member_id, idx, "payer"))
        for target_id in movement.target_member_ids:
            if target_id not in seen:
                issues.append(UnknownMemberReference(target_id, idx, "target"))
    return issues


def compute_settlement(
    members: Sequence[Member],
    movements: Sequence[MoneyMovement],
    skip_unknown_members: bool = False,
) -> SettlementResult:
    """Compute balances and suggested transfers for one project.

    Raises ``InvalidSettlementInput`` listing every defect before any work is
    done. With ``skip_unknown_members`` set, references to members missing from
    the roster are ignored instead of rejected: unknown targets get no share and
    an unknown payer is credited to nobody.
    """
    members = list(members)
    movements = list(movements)
    issues = validate_input(members, movements, skip_unknown_members)
    if issues:
        raise InvalidSettlementInput(issues)

    aggregation = aggregate_payments(members, movements, owner_id=resolve_owner_id(members))
    balances = derive_balances(members, aggregation)
    transfers = suggest_transfers(balances)
    total = sum(b.share_amount for b in balances)

    logger.debug("settled %d members / %d movements: total=%d transfers=%d",
                 len(members), len(movements), total, len(transfers))
    return SettlementResult(total_amount=total, member_balances=balances, transfers=transfers)


def split_paid_totals(
    members: Sequence[Member],
    movements: Sequence[MoneyMovement],
    weighted: bool = False,
) -> StrategyResult:
    members = list(members)
    movements = list(movements)
    issues = validate_input(members, movements, skip_unknown_members=True)
    if issues:
        raise InvalidSettlementInput(issues)

    participants = collect_participants(movements, owner_id=resolve_owner_id(members))
    if weighted:
        strategy = WeightedSplitStrategy({m.member_id: m.split_weight for m in members})
    else:
        strategy = EqualSplitStrategy()
    logger.debug("paid-total split (%s) over %d participants", type(strategy).__name__, len(participants))
    return strategy.calculate(participants)
