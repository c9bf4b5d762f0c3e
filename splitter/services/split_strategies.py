# splitter/services/split_strategies.py
from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence
from sqlmodel import Field, SQLModel
from splitter.models.movement import MoneyMovement

CENT = Decimal("0.01")


def _round2(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class Participant(SQLModel):
    member_id: int
    total_paid: Decimal = Decimal("0")


class ParticipantShare(SQLModel):
    member_id: int
    total_paid: Decimal
    share: Decimal
    balance: Decimal


class StrategyResult(SQLModel):
    total_amount: Decimal
    per_participant: List[ParticipantShare] = Field(default_factory=list)


def collect_participants(movements: Sequence[MoneyMovement], owner_id: Optional[int] = None) -> List[Participant]:
    # first-seen order; income counts negative
    paid: Dict[int, Decimal] = {}
    for movement in movements:
        payer_id = movement.payer_member_id if movement.payer_member_id is not None else owner_id
        if payer_id is None:
            continue
        paid[payer_id] = paid.get(payer_id, Decimal("0")) + movement.signed_amount
    return [Participant(member_id=mid, total_paid=_round2(total)) for mid, total in paid.items()]


class SplitStrategy(ABC):
    @abstractmethod
    def calculate(self, participants: Sequence[Participant]) -> StrategyResult:
        raise NotImplementedError


class EqualSplitStrategy(SplitStrategy):
    def calculate(self, participants: Sequence[Participant]) -> StrategyResult:
        total = sum((p.total_paid for p in participants), Decimal("0"))
        equal_share = total / len(participants) if participants else Decimal("0")
        rows = [
            ParticipantShare(
                member_id=p.member_id,
                total_paid=_round2(p.total_paid),
                share=_round2(equal_share),
                balance=_round2(p.total_paid - equal_share),
            )
            for p in participants
        ]
        return StrategyResult(total_amount=_round2(total), per_participant=rows)


class WeightedSplitStrategy(SplitStrategy):
    def __init__(self, weights: Optional[Dict[int, Decimal]] = None):
        self.weights = {mid: Decimal(str(w)) for mid, w in (weights or {}).items()}

    def calculate(self, participants: Sequence[Participant]) -> StrategyResult:
        total = sum((p.total_paid for p in participants), Decimal("0"))
        sum_weights = sum((self.weights.get(p.member_id, Decimal("0")) for p in participants), Decimal("0"))
        if sum_weights <= 0:
            return EqualSplitStrategy().calculate(participants)

        rows = []
        for p in participants:
            weight = self.weights.get(p.member_id, Decimal("0"))
            share = total * weight / sum_weights if weight > 0 else Decimal("0")
            rows.append(ParticipantShare(
                member_id=p.member_id,
                total_paid=_round2(p.total_paid),
                share=_round2(share),
                balance=_round2(p.total_paid - share),
            ))
        return StrategyResult(total_amount=_round2(total), per_participant=rows)
