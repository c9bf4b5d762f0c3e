# splitter/errors.py
from typing import Any, Dict, List, Optional


class SettlementError(Exception):
    pass


class SettlementInputError(SettlementError):
    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__, "message": self.message, **self.context}


class UnknownMemberReference(SettlementInputError):
    def __init__(self, member_id: Optional[int], movement_index: int, role: str):
        who = "owner" if member_id is None else f"member {member_id}"
        super().__init__(
            f"movement #{movement_index} references unknown {who} as {role}",
            member_id=member_id, movement_index=movement_index, role=role,
        )


class NonPositiveWeight(SettlementInputError):
    def __init__(self, member_id: int, split_weight):
        super().__init__(
            f"member {member_id} has non-positive split weight {split_weight}",
            member_id=member_id, split_weight=str(split_weight),
        )


class NegativeAmount(SettlementInputError):
    def __init__(self, movement_index: int, amount: int):
        super().__init__(
            f"movement #{movement_index} has negative amount {amount}",
            movement_index=movement_index, amount=amount,
        )


class DuplicateMemberId(SettlementInputError):
    def __init__(self, member_id: int):
        super().__init__(f"member id {member_id} appears more than once", member_id=member_id)


class InvalidSettlementInput(SettlementError):
    def __init__(self, issues: List[SettlementInputError]):
        self.issues = list(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))

    def to_list(self) -> List[Dict[str, Any]]:
        return [issue.to_dict() for issue in self.issues]
