from enum import Enum
from typing import List, Optional
from pydantic import ConfigDict
from sqlmodel import Field, SQLModel

class MovementKind(str, Enum):
    expense = "expense"
    income = "income"

class MoneyMovement(SQLModel):
    model_config = ConfigDict(frozen=True)

    amount: int
    kind: MovementKind = MovementKind.expense
    # None means the project owner paid
    payer_member_id: Optional[int] = None
    target_member_ids: List[int] = Field(default_factory=list)
    movement_id: Optional[int] = None
    name: Optional[str] = ""

    @property
    def signed_amount(self) -> int:
        return self.amount if self.kind == MovementKind.expense else -self.amount
