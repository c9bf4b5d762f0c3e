from decimal import Decimal
from typing import List
from pydantic import ConfigDict
from sqlmodel import Field, SQLModel

class MemberBalance(SQLModel):
    model_config = ConfigDict(frozen=True)

    member_id: int
    display_name: str
    split_weight: Decimal
    is_owner: bool
    total_paid: int
    share_amount: int
    # +: to be reimbursed, -: owes money
    balance: int

class Transfer(SQLModel):
    model_config = ConfigDict(frozen=True)

    from_member_id: int
    to_member_id: int
    amount: int
    from_member_name: str = ""
    to_member_name: str = ""

class SettlementResult(SQLModel):
    model_config = ConfigDict(frozen=True)

    total_amount: int
    member_balances: List[MemberBalance] = Field(default_factory=list)
    transfers: List[Transfer] = Field(default_factory=list)

class AggregationRow(SQLModel):
    member_id: int
    total_paid: int = 0
    total_share: int = 0
