from decimal import Decimal
from typing import Optional
from pydantic import ConfigDict
from sqlmodel import Field, SQLModel

# Stands in for a project owner who has no membership row of their own.
OWNER_SENTINEL_ID = -1

class Member(SQLModel):
    model_config = ConfigDict(frozen=True)

    member_id: int
    display_name: str = ""
    split_weight: Decimal = Field(default=Decimal("1"))
    is_owner: bool = False
    customer_id: Optional[int] = None

def owner_member(display_name: str = "Owner", split_weight: Decimal = Decimal("1"), customer_id: Optional[int] = None) -> Member:
    return Member(member_id=OWNER_SENTINEL_ID, display_name=display_name,
                  split_weight=split_weight, is_owner=True, customer_id=customer_id)
