import logging
from datetime import datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, HTTPException
from sqlmodel import Field, SQLModel
from splitter.config import config
from splitter.errors import InvalidSettlementInput
from splitter.models.member import Member
from splitter.models.movement import MoneyMovement
from splitter.services.split_engine import compute_settlement

router = APIRouter()
logger = logging.getLogger(__name__)

class SettlementRequest(SQLModel):
    members: List[Member]
    movements: List[MoneyMovement] = Field(default_factory=list)
    skip_unknown_members: Optional[bool] = None

@router.post("/projects/{project_id}/settlement")
def calculate_settlement(project_id: int, payload: SettlementRequest):
    skip_unknown = config.SKIP_UNKNOWN_MEMBERS if payload.skip_unknown_members is None else payload.skip_unknown_members
    try:
        result = compute_settlement(payload.members, payload.movements, skip_unknown_members=skip_unknown)
    except InvalidSettlementInput as e:
        logger.warning("settlement input rejected for project %s: %s", project_id, e)
        raise HTTPException(status_code=422, detail={"message": "Invalid settlement input", "errors": e.to_list()})
    except Exception as e:
        logger.exception("settlement calculation failed for project %s", project_id)
        raise HTTPException(status_code=500, detail=str(e) if config.DEBUG else "Settlement calculation failed; check server logs")

    data = {
        "project_id": project_id,
        "calculation_date": datetime.now(timezone.utc).isoformat(),
        "total_amount": result.total_amount,
        "members": [b.model_dump() for b in result.member_balances],
        "transfers": [t.model_dump() for t in result.transfers],
    }
    return {"message": "Settlement calculated", "data": data}
