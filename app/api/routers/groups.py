# app/api/routers/groups.py
"""
Group endpoints: allocate a roster into balanced groups, as JSON or CSV.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, Field

from app.config.settings import settings
from app.domain.errors import AllocationError, InvalidConfiguration
from app.domain.models import AllocationResult, Person
from app.services.export_service import records_to_csv
from app.services.group_service import GroupService

logger = logging.getLogger(__name__)

router = APIRouter()


class AllocateReq(BaseModel):
    roster: List[Person] = Field(min_length=2)
    group_size: Optional[float] = None
    seed: Optional[int] = None


def _run_allocation(req: AllocateReq) -> AllocationResult:
    service = GroupService()
    try:
        return service.create_groups(req.roster, req.group_size, req.seed)
    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AllocationError as e:
        logger.error(e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/allocate", summary="Split a roster into balanced groups")
def allocate_groups(req: AllocateReq):
    result = _run_allocation(req)
    return {
        "sizes": result.sizes,
        "quotas": result.quotas,
        "groups": [[p.model_dump() for p in group] for group in result.groups],
        "records": [r.model_dump() for r in result.records],
        "summary": GroupService().group_summary(result),
    }


@router.post("/allocate/csv", summary="Split a roster and download the groups as CSV")
def allocate_groups_csv(req: AllocateReq):
    result = _run_allocation(req)
    return Response(
        content=records_to_csv(result.records),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.EXPORT_FILENAME}"'},
    )
