"""
Class listing endpoints.

``/devops`` returns the whole roster and ``/devops-count`` its size.
Neither route filters nor paginates.
"""

from typing import List

from fastapi import APIRouter, Depends

from devops_class_api.app.core.dependencies import get_roster
from devops_class_api.app.schemas.student import StudentRead
from devops_class_api.app.services.roster_service import RosterService

router = APIRouter()


@router.get("/devops", response_model=List[StudentRead])
async def list_students(roster: RosterService = Depends(get_roster)) -> List[StudentRead]:
    """Return every student in the order they were added."""
    return await roster.list_students()


@router.get("/devops-count", response_model=int)
async def count_students(roster: RosterService = Depends(get_roster)) -> int:
    """Return the number of students as a bare JSON integer."""
    return await roster.count_students()
