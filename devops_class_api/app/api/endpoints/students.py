"""
Student endpoints.

``POST /students`` appends a validated record and answers with the
full roster.  ``GET /students/{class_id}`` looks a student up by class
identifier.  Service errors are translated to HTTP errors here:
unknown ids give 404 and duplicate ids 409.  Malformed bodies never
reach the handler; FastAPI rejects them with 422.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from devops_class_api.app.core.dependencies import get_roster
from devops_class_api.app.schemas.student import StudentCreate, StudentRead
from devops_class_api.app.services.roster_service import (
    DuplicateStudentError,
    RosterService,
    StudentNotFoundError,
)

router = APIRouter()


@router.post("", response_model=List[StudentRead], status_code=status.HTTP_200_OK)
async def add_student(
    student_in: StudentCreate,
    roster: RosterService = Depends(get_roster),
) -> List[StudentRead]:
    """Add a student and return the updated roster.

    Answers 200 with the whole collection rather than 201 with the new
    record; existing clients read the roster from this response.
    """
    try:
        return await roster.add_student(student_in)
    except DuplicateStudentError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/{class_id}", response_model=StudentRead)
async def get_student(class_id: int, roster: RosterService = Depends(get_roster)) -> StudentRead:
    """Retrieve a single student by ``classId``.

    Returns HTTP 404 if no student matches.
    """
    try:
        return await roster.get_student(class_id)
    except StudentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
