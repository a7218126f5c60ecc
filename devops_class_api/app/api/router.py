"""
Top-level API router.

The roster routes are mounted at the root: ``/devops``,
``/devops-count`` and ``/students`` are the public paths, so this
router is included without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import devops, students

router = APIRouter()

router.include_router(devops.router, tags=["devops"])
router.include_router(students.router, prefix="/students", tags=["students"])
