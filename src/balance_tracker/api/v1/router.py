"""Primary API router definition."""

from fastapi import APIRouter

from . import auth, students

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(students.router)
