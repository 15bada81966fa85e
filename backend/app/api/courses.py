from fastapi import APIRouter

from backend.app.core.constants import COURSES

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[str])
async def list_courses():
    return COURSES
