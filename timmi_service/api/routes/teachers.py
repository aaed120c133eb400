"""
Teacher listing routes
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from ...config import settings
from ...schemas import PageResponse
from ...domain.models import FilterState, SortKey
from ...domain.repositories import ITeacherRepository
from ...application import pages
from ..dependencies import get_teacher_repository


router = APIRouter(prefix="/api/v1/teachers", tags=["Teachers"])


@router.get("", response_model=PageResponse)
async def list_teachers(
    search: str = Query("", max_length=100),
    subject: Optional[str] = None,
    city: Optional[str] = None,
    min_rate: int = Query(settings.LISTING_MIN_RATE, ge=0),
    max_rate: int = Query(settings.LISTING_MAX_RATE, ge=0),
    min_rating: float = Query(0.0, ge=0, le=5),
    sort: SortKey = SortKey.RATING,
    repository: ITeacherRepository = Depends(get_teacher_repository)
):
    """
    Teacher listing with filters

    - **search**: Substring of the name or bio, case-insensitive
    - **subject**: Subject slug
    - **city**: Exact city name
    - **min_rate** / **max_rate**: Inclusive hourly rate range (GNF)
    - **min_rating**: Minimum rating
    - **sort**: rating, price_asc, price_desc, experience or reviews
    """
    filters = FilterState(
        search=search,
        subject=subject or None,
        city=city or None,
        min_rate=min_rate,
        max_rate=max_rate,
        min_rating=min_rating,
        sort=sort,
    )
    teachers = await repository.list_teachers()
    subjects = await repository.list_subjects()
    return pages.teachers_page(teachers, subjects, filters)


@router.get("/{teacher_id}", response_model=PageResponse)
async def get_teacher(
    teacher_id: int,
    repository: ITeacherRepository = Depends(get_teacher_repository)
):
    """Teacher detail page"""
    try:
        return pages.teacher_detail_page(await repository.find_by_id(teacher_id))
    except pages.PageNotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
