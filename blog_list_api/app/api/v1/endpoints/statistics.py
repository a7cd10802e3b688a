"""
Statistics endpoint for API v1.

Returns total likes, the favorite blog, the most prolific author and
the most liked author over all stored blogs.
"""

from fastapi import APIRouter, Depends

from blog_list_api.app.core.db import Database, get_db
from blog_list_api.app.schemas.statistics import StatisticsRead
from blog_list_api.app.services.statistics_service import StatisticsService


router = APIRouter()


@router.get("/", response_model=StatisticsRead)
async def get_statistics(db: Database = Depends(get_db)) -> StatisticsRead:
    return StatisticsService(db).overview()
