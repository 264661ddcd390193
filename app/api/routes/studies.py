"""Research references relevant to the tracked lifestyle factors."""
from typing import Optional

from fastapi import APIRouter, Query

from app.services.studies import all_tags, filter_studies

router = APIRouter(prefix="/studies", tags=["studies"])


@router.get("/")
async def list_studies(
    q: Optional[str] = Query(None, description="Search title, authors or tags"),
    tag: Optional[str] = Query(None, description="Only studies with this tag"),
):
    return {
        "items": [s.to_dict() for s in filter_studies(q, tag)],
        "tags": all_tags(),
    }
