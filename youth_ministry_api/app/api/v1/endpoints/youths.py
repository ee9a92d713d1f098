"""
Youth endpoints for API v1.

Everyone signed in may browse profiles; admins and leaders may create
and edit them, and only admins may delete.  Engagement figures are
read‑only here; they change when attendance is recorded.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from youth_ministry_api.app.core.security import get_current_user, require_roles
from youth_ministry_api.app.core.store import DataStore, get_store
from youth_ministry_api.app.schemas.youth import (
    AgeGroup,
    EngagementStatus,
    YouthCreate,
    YouthRead,
    YouthStatus,
    YouthUpdate,
)
from youth_ministry_api.app.services.youth_service import YouthService

router = APIRouter()


@router.get("/", response_model=List[YouthRead])
async def list_youths(
    search: Optional[str] = Query(None),
    youth_status: Optional[YouthStatus] = Query(None, alias="status"),
    age_group: Optional[AgeGroup] = Query(None, alias="ageGroup"),
    engagement_status: Optional[EngagementStatus] = Query(None, alias="engagementStatus"),
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(get_current_user),
) -> List[YouthRead]:
    """List youths, newest first.

    - **search**: substring of the full name or e‑mail (case‑insensitive).
    - **status**, **ageGroup**, **engagementStatus**: exact filters.
    """
    return await YouthService.list_youths(
        store,
        search=search,
        status=youth_status,
        age_group=age_group,
        engagement_status=engagement_status,
    )


@router.get("/{youth_id}", response_model=YouthRead)
async def get_youth(
    youth_id: str,
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(get_current_user),
) -> YouthRead:
    try:
        return await YouthService.get_youth(store, youth_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=YouthRead, status_code=status.HTTP_201_CREATED)
async def create_youth(
    youth: YouthCreate,
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(require_roles("admin", "leader")),
) -> YouthRead:
    """Register a youth (admins and leaders).

    The new profile starts with a score of 0, status ``disengaged`` and
    no attendance.
    """
    return await YouthService.create_youth(store, youth, current_user)


@router.put("/{youth_id}", response_model=YouthRead)
async def update_youth(
    youth_id: str,
    updates: YouthUpdate,
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(require_roles("admin", "leader")),
) -> YouthRead:
    """Update a youth profile (admins and leaders).

    Partial updates are supported; fields that are omitted or ``null``
    remain unchanged.
    """
    update_dict = {k: v for k, v in updates.model_dump(exclude_unset=True).items() if v is not None}
    try:
        return await YouthService.update_youth(store, youth_id, update_dict)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{youth_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_youth(
    youth_id: str,
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(require_roles("admin")),
) -> None:
    """Delete a youth profile (admin only)."""
    try:
        await YouthService.delete_youth(store, youth_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
