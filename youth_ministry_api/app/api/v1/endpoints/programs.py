"""Program endpoints for API v1 (read‑only)."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from youth_ministry_api.app.core.security import get_current_user
from youth_ministry_api.app.core.store import DataStore, get_store
from youth_ministry_api.app.schemas.program import ProgramRead
from youth_ministry_api.app.services.program_service import ProgramService

router = APIRouter()


@router.get("/", response_model=List[ProgramRead])
async def list_programs(
    active: Optional[bool] = Query(None, alias="isActive"),
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(get_current_user),
) -> List[ProgramRead]:
    return await ProgramService.list_programs(store, active=active)


@router.get("/{program_id}", response_model=ProgramRead)
async def get_program(
    program_id: str,
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(get_current_user),
) -> ProgramRead:
    program = await ProgramService.get_program(store, program_id)
    if program is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Program not found")
    return program
