"""Read access to ministry programs."""

from typing import List, Optional

from ..core.store import DataStore
from ..schemas.program import ProgramRead


class ProgramService:
    @classmethod
    async def list_programs(cls, store: DataStore, active: Optional[bool] = None) -> List[ProgramRead]:
        programs = store.programs.list()
        if active is not None:
            programs = [program for program in programs if program.is_active == active]
        return programs

    @classmethod
    async def get_program(cls, store: DataStore, program_id: str) -> Optional[ProgramRead]:
        return store.programs.get(program_id)
