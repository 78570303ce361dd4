"""Children API Routes"""
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db, fetch_one, create_entity
from core.errors import raise_result
from core.logging import api_logger
from engines.exercises import parse_level
from languages import Level
from models.progress import Child

log = api_logger()

router = APIRouter()


class ChildCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    level: str = Level.BEGINNER.value


class ChildResponse(BaseModel):
    id: UUID
    first_name: str
    level: str
    created_at: datetime

    class Config:
        from_attributes = True


@router.post("/", response_model=ChildResponse)
async def create_child(data: ChildCreate, db: AsyncSession = Depends(get_db)):
    """Register a child."""
    level = parse_level(data.level)
    raise_result(level)

    result = await create_entity(db, Child(first_name=data.first_name.strip(), level=level.unwrap().value))
    raise_result(result)
    child = result.unwrap()
    log.info("child_created", child_id=str(child.id), level=child.level)
    return child


@router.get("/", response_model=list[ChildResponse])
async def list_children(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Child).order_by(Child.created_at))
    return result.scalars().all()


@router.get("/{child_id}", response_model=ChildResponse)
async def get_child(child_id: UUID, db: AsyncSession = Depends(get_db)):
    result = await fetch_one(db, Child, child_id, "Child")
    raise_result(result)
    return result.unwrap()
