"""Exercises API Routes

Generates QCM conjugation exercises on the fly, optionally storing them.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.database import get_db, create_entities
from core.errors import out_of_range, raise_result
from core.logging import api_logger
from engines.exercises import ExerciseRecord, generate_exercises, parse_level
from languages import Level
from models.progress import Exercise

log = api_logger()

router = APIRouter()


# === Request/Response Models ===

class GenerateRequest(BaseModel):
    level: str
    count: int | None = Field(None, ge=0)
    seed: int | None = None
    persist: bool = False


class ExerciseResponse(BaseModel):
    id: str
    type: str
    verb: str
    level: str
    sentence: str
    correctAnswer: str
    options: list[str]
    subject: str
    variant: str


class LevelResponse(BaseModel):
    id: str
    name: str
    color: str


def _to_model(record: ExerciseRecord) -> Exercise:
    return Exercise(
        id=record.id,
        type=record.type.value,
        verb=record.verb.value,
        level=record.level.value,
        sentence=record.sentence,
        correct_answer=record.correct_answer,
        options=list(record.options),
        subject=record.subject,
    )


# === Endpoints ===

@router.get("/levels", response_model=list[LevelResponse])
async def get_levels():
    """Difficulty levels, easiest first."""
    return [LevelResponse(id=level.name.lower(), name=level.display_name, color=level.color) for level in Level]


@router.post("/generate", response_model=list[ExerciseResponse])
async def generate(request: GenerateRequest, db: AsyncSession = Depends(get_db)):
    """Generate a session of exercises for a level."""
    count = settings.EXERCISES_PER_SESSION if request.count is None else request.count
    if count > settings.MAX_EXERCISES_PER_REQUEST:
        raise_result(out_of_range("count", count, 0, settings.MAX_EXERCISES_PER_REQUEST, origin="api.exercises"))

    level = parse_level(request.level)
    raise_result(level)

    records = generate_exercises(level.unwrap(), count, seed=request.seed)

    if request.persist and records:
        result = await create_entities(db, [_to_model(r) for r in records])
        raise_result(result)

    log.info("exercises_served", level=level.unwrap().value, count=len(records), persisted=request.persist)
    return [r.to_dict() for r in records]
