"""Scores API Routes

Keeps one record per child, exercise type and level: a finished session
replaces the stored record only when it beats it.
"""
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from sqlalchemy import and_, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db, create_entity, execute_update, fetch_one
from core.errors import (
    AppError,
    Err,
    ErrorCode,
    Ok,
    Result,
    invalid_choice,
    not_found,
    out_of_range,
    raise_result,
    transaction_failed,
)
from core.logging import records_logger
from engines.exercises import ExerciseType, parse_level
from engines.records import BestScore, format_elapsed, is_new_record, score_percentage
from models.progress import Child, Score

log = records_logger()

router = APIRouter()

# Bounded: each lost attempt means another submission was committed
MAX_WRITE_ATTEMPTS = 5


class ScoreSubmit(BaseModel):
    child_id: UUID
    level: str
    exercise_type: str = ExerciseType.QCM.value
    score: int = Field(ge=0)
    max_score: int = Field(gt=0)
    elapsed_time: float = Field(ge=0)


class BestScoreResponse(BaseModel):
    score: int
    maxScore: int
    elapsedTime: float
    formattedTime: str
    percentage: float
    completedAt: datetime | None = None


class ScoreResult(BaseModel):
    isNewRecord: bool
    best: BestScoreResponse


def _best_response(row: Score) -> BestScoreResponse:
    return BestScoreResponse(
        score=row.score,
        maxScore=row.max_score,
        elapsedTime=row.elapsed_time,
        formattedTime=format_elapsed(row.elapsed_time),
        percentage=score_percentage(row.score, row.max_score),
        completedAt=row.completed_at,
    )


def _check_exercise_type(value: str) -> None:
    if value not in {t.value for t in ExerciseType}:
        raise_result(invalid_choice("exercise_type", value, [t.value for t in ExerciseType], origin="api.scores"))


async def _stored_best(db: AsyncSession, child_id: UUID, exercise_type: str, level: str) -> Score | None:
    """The stored record, if any (at most one row per key)."""
    result = await db.execute(
        select(Score)
        .where(
            Score.child_id == child_id,
            Score.exercise_type == exercise_type,
            Score.level == level,
        )
        .order_by(Score.score.desc(), Score.elapsed_time.asc())
    )
    return result.scalars().first()


async def _overwrite_if_beaten(db: AsyncSession, row: Score, data: ScoreSubmit) -> Result[Score | None, AppError]:
    """Overwrite `row` only while it is still beaten by `data`.

    The record rule is repeated in the WHERE clause so that a concurrent
    better submission committed in between wins; Ok(None) means it did.
    """
    statement = (
        update(Score)
        .where(
            Score.id == row.id,
            or_(
                Score.score < data.score,
                and_(Score.score == data.score, Score.elapsed_time > data.elapsed_time),
            ),
        )
        .values(
            score=data.score,
            max_score=data.max_score,
            elapsed_time=data.elapsed_time,
            completed_at=datetime.utcnow(),
        )
        .execution_options(synchronize_session=False)
    )
    match await execute_update(db, statement):
        case Ok(0):
            return Ok(None)
        case Ok(_):
            await db.refresh(row)
            return Ok(row)
        case Err(error):
            return Err(error)


async def _record_score(
    db: AsyncSession, data: ScoreSubmit, level: str
) -> Result[tuple[bool, Score], AppError]:
    """Compare against the stored record and keep the better one.

    Losing a write race (unique key taken, or the row improved meanwhile)
    re-reads the record and compares again.
    """
    for attempt in range(MAX_WRITE_ATTEMPTS):
        best = await _stored_best(db, data.child_id, data.exercise_type, level)
        previous = BestScore(best.score, best.max_score, best.elapsed_time) if best else None
        if not is_new_record(data.score, data.elapsed_time, previous):
            return Ok((False, best))

        if best is None:
            result = await create_entity(db, Score(
                child_id=data.child_id,
                exercise_type=data.exercise_type,
                level=level,
                score=data.score,
                max_score=data.max_score,
                elapsed_time=data.elapsed_time,
            ))
        else:
            result = await _overwrite_if_beaten(db, best, data)

        match result:
            case Ok(None):
                log.debug("record_write_lost", child_id=str(data.child_id), attempt=attempt)
            case Ok(row):
                return Ok((True, row))
            case Err(error) if error.code is ErrorCode.E4011_DUPLICATE_KEY:
                log.debug("record_write_lost", child_id=str(data.child_id), attempt=attempt)
            case Err(error):
                return Err(error)

    return transaction_failed(
        f"record for {data.child_id}/{data.exercise_type}/{level} kept changing",
        origin="api.scores",
    )


@router.post("/", response_model=ScoreResult)
async def submit_score(data: ScoreSubmit, db: AsyncSession = Depends(get_db)):
    """Submit a finished session; store it if it is a new record."""
    _check_exercise_type(data.exercise_type)
    parsed = parse_level(data.level)
    raise_result(parsed)
    level = parsed.unwrap().value
    if data.score > data.max_score:
        raise_result(out_of_range("score", data.score, min_val=0, max_val=data.max_score, origin="api.scores"))

    raise_result(await fetch_one(db, Child, data.child_id, "Child"))

    result = await _record_score(db, data, level)
    raise_result(result)
    new_record, best = result.unwrap()

    if new_record:
        log.info(
            "new_record",
            child_id=str(data.child_id),
            level=level,
            score=data.score,
            elapsed=format_elapsed(data.elapsed_time),
        )
    else:
        log.info("score_not_record", child_id=str(data.child_id), score=data.score, best_score=best.score)
    return ScoreResult(isNewRecord=new_record, best=_best_response(best))


@router.get("/best", response_model=BestScoreResponse)
async def get_best_score(
    child_id: UUID = Query(...),
    level: str = Query(...),
    exercise_type: str = Query(ExerciseType.QCM.value),
    db: AsyncSession = Depends(get_db),
):
    """Best stored score for a child at a level."""
    _check_exercise_type(exercise_type)
    parsed = parse_level(level)
    raise_result(parsed)
    level = parsed.unwrap().value

    best = await _stored_best(db, child_id, exercise_type, level)
    if best is None:
        raise_result(not_found("Score", f"{child_id}/{exercise_type}/{level}", origin="api.scores"))
    return _best_response(best)
