"""Score and Best-Record Engine

Session bookkeeping for a run of exercises: a running score, a timer,
and the rule deciding whether a finished run beats the stored record.
"""
import time
from dataclasses import dataclass
from typing import Callable

from core.logging import records_logger

log = records_logger()


@dataclass(frozen=True, slots=True)
class BestScore:
    """The stored record for one (child, exercise type, level)."""
    score: int
    max_score: int
    elapsed_time: float  # seconds


def is_new_record(score: int, elapsed_time: float, best: BestScore | None) -> bool:
    """A run beats the record with a higher score, or the same score faster.

    With no record yet, any run is a record.
    """
    if best is None:
        return True
    return score > best.score or (score == best.score and elapsed_time < best.elapsed_time)


def score_percentage(score: int, max_score: int) -> float:
    if max_score <= 0:
        return 0.0
    return score / max_score


def format_elapsed(seconds: float) -> str:
    """"MM:SS", or "HH:MM:SS" once past an hour."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


class ScoreTracker:
    """Running score and stopwatch for one exercise session."""

    __slots__ = ('max_score', 'current_score', '_clock', '_started_at', '_accumulated')

    def __init__(self, max_score: int = 10, clock: Callable[[], float] = time.monotonic):
        self.max_score = max_score
        self.current_score = 0
        self._clock = clock
        self._started_at: float | None = None
        self._accumulated = 0.0

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return self._accumulated
        return self._accumulated + (self._clock() - self._started_at)

    @property
    def percentage(self) -> float:
        return score_percentage(self.current_score, self.max_score)

    @property
    def formatted_elapsed(self) -> str:
        return format_elapsed(self.elapsed)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None:
            self._accumulated += self._clock() - self._started_at
            self._started_at = None

    def increment(self) -> None:
        self.current_score += 1

    def reset(self) -> None:
        self.current_score = 0
        self._started_at = None
        self._accumulated = 0.0

    def beats(self, best: BestScore | None) -> bool:
        """Whether the current session would replace `best`."""
        result = is_new_record(self.current_score, self.elapsed, best)
        log.debug(
            "record_compared",
            score=self.current_score,
            elapsed=round(self.elapsed, 2),
            best_score=best.score if best else None,
            new_record=result,
        )
        return result
