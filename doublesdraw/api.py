"""
REST API for the doubles draw generator.
Thin wrappers around the draw generator and the session draw service.
"""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from doublesdraw import __version__
from doublesdraw.draw import (
    NoValidScheduleFoundError,
    ScheduleError,
    SeededRNG,
    combined_schedule_to_list,
    generate_combined_lineup,
)
from doublesdraw.log import setup_logger
from doublesdraw.services.draw_service import TeamValidationError, generate_draw

logger = setup_logger(__name__)


# ---------- FastAPI app ----------
app = FastAPI(
    title="Doubles Draw API",
    description="Fair Red vs Black doubles draws for club sessions",
    version=__version__,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Request/Response models ----------


class DrawRequest(BaseModel):
    players_per_team: int = Field(..., ge=1, le=64, description="Roster size of each team")
    waves: int = Field(..., ge=1, le=50)
    courts: int = Field(..., ge=1, le=20)
    max_attempts: int | None = Field(None, ge=1, le=1000, description="Retries per team; server default if omitted")
    seed: int | None = Field(default=None, description="RNG seed for reproducibility")


class LineupRequest(BaseModel):
    red_team: list[str] = Field(..., min_length=1, description="Red roster in slot order")
    black_team: list[str] = Field(..., min_length=1, description="Black roster in slot order")
    unassigned: list[str] = Field(default_factory=list, description="Session participants without a team")
    waves: int = Field(..., ge=1, le=50)
    courts: int = Field(..., ge=1, le=20)
    max_attempts: int | None = Field(None, ge=1, le=1000)
    seed: int | None = None


def _schedule_http_error(exc: ScheduleError) -> HTTPException:
    """Structural problems are the caller's input; exhausted retries are not."""
    if isinstance(exc, NoValidScheduleFoundError):
        return HTTPException(status_code=422, detail=NoValidScheduleFoundError.user_message)
    return HTTPException(status_code=400, detail=str(exc))


# ---------- Endpoints ----------


@app.get("/health")
def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.post("/draws")
def create_draw(req: DrawRequest) -> dict[str, Any]:
    """
    Positional draw: every court lists the Red and Black pairs as 1-based roster slots.
    Same seed and same parameters return the same draw.
    """
    rng = SeededRNG(req.seed)
    try:
        lineup = generate_combined_lineup(
            req.players_per_team, req.waves, req.courts, req.max_attempts, rng=rng
        )
    except ScheduleError as exc:
        logger.info("Draw rejected (%s): %s", type(exc).__name__, exc)
        raise _schedule_http_error(exc) from exc
    return {
        "seed": rng.seed,
        "players_per_team": req.players_per_team,
        "waves": combined_schedule_to_list(lineup),
    }


@app.post("/draws/lineup")
def create_lineup(req: LineupRequest) -> dict[str, Any]:
    """Draw for named rosters; returns one match per wave and court."""
    rng = SeededRNG(req.seed)
    try:
        matches = generate_draw(
            req.red_team,
            req.black_team,
            req.waves,
            req.courts,
            max_attempts=req.max_attempts,
            rng=rng,
            unassigned=req.unassigned,
        )
    except TeamValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ScheduleError as exc:
        logger.info("Lineup rejected (%s): %s", type(exc).__name__, exc)
        raise _schedule_http_error(exc) from exc
    return {
        "seed": rng.seed,
        "matches": [m.to_dict() for m in matches],
    }


# ---------- Run with: uvicorn doublesdraw.api:app --reload ----------
