"""FastAPI feed that receives session snapshots from the data layer.

The presenter keeps reveal progress strictly local, so this API never accepts
or reports phase state. It only takes participant data in and serves the
derived standings back out (useful for checking what the presenter will show).
"""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
import uvicorn

from reveal_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from reveal_app.core.awards import format_award_value
from reveal_app.core.results_manager import ResultsManager
from reveal_app.core.session_importer import SessionImportError, parse_session_payload

logger = logging.getLogger(__name__)


class _CamelModel(BaseModel):
    """Accepts both the data layer's camelCase keys and snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnswerPayload(_CamelModel):
    is_correct: bool = False
    time_spent: float = Field(default=0.0, ge=0)


class GameStatePayload(_CamelModel):
    score: float | None = None
    answers: list[AnswerPayload] = Field(default_factory=list)
    completed: bool = False
    game_type: str | None = None
    game_won: bool = False
    full_card_achieved: bool = False
    cells_marked: int = 0
    total_cells: int = 25
    lines_completed: int = 0
    best_streak: int = 0
    time_to_first_bingo: float | None = None
    time_spent: float | None = None


class ParticipantPayload(_CamelModel):
    id: str | None = None
    name: str
    avatar: str | None = None
    completed: bool = False
    final_score: float | None = None
    game_state: GameStatePayload | None = None


class QuizPayload(_CamelModel):
    id: str = ""
    title: str = ""
    description: str = ""
    question_count: int = Field(default=0, ge=0)


class SessionInfoPayload(_CamelModel):
    code: str | None = None
    game_type: str = "quiz"


class SnapshotPayload(_CamelModel):
    """Payload schema for a full session snapshot."""

    quiz: QuizPayload | None = None
    session: SessionInfoPayload = Field(default_factory=SessionInfoPayload)
    participants: list[ParticipantPayload] = Field(default_factory=list)
    is_group_win: bool | None = None


def _get_results_manager_dependency(results_manager: ResultsManager):
    def dependency() -> ResultsManager:
        return results_manager

    return dependency


def create_api_app(results_manager: ResultsManager) -> FastAPI:
    """Create a FastAPI application wired to the provided results manager."""
    app = FastAPI(title="RevealQt Feed", version="0.1.0")
    manager_dep = _get_results_manager_dependency(results_manager)

    @app.get("/health")
    def health(manager: ResultsManager = Depends(manager_dep)) -> dict[str, object]:
        return {"status": "ok", "generation": manager.get_generation()}

    @app.post("/snapshot", status_code=201)
    def post_snapshot(
        payload: SnapshotPayload,
        manager: ResultsManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            snapshot = parse_session_payload(payload.model_dump(exclude_none=True))
        except SessionImportError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        generation = manager.load_snapshot(snapshot)
        return {"participants": len(snapshot.participants), "generation": generation}

    @app.get("/results")
    def get_results(manager: ResultsManager = Depends(manager_dep)) -> dict[str, object]:
        results = manager.get_results()
        if results is None:
            raise HTTPException(status_code=404, detail="No session results loaded.")
        leaderboard = [
            {
                "rank": entry.rank,
                "name": entry.participant.name,
                "score": entry.score,
                "percentage_correct": entry.percentage_correct,
                "average_answer_time": entry.average_answer_time,
                "best_streak": entry.best_streak,
                "is_completed": entry.is_completed,
            }
            for entry in results.leaderboard
        ]
        awards = [
            {
                "id": award.id,
                "name": award.name,
                "description": award.description,
                "recipients": [
                    {
                        "name": recipient.participant_name,
                        "value": format_award_value(award, recipient.value),
                        "rank": recipient.rank,
                    }
                    for recipient in award.recipients
                ],
            }
            for award in results.awards
        ]
        stats = results.stats
        return {
            "generation": results.generation,
            "leaderboard": leaderboard,
            "awards": awards,
            "stats": {
                "total_participants": stats.total_participants,
                "average_score": stats.average_score,
                "completion_rate": stats.completion_rate,
                "average_time": stats.average_time,
                "completed_count": stats.completed_count,
                "group_win_winners": stats.group_win_winners,
            },
        }

    return app


def start_api_server(
    results_manager: ResultsManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(results_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="RevealFeedServer", daemon=True)
    thread.start()
    logger.info("Snapshot feed listening on %s:%d", host, port)
    return thread
