"""Load session results exported by the real-time data layer.

File format (JSON, keys accepted in snake_case or camelCase)::

    {
      "quiz": {"id": "q1", "title": "Safety Basics", "question_count": 10},
      "session": {"code": "ABC123", "game_type": "quiz"},
      "participants": [
        {
          "id": "p1",
          "name": "Ada",
          "completed": true,
          "finalScore": 800,
          "gameState": {
            "score": 800,
            "answers": [{"isCorrect": true, "timeSpent": 4.2}, ...]
          }
        }
      ]
    }

``quiz.questions`` (a list) may replace ``question_count``. Any field that is
missing falls back to zero/empty, so a participant who never answered still
produces a valid (empty) record. Structural problems raise
:class:`SessionImportError`.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any

from reveal_app.core.models import (
    Answer,
    GameState,
    GameType,
    Participant,
    Quiz,
    SessionSnapshot,
)

logger = logging.getLogger(__name__)


class SessionImportError(Exception):
    """Raised when session results cannot be parsed."""


@dataclass(slots=True)
class ImportedSession:
    """Container for an imported snapshot and where it came from."""

    source_path: Path
    snapshot: SessionSnapshot


def load_session_from_file(file_path: Path) -> ImportedSession:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SessionImportError(f"Results file is not valid UTF-8 text: {exc.reason}.") from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SessionImportError(f"Results file is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc
    snapshot = parse_session_payload(document)
    logger.info("Imported %d participants from %s", len(snapshot.participants), file_path)
    return ImportedSession(source_path=file_path, snapshot=snapshot)


def parse_session_payload(document: Any) -> SessionSnapshot:
    if not isinstance(document, dict):
        raise SessionImportError("Session results must be a JSON object.")

    session = _optional_mapping(document, "session")
    game_type = parse_game_type(_get(session, "game_type", "quiz"))
    is_group_win = bool(_get(document, "is_group_win", game_type is GameType.BINGO))

    quiz_doc = _get(document, "quiz")
    quiz = _parse_quiz(quiz_doc) if quiz_doc is not None else None

    raw_participants = _get(document, "participants", [])
    if not isinstance(raw_participants, list):
        raise SessionImportError("'participants' must be a list.")
    participants = [
        _parse_participant(raw, index, game_type)
        for index, raw in enumerate(raw_participants)
    ]

    return SessionSnapshot(
        quiz=quiz,
        participants=participants,
        is_group_win=is_group_win,
        session_code=_get(session, "code"),
    )


def parse_game_type(value: Any) -> GameType:
    try:
        return GameType(str(value).lower())
    except ValueError as exc:
        raise SessionImportError(f"Unknown game type: '{value}'.") from exc


def _parse_quiz(doc: Any) -> Quiz:
    if not isinstance(doc, dict):
        raise SessionImportError("'quiz' must be an object.")
    questions = _get(doc, "questions")
    if isinstance(questions, list):
        count = len(questions)
    else:
        count = _as_int(_get(doc, "question_count", 0), "quiz.question_count")
    if count < 0:
        raise SessionImportError("quiz.question_count must not be negative.")
    return Quiz(
        id=str(_get(doc, "id", "")),
        title=str(_get(doc, "title", "") or ""),
        description=str(_get(doc, "description", "") or ""),
        question_count=count,
    )


def _parse_participant(doc: Any, index: int, game_type: GameType) -> Participant:
    if not isinstance(doc, dict):
        raise SessionImportError(f"Participant #{index + 1} must be an object.")
    name = _get(doc, "name")
    if not name:
        raise SessionImportError(f"Participant #{index + 1} is missing a name.")
    state_doc = _get(doc, "game_state")
    return Participant(
        id=str(_get(doc, "id", f"participant-{index + 1}")),
        name=str(name),
        avatar=_get(doc, "avatar"),
        completed=bool(_get(doc, "completed", False)),
        final_score=_as_optional_number(_get(doc, "final_score"), f"{name}.final_score"),
        game_state=_parse_game_state(state_doc, str(name), game_type) if state_doc is not None else None,
    )


def _parse_game_state(doc: Any, owner: str, default_type: GameType) -> GameState:
    if not isinstance(doc, dict):
        raise SessionImportError(f"Game state for '{owner}' must be an object.")
    raw_answers = _get(doc, "answers", []) or []
    if not isinstance(raw_answers, list):
        raise SessionImportError(f"Answers for '{owner}' must be a list.")
    answers = [_parse_answer(raw, owner) for raw in raw_answers]
    raw_type = _get(doc, "game_type")
    return GameState(
        score=_as_optional_number(_get(doc, "score"), f"{owner}.score"),
        answers=answers,
        completed=bool(_get(doc, "completed", False)),
        game_type=parse_game_type(raw_type) if raw_type is not None else default_type,
        game_won=bool(_get(doc, "game_won", False)),
        full_card_achieved=bool(_get(doc, "full_card_achieved", False)),
        cells_marked=_as_int(_get(doc, "cells_marked", 0), f"{owner}.cells_marked"),
        total_cells=_as_int(_get(doc, "total_cells", 25), f"{owner}.total_cells"),
        lines_completed=_as_int(_get(doc, "lines_completed", 0), f"{owner}.lines_completed"),
        best_streak=_as_int(_get(doc, "best_streak", 0), f"{owner}.best_streak"),
        time_to_first_bingo=_as_optional_number(
            _get(doc, "time_to_first_bingo"), f"{owner}.time_to_first_bingo"
        ),
        time_spent=_as_optional_number(_get(doc, "time_spent"), f"{owner}.time_spent") or 0.0,
    )


def _parse_answer(doc: Any, owner: str) -> Answer:
    if not isinstance(doc, dict):
        raise SessionImportError(f"Answers for '{owner}' must be objects.")
    time_spent = _as_optional_number(_get(doc, "time_spent"), f"{owner}.time_spent") or 0.0
    if time_spent < 0:
        raise SessionImportError(f"Answer time for '{owner}' must not be negative.")
    return Answer(is_correct=bool(_get(doc, "is_correct", False)), time_spent=time_spent)


def _get(doc: dict | None, key: str, default: Any = None) -> Any:
    """Look up ``key`` in snake_case, then camelCase."""
    if not doc:
        return default
    if key in doc:
        return doc[key]
    head, *rest = key.split("_")
    camel = head + "".join(part.capitalize() for part in rest)
    return doc.get(camel, default)


def _optional_mapping(doc: dict, key: str) -> dict:
    value = _get(doc, key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SessionImportError(f"'{key}' must be an object.")
    return value


def _as_optional_number(value: Any, label: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SessionImportError(f"{label} must be a number.")
    return value


def _as_int(value: Any, label: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SessionImportError(f"{label} must be an integer.")
    return int(value)
