"""Swirdle API handlers: today's board, guesses, hints, stats, and the admin word list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.responses import JSONResponse

from portal.views.requests import GuessRequest, PublishRequest, read_json
from shared.i18n.text import interpolate, pluralize
from swirdle.exceptions import WordNotFoundError
from swirdle.logic.engine import game_phase, remaining_attempts
from swirdle.logic.evaluation import evaluate_guess
from swirdle.logic.hints import is_hint_revealed

if TYPE_CHECKING:
    from starlette.requests import Request

    from swirdle.logic.state import SwirdleAttempt, SwirdleWord, UserSwirdleStats
    from swirdle.logic.types import InvalidOperation
    from swirdle.service import SwirdleService


def _service(request: Request) -> SwirdleService:
    return request.app.state.swirdle_service


def _word_view(word: SwirdleWord, attempt: SwirdleAttempt) -> dict:
    view: dict = {
        "id": word.id,
        "length": word.length,
        "difficulty": word.difficulty,
        "category": word.category,
        "date_scheduled": word.date_scheduled.isoformat(),
        "hint_count": len(word.hints),
    }
    if attempt.completed:
        # answer and definition are only revealed once the game is over
        view["word"] = word.word
        view["definition"] = word.definition
    return view


def _hints_view(word: SwirdleWord, attempt: SwirdleAttempt) -> list[dict]:
    hints = []
    for index, text in enumerate(word.hints):
        revealed = is_hint_revealed(attempt, index)
        hints.append(
            {
                "index": index,
                "revealed": revealed,
                "used": index in attempt.hints_used,
                "text": text if revealed else None,
            },
        )
    return hints


def _attempt_view(word: SwirdleWord, attempt: SwirdleAttempt) -> dict:
    return {
        "guesses": [
            {"guess": guess, "letters": list(evaluate_guess(guess, word.word))} for guess in attempt.guesses
        ],
        "attempts_count": attempt.attempts_count,
        "remaining": remaining_attempts(attempt),
        "completed": attempt.completed,
        "won": attempt.won,
        "hints_used": sorted(attempt.hints_used),
        "phase": game_phase(attempt),
        "status": _status_message(attempt),
    }


def _status_message(attempt: SwirdleAttempt) -> str:
    if attempt.won:
        count = attempt.attempts_count
        return interpolate("Solved in {count} {noun}", {"count": count, "noun": pluralize(count, "guess", "guesses")})
    if attempt.completed:
        return "Out of guesses"
    left = remaining_attempts(attempt)
    return interpolate("{count} {noun} left", {"count": left, "noun": pluralize(left, "guess", "guesses")})


def _stats_view(stats: UserSwirdleStats) -> dict:
    data = stats.model_dump(mode="json", exclude={"user_id"})
    data["win_rate"] = stats.win_rate
    return data


def _board(word: SwirdleWord, attempt: SwirdleAttempt, stats: UserSwirdleStats) -> dict:
    return {
        "word": _word_view(word, attempt),
        "attempt": _attempt_view(word, attempt),
        "hints": _hints_view(word, attempt),
        "stats": _stats_view(stats),
    }


def _rejected(error: InvalidOperation) -> JSONResponse:
    return JSONResponse({"error": error.reason, "message": error.message}, status_code=409)


def _no_word(exc: WordNotFoundError) -> JSONResponse:
    return JSONResponse({"error": "no_word", "message": str(exc)}, status_code=404)


async def today_board(request: Request) -> JSONResponse:
    """GET /api/swirdle/today - the member's board for today's word."""
    user_id = request.user.user_id
    today = request.app.state.today()
    game = await _service(request).load_today(user_id, today)
    if game is None:
        return _no_word(WordNotFoundError(today.isoformat()))
    return JSONResponse(_board(game.word, game.attempt, game.stats))


async def submit_guess(request: Request) -> JSONResponse:
    """POST /api/swirdle/guesses - submit one guess for today's word."""
    body = await read_json(request, GuessRequest)
    if isinstance(body, JSONResponse):
        return body

    service = _service(request)
    user_id = request.user.user_id
    today = request.app.state.today()
    try:
        outcome = await service.submit_guess(user_id, today, body.guess)
    except WordNotFoundError as exc:
        return _no_word(exc)
    if outcome.error is not None:
        return _rejected(outcome.error)

    game = await service.load_today(user_id, today)
    if game is None:  # pragma: no cover - word was unpublished mid-request
        return _no_word(WordNotFoundError(today.isoformat()))
    board = _board(game.word, outcome.attempt, game.stats)
    board["letters"] = list(outcome.letters)
    return JSONResponse(board)


async def use_hint(request: Request) -> JSONResponse:
    """POST /api/swirdle/hints/{index} - unlock one hint for today's word."""
    try:
        hint_index = int(request.path_params["index"])
    except ValueError:
        return JSONResponse({"error": "Hint index must be an integer"}, status_code=422)

    service = _service(request)
    user_id = request.user.user_id
    today = request.app.state.today()
    try:
        outcome = await service.use_hint(user_id, today, hint_index)
    except WordNotFoundError as exc:
        return _no_word(exc)
    if outcome.error is not None:
        return _rejected(outcome.error)

    game = await service.load_today(user_id, today)
    if game is None:  # pragma: no cover - word was unpublished mid-request
        return _no_word(WordNotFoundError(today.isoformat()))
    return JSONResponse(_board(game.word, outcome.attempt, game.stats))


async def member_stats(request: Request) -> JSONResponse:
    """GET /api/swirdle/stats - the member's aggregate results."""
    stats = await _service(request).get_stats(request.user.user_id)
    return JSONResponse(_stats_view(stats))


async def list_words(request: Request) -> JSONResponse:
    """GET /api/swirdle/words - admin catalogue with per-word play statistics."""
    published_param = request.query_params.get("published")
    published = None if published_param is None else published_param.lower() in {"1", "true", "yes"}
    summaries = await _service(request).word_summaries(published=published)
    return JSONResponse(
        {
            "words": [
                {**word.model_dump(mode="json"), "summary": summary.model_dump(mode="json", exclude={"word_id"})}
                for word, summary in summaries
            ],
        },
    )


async def publish_word(request: Request) -> JSONResponse:
    """PUT /api/swirdle/words/{word_id}/published - toggle a word's publication."""
    body = await read_json(request, PublishRequest)
    if isinstance(body, JSONResponse):
        return body
    word_id = request.path_params["word_id"]
    if not await _service(request).set_published(word_id, published=body.published):
        return JSONResponse({"error": "Word not found"}, status_code=404)
    return JSONResponse({"word_id": word_id, "published": body.published})


async def leaderboard(request: Request) -> JSONResponse:
    """GET /api/swirdle/leaderboard - members with the longest current streaks."""
    entries = await _service(request).leaderboard()
    return JSONResponse({"leaderboard": [entry.model_dump(mode="json") for entry in entries]})
