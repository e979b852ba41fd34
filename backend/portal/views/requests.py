"""Request body models and JSON body parsing for portal handlers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError, field_validator
from starlette.responses import JSONResponse

from shared.dal.models import ContentType
from shared.validators import parse_language_code

if TYPE_CHECKING:
    from starlette.requests import Request


class GuessRequest(BaseModel):
    guess: str = Field(min_length=1, max_length=32)


class SignInRequest(BaseModel):
    ticket: str = Field(min_length=1)


class PublishRequest(BaseModel):
    published: bool


class TranslationRequest(BaseModel):
    content_type: ContentType
    content_id: str = Field(min_length=1)
    language_code: str
    field_name: str = Field(min_length=1)
    translated_text: str = ""

    @field_validator("language_code")
    @classmethod
    def _normalize_language(cls, v: str) -> str:
        return parse_language_code(v)


async def read_json[M: BaseModel](request: Request, model: type[M]) -> M | JSONResponse:
    """Parse the request body into ``model`` or return a 422 JSON error response."""
    raw_body = await request.body()
    try:
        body = json.loads(raw_body) if raw_body.strip() else {}
    except ValueError:
        return JSONResponse({"error": "Invalid JSON body"}, status_code=422)
    if not isinstance(body, dict):
        return JSONResponse({"error": "JSON body must be an object"}, status_code=422)
    try:
        return model.model_validate(body)
    except ValidationError as e:
        return JSONResponse({"error": "Validation failed", "details": e.errors(include_url=False)}, status_code=422)
