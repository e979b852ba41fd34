"""Translated content lookup (public) and translation editing (admin)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.responses import JSONResponse

from portal.views.requests import TranslationRequest, read_json
from shared.dal.models import ContentType, Translation
from shared.i18n.text import text_direction
from shared.validators import parse_language_code

if TYPE_CHECKING:
    from starlette.requests import Request

    from shared.i18n.service import TranslationService

# query parameters that are not default field values
_RESERVED_PARAMS = {"lang"}


def _service(request: Request) -> TranslationService:
    return request.app.state.translation_service


async def get_translations(request: Request) -> JSONResponse:
    """GET /api/translations/{content_type}/{content_id}?lang=xx&title=...

    Remaining query parameters are the default (source language) field
    values; stored translations for ``lang`` are laid over them.
    """
    try:
        content_type = ContentType(request.path_params["content_type"])
    except ValueError:
        return JSONResponse({"error": "Unknown content type"}, status_code=404)
    try:
        language = parse_language_code(request.query_params.get("lang", request.app.state.settings.default_language))
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=422)

    defaults = {k: v for k, v in request.query_params.items() if k not in _RESERVED_PARAMS}
    fields = await _service(request).get_translated_content(
        content_type,
        request.path_params["content_id"],
        language,
        defaults,
    )
    return JSONResponse({"language": language, "direction": text_direction(language), "fields": fields})


async def save_translation(request: Request) -> JSONResponse:
    """PUT /api/translations - upsert one translated field."""
    body = await read_json(request, TranslationRequest)
    if isinstance(body, JSONResponse):
        return body
    await _service(request).save_translation(Translation(**body.model_dump()))
    return JSONResponse({"saved": True})


async def delete_translation(request: Request) -> JSONResponse:
    """DELETE /api/translations - remove one translated field."""
    body = await read_json(request, TranslationRequest)
    if isinstance(body, JSONResponse):
        return body
    deleted = await _service(request).delete_translation(
        body.content_type,
        body.content_id,
        body.language_code,
        body.field_name,
    )
    if not deleted:
        return JSONResponse({"error": "Translation not found"}, status_code=404)
    return JSONResponse({"deleted": True})
