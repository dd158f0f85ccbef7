"""Service layer — turns render outcomes into HTTP responses for the routes."""

from __future__ import annotations

import logging

from fastapi import HTTPException
from fastapi.responses import HTMLResponse

from src.api.schemas import StaticParam, StaticParamsResponse
from src.pages import PageRenderer, RouteParameter, generate_static_params

logger = logging.getLogger(__name__)

RENDER_FAILED_DETAIL = "Page render failed"


def list_static_params() -> StaticParamsResponse:
    """Return the statically generated parameter set."""
    return StaticParamsResponse(
        params=[StaticParam(id=param.id) for param in generate_static_params()]
    )


async def render_page(renderer: PageRenderer, identifier: str) -> HTMLResponse:
    """Render *identifier* on demand; any failure becomes a generic 502."""
    outcome = await renderer.try_render(RouteParameter(id=identifier))
    if not outcome.ok:
        logger.warning(
            "page render failed",
            extra={"identifier": identifier, "failure_kind": outcome.kind},
            exc_info=outcome.error,
        )
        raise HTTPException(status_code=502, detail=RENDER_FAILED_DETAIL)
    return HTMLResponse(content=outcome.document.html)
