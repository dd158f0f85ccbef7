"""GET /ssg and GET /ssg/{identifier} endpoint handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.api.schemas import StaticParamsResponse
from src.api.service import list_static_params, render_page
from src.pages import PageRenderer

router = APIRouter(prefix="/ssg")


def _get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


@router.get("", response_model=StaticParamsResponse)
async def get_static_params() -> StaticParamsResponse:
    return list_static_params()


@router.get("/{identifier:path}", response_class=HTMLResponse)
async def get_page(
    identifier: str,
    renderer: PageRenderer = Depends(_get_renderer),
) -> HTMLResponse:
    return await render_page(renderer, identifier)
