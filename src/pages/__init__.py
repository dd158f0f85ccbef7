"""Post page pre-rendering: static parameters plus a fetch-and-render pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .fetch import build_resource_url, fetch_resource
from .models import (
    RemoteResource,
    RenderedDocument,
    RenderFailure,
    RenderOutcome,
    RenderSuccess,
    RouteParameter,
)
from .params import STATIC_IDS, generate_static_params
from .render import PageRenderer, classify_failure, render_document

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "STATIC_IDS",
    "PageRenderer",
    "RemoteResource",
    "RenderFailure",
    "RenderOutcome",
    "RenderSuccess",
    "RenderedDocument",
    "RouteParameter",
    "build_default_renderer",
    "build_resource_url",
    "classify_failure",
    "fetch_resource",
    "generate_static_params",
    "render_document",
]


def build_default_renderer(settings: Settings) -> PageRenderer:
    """Build the page renderer from configured settings."""
    return PageRenderer(
        base_url=settings.base_url,
        timeout=settings.request_timeout,
    )
