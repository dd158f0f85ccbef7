"""Page renderer — fetches one post and maps it onto the page template."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx
import jinja2

from .fetch import fetch_resource
from .models import (
    FailureKind,
    RemoteResource,
    RenderedDocument,
    RenderFailure,
    RenderOutcome,
    RenderSuccess,
    RouteParameter,
)

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    keep_trailing_newline=True,
)


def _as_text(value: Any) -> str:
    """Text shown for a projected field; absent values and booleans show nothing."""
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return "".join(_as_text(item) for item in value)
    return str(value)


def render_document(identifier: str, resource: RemoteResource) -> RenderedDocument:
    """Render *resource* into the heading/paragraph page markup."""
    heading = _as_text(resource.title)
    paragraph = _as_text(resource.body)
    html = _jinja_env.get_template("post.html.j2").render(
        heading=heading,
        paragraph=paragraph,
    )
    return RenderedDocument(
        identifier=identifier,
        heading=heading,
        paragraph=paragraph,
        html=html,
    )


def classify_failure(exc: BaseException) -> FailureKind:
    """Map a render exception onto the failure taxonomy."""
    if isinstance(exc, httpx.HTTPStatusError):
        return "status"
    if isinstance(exc, (ValueError, httpx.DecodingError)):
        return "decode"
    if isinstance(exc, httpx.TransportError):
        return "transport"
    return "unexpected"


class PageRenderer:
    """Renders one page per route parameter from ``<base_url>/<id>``.

    Holds configuration only. Every call opens and closes its own HTTP
    client, so concurrent renders share no mutable state.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def render(self, parameter: RouteParameter) -> RenderedDocument:
        """Fetch the post for *parameter* and render it. Failures propagate."""
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            resource = await fetch_resource(client, self._base_url, parameter.id)

        document = render_document(parameter.id, resource)
        logger.debug(
            "page rendered",
            extra={"identifier": parameter.id, "html_length": len(document.html)},
        )
        return document

    async def try_render(self, parameter: RouteParameter) -> RenderOutcome:
        """Like :meth:`render`, but return failures as a :class:`RenderFailure`."""
        try:
            document = await self.render(parameter)
        except Exception as exc:
            return RenderFailure(parameter=parameter, kind=classify_failure(exc), error=exc)
        return RenderSuccess(parameter=parameter, document=document)
