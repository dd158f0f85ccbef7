"""Data models for the page pre-render pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

FailureKind = Literal["transport", "status", "decode", "unexpected"]


@dataclass(frozen=True)
class RouteParameter:
    """Identifier selecting which remote post a generated page shows."""

    id: str


@dataclass(frozen=True)
class RemoteResource:
    """The two projected fields of a fetched post.

    Values are carried through as received; nothing checks their type.
    """

    title: Any = None
    body: Any = None

    @classmethod
    def from_payload(cls, data: Any) -> RemoteResource:
        """Project ``title`` and ``body`` out of a deserialized JSON payload.

        A JSON ``null`` body has no fields to read and raises ``TypeError``;
        any other non-object payload projects to absent fields.
        """
        if data is None:
            raise TypeError("response body is null, cannot read title/body")
        if not isinstance(data, dict):
            return cls()
        return cls(title=data.get("title"), body=data.get("body"))


@dataclass(frozen=True)
class RenderedDocument:
    """Markup produced for a single route parameter."""

    identifier: str
    heading: str
    paragraph: str
    html: str


@dataclass(frozen=True)
class RenderSuccess:
    parameter: RouteParameter
    document: RenderedDocument

    ok: Literal[True] = True


@dataclass(frozen=True)
class RenderFailure:
    """A render that raised; the caller decides how to present it."""

    parameter: RouteParameter
    kind: FailureKind
    error: BaseException

    ok: Literal[False] = False


RenderOutcome = Union[RenderSuccess, RenderFailure]
