"""Static route parameters for the pre-rendered post pages."""

from __future__ import annotations

from .models import RouteParameter

STATIC_IDS: tuple[str, ...] = ("1", "2", "3", "4")


def generate_static_params() -> list[RouteParameter]:
    """Return the parameters whose pages are generated at build time."""
    return [RouteParameter(id=identifier) for identifier in STATIC_IDS]
