"""Remote post fetching over httpx."""

from __future__ import annotations

import logging

import httpx

from .models import RemoteResource

logger = logging.getLogger(__name__)


def build_resource_url(base_url: str, identifier: str) -> str:
    """Join *base_url* and *identifier* with a slash, without any encoding."""
    return base_url + "/" + identifier


async def fetch_resource(
    client: httpx.AsyncClient,
    base_url: str,
    identifier: str,
) -> RemoteResource:
    """GET ``<base_url>/<identifier>`` and project the JSON body.

    Transport errors, non-2xx statuses and malformed JSON are raised to the
    caller unchanged.
    """
    url = build_resource_url(base_url, identifier)
    logger.debug("fetching resource", extra={"identifier": identifier, "url": url})

    resp = await client.get(url)
    resp.raise_for_status()
    data = resp.json()

    logger.debug(
        "resource fetched",
        extra={"identifier": identifier, "status_code": resp.status_code},
    )
    return RemoteResource.from_payload(data)
