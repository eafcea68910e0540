"""Client helper for callers of the metadata endpoint.

Bookmark forms and bulk CSV import call :func:`fetch_metadata` once per URL.
It never raises for API or network failures: the caller gets a record with
only ``domain`` filled in and can still save the bookmark.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from vault_api.config import settings
from vault_api.exceptions import ParseError
from vault_api.schemas import MetadataRecord
from vault_api.services.metadata import parse_domain

logger = logging.getLogger(__name__)


def _fallback_record(url: str) -> MetadataRecord:
    try:
        domain = parse_domain(url.strip())
    except ParseError:
        domain = ""
    return MetadataRecord(domain=domain)


async def fetch_metadata(
    url: str,
    *,
    base_url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> MetadataRecord:
    endpoint = f"{(base_url or str(settings.api_base_url)).rstrip('/')}/api/metadata"
    logger.info("Fetching metadata for: %s", url)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.fetch_timeout + 5) as owned:
                response = await owned.post(endpoint, json={"url": url})
        else:
            response = await client.post(endpoint, json={"url": url})
    except httpx.HTTPError as exc:
        logger.error("Error fetching metadata for %s: %s", url, exc)
        return _fallback_record(url)

    try:
        data = response.json()
    except ValueError:
        logger.error("Invalid response from metadata API for %s", url)
        return _fallback_record(url)

    if not response.is_success:
        error = data.get("error") if isinstance(data, dict) else None
        logger.error("Metadata API error for %s: %s", url, error or response.status_code)
        return _fallback_record(url)

    try:
        return MetadataRecord.model_validate(data)
    except ValidationError as exc:
        logger.error("Unexpected metadata payload for %s: %s", url, exc)
        return _fallback_record(url)
