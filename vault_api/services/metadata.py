import logging
from typing import Optional
from urllib.parse import urlsplit

import httpx

from vault_api.config import Settings, settings as default_settings
from vault_api.exceptions import FetchError, ParseError
from vault_api.schemas import MetadataRecord
from vault_api.services.extraction import (
    decode_entities,
    extract_description,
    extract_favicon,
    extract_og_image,
    extract_title,
    resolve_url,
)

logger = logging.getLogger(__name__)

# Code points a WHATWG URL parser refuses inside a host.
FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #%/:<>?@[\\]^|")


def parse_domain(url: str) -> str:
    """Return the hostname of an absolute URL, raising ParseError otherwise."""
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        parts.port  # non-numeric ports raise ValueError
        httpx.URL(url)
    except (ValueError, httpx.InvalidURL) as exc:
        raise ParseError(f"Invalid URL: {url}") from exc
    if not parts.scheme or not hostname:
        raise ParseError(f"Invalid URL: {url}")
    forbidden = FORBIDDEN_HOST_CHARS
    if ":" in hostname:
        # bracketed IPv6 literal
        forbidden = forbidden - {":"}
    if any(char in forbidden or char.isspace() for char in hostname):
        raise ParseError(f"Invalid URL: {url}")
    return hostname


class MetadataService:
    """Fetches a page and extracts its link-preview metadata."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or default_settings
        self.transport = transport

    async def extract(self, url: str) -> MetadataRecord:
        url = url.strip()
        domain = parse_domain(url)

        logger.info("Fetching metadata for URL: %s", url)
        document = await self._fetch(url, domain)
        logger.debug("HTML content length: %d", len(document))

        record = MetadataRecord(
            title=decode_entities(extract_title(document)).strip(),
            description=decode_entities(extract_description(document)).strip(),
            og_image_url=resolve_url(url, extract_og_image(document)),
            favicon_url=resolve_url(url, extract_favicon(document)),
            domain=domain,
        )
        logger.info("Metadata extracted: %s", record.model_dump())
        return record

    async def _fetch(self, url: str, domain: str) -> str:
        async with httpx.AsyncClient(
            headers=self.config.fetch_headers,
            timeout=self.config.fetch_timeout,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(url)
            except httpx.HTTPError as exc:
                logger.error("Failed to fetch URL %s: %s", url, exc)
                reason = str(exc) or type(exc).__name__
                raise FetchError(
                    f"Failed to fetch URL: {reason}", domain=domain
                ) from exc

        if not response.is_success:
            logger.error(
                "Failed to fetch URL: %s %s",
                response.status_code,
                response.reason_phrase,
            )
            raise FetchError(
                f"Failed to fetch URL: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                domain=domain,
            )
        return response.text
