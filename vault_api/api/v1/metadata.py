import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from vault_api.api.deps import get_metadata_service
from vault_api.exceptions import FetchError, ParseError
from vault_api.schemas import (
    ErrorResponse,
    MetadataErrorResponse,
    MetadataRecord,
    MetadataRequest,
)
from vault_api.services.metadata import MetadataService, parse_domain

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/metadata", tags=["metadata"])


def _error_response(status_code: int, message: str, domain: str = "") -> JSONResponse:
    body = MetadataErrorResponse(error=message, domain=domain)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _upstream_status(status_code: Optional[int]) -> int:
    if status_code is None:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    if 400 <= status_code <= 599:
        return status_code
    return status.HTTP_502_BAD_GATEWAY


def _domain_or_empty(url: str) -> str:
    try:
        return parse_domain(url.strip())
    except ParseError:
        return ""


@router.post(
    "",
    response_model=MetadataRecord,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MetadataErrorResponse},
    },
)
async def fetch_metadata(
    service: Annotated[MetadataService, Depends(get_metadata_service)],
    payload: Optional[MetadataRequest] = None,
) -> MetadataRecord | JSONResponse:
    """Fetch a page and return its title, description, preview image and favicon."""
    if payload is None or not payload.url:
        logger.error("No URL provided in request")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="URL is required").model_dump(),
        )

    url = payload.url
    try:
        return await service.extract(url)
    except ParseError as exc:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except FetchError as exc:
        return _error_response(
            _upstream_status(exc.status_code), str(exc), domain=exc.domain
        )
    except Exception as exc:
        logger.exception("Error in metadata API")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or type(exc).__name__,
            domain=_domain_or_empty(url),
        )
