from vault_api.schemas.metadata import (
    ErrorResponse,
    MetadataErrorResponse,
    MetadataRecord,
    MetadataRequest,
)

__all__ = [
    "ErrorResponse",
    "MetadataErrorResponse",
    "MetadataRecord",
    "MetadataRequest",
]
