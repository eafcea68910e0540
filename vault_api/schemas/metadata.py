from typing import Optional

from pydantic import BaseModel


class MetadataRequest(BaseModel):
    url: Optional[str] = None


class MetadataRecord(BaseModel):
    title: str = ""
    description: str = ""
    og_image_url: str = ""
    favicon_url: str = ""
    domain: str = ""


class MetadataErrorResponse(MetadataRecord):
    error: str


class ErrorResponse(BaseModel):
    error: str
