from typing import Optional


class MetadataError(Exception):
    """Base class for metadata extraction failures."""


class ParseError(MetadataError):
    """The requested URL is not a valid absolute URL."""


class FetchError(MetadataError):
    """The remote page could not be retrieved.

    ``status_code`` is the upstream HTTP status when the server answered,
    ``None`` for transport failures (DNS, timeout, refused connection).
    """

    def __init__(
        self, message: str, *, status_code: Optional[int] = None, domain: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.domain = domain
