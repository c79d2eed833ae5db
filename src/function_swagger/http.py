"""Request and response types exchanged with the hosting runtime.

``HttpRequest`` is injected by the runtime into handlers that ask for it and is
never described as user input. ``HttpResponse`` is the raw response envelope;
handlers returning it declare their real payload with ``@response_type``.
"""

from urllib.parse import urlsplit

from pydantic import BaseModel


class HttpRequest(BaseModel):
    """An inbound HTTP request."""

    method: str = "GET"
    url: str
    headers: dict[str, str] = {}
    params: dict[str, str] = {}
    body: bytes = b""

    @property
    def authority(self) -> str:
        """Host and optional port of the request URL."""
        return urlsplit(self.url).netloc


class HttpResponse(BaseModel):
    """An outbound HTTP response."""

    status_code: int = 200
    body: str = ""
    mimetype: str = "text/plain"
    headers: dict[str, str] = {}
