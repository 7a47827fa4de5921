from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from setcookie.cookies import HEADER_PREFIX, Cookie, parse_cookie
from setcookie.headers import Header, Headers
from setcookie.logs import get_logger

logger = get_logger()


class HeadersTransport(ABC):
    """
    Abstract base class for the objects that send header lines to the client of
    the current HTTP response.

    Implementations provide a way to know whether headers were already sent, and
    a way to send a single header line; `emit_header` combines the two and is
    what cookies use to send their Set-Cookie headers.
    """

    @abstractmethod
    def headers_sent(self) -> bool:
        """Returns a value indicating whether response headers were already sent."""

    @abstractmethod
    def send_header(self, line: str) -> None:
        """
        Sends a header line, without replacing headers having the same name.
        Raises ValueError for lines that are not "Name: value" headers.
        """

    def emit_header(self, line: Optional[str]) -> bool:
        """
        Sends the given header line, returning True if it was sent, False if the
        line is empty, malformed, or headers were already sent to the client.
        """
        if self.headers_sent():
            logger.debug("Cannot send header %r, headers were already sent", line)
            return False
        if not line:
            logger.debug("Cannot send an empty header")
            return False
        try:
            self.send_header(line)
        except ValueError:
            logger.debug("Cannot send malformed header %r", line)
            return False
        return True


class Response(HeadersTransport):
    """
    In-memory transport that collects header lines until `flush` is called, for
    example to pass them to a WSGI `start_response` callable.
    """

    def __init__(self, headers: Optional[Headers] = None):
        self.headers = headers if headers is not None else Headers()
        self._headers_sent = False

    def __repr__(self):
        return f"<Response {len(self.headers)} headers>"

    def headers_sent(self) -> bool:
        return self._headers_sent

    def send_header(self, line: str) -> None:
        self.headers.add_header(Header.from_line(line))

    def flush(self) -> List[Tuple[bytes, bytes]]:
        """
        Marks headers as sent and returns them. Headers emitted afterwards are
        refused.
        """
        self._headers_sent = True
        return list(self.headers)

    def to_wsgi_headers(self) -> List[Tuple[str, str]]:
        return [
            (name.decode(), value.decode("latin-1")) for name, value in self.headers
        ]

    def get_cookies(self) -> Dict[str, Cookie]:
        cookies = {}
        for value in self.headers.get(b"set-cookie"):
            cookie = parse_cookie(HEADER_PREFIX + value.decode())
            if cookie is not None:
                cookies[cookie.name] = cookie
        return cookies

    def get_cookie(self, name: str) -> Optional[Cookie]:
        return self.get_cookies().get(name)
