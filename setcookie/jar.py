from typing import Any, AnyStr, Dict, Iterator, Optional
from urllib.parse import unquote_plus

from setcookie.utils import ensure_str


class CookieJar:
    """
    Request-scoped mirror of the cookies sent by the client.

    A jar is created for each request, usually from its Cookie header, and is
    passed explicitly to the code that needs it. The `save_and_set` and
    `delete_and_unset` methods of cookies update it, so that changes are visible
    within the same request.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values) if values else {}

    @classmethod
    def from_header(cls, value: Optional[AnyStr]) -> "CookieJar":
        """
        Creates a jar from the value of a Cookie request header, like
        "id=abc123; theme=dark".
        """
        values = {}
        if value:
            for fragment in ensure_str(value).split(";"):
                name, separator, cookie_value = fragment.strip().partition("=")
                if not separator or not name:
                    continue
                values[unquote_plus(name)] = unquote_plus(cookie_value)
        return cls(values)

    def get(self, name: str, default: Any = None) -> Any:
        value = self._values.get(name)
        if value is None:
            return default
        return value

    def exists(self, name: str) -> bool:
        return self._values.get(name) is not None

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def unset(self, name: str) -> None:
        self._values.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return f"<CookieJar {list(self._values)}>"
