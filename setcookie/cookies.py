import re
import warnings
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, AnyStr, Optional, Union
from urllib.parse import quote_plus, unquote_plus

from setcookie.exceptions import CookieAttributeWarning, InvalidCookieAttribute
from setcookie.logs import get_logger
from setcookie.normalization import is_valid_cookie_name, normalize_domain
from setcookie.settings import Clock, cookie_settings
from setcookie.utils import ensure_str
from setcookie.utils.time import (
    timestamp_from_cookie_format,
    timestamp_to_cookie_format,
)

if TYPE_CHECKING:
    from setcookie.jar import CookieJar
    from setcookie.messages import HeadersTransport

HEADER_PREFIX = "Set-Cookie: "

# the cookie must come from a secure origin and have the secure attribute
PREFIX_SECURE = "__Secure-"

# like PREFIX_SECURE, plus no domain attribute and path set to "/"
PREFIX_HOST = "__Host-"

# see https://tools.ietf.org/html/rfc6265#section-6.1
MAX_HEADER_VALUE_LENGTH = 4096

DELETED_VALUE = "deleted"

_HEADER_PATTERN = re.compile(r"^Set-Cookie: (.*?)=(.*?)(?:; (.*?))?$", re.IGNORECASE)

logger = get_logger()


class CookieSameSiteMode(str, Enum):
    NONE = "None"
    LAX = "Lax"
    STRICT = "Strict"

    @classmethod
    def from_value(cls, value: str) -> "CookieSameSiteMode":
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise InvalidCookieAttribute("SameSite attribute", value)


_SAME_SITE_VALUES = tuple(mode.value for mode in CookieSameSiteMode)

SameSite = Union[CookieSameSiteMode, str, None]


def _same_site_to_str(value: SameSite) -> Optional[str]:
    if isinstance(value, CookieSameSiteMode):
        return value.value
    return value


@dataclass(frozen=True)
class Cookie:
    """
    Describes a cookie to be sent to a client with a Set-Cookie header.

    Instances are immutable: the `with_*` methods return updated copies, so a
    cookie can be configured step by step without altering the instance it
    starts from.

    Args:
        name (str): name of the cookie, also the key under which clients send
            it back.
        value: value of the cookie; None, False and "" are sent as a request to
            delete the cookie.
        expiry_time (int): Unix timestamp at which the cookie expires, 0 for a
            session cookie.
        path (str): path for which the cookie is valid, including sub paths;
            an empty string omits the attribute.
        domain (str, optional): domain for which the cookie is valid, including
            sub domains, or None for the current host only.
        http_only (bool): whether the cookie must be hidden from scripts.
        secure_only (bool): whether the cookie must be sent over HTTPS only.
        same_site: the SameSite restriction, None to omit the attribute.
    """

    name: str
    value: Any = None
    expiry_time: int = 0
    path: str = "/"
    domain: Optional[str] = None
    http_only: bool = True
    secure_only: bool = False
    same_site: SameSite = CookieSameSiteMode.LAX

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidCookieAttribute("name", self.name)
        if (
            isinstance(self.expiry_time, bool)
            or not isinstance(self.expiry_time, int)
            or self.expiry_time < 0
        ):
            raise InvalidCookieAttribute("expiry time", self.expiry_time)
        if not isinstance(self.path, str):
            raise InvalidCookieAttribute("path", self.path)
        object.__setattr__(self, "domain", normalize_domain(self.domain))

    def __repr__(self):
        return f"<Cookie {self.name}: {self.value}>"

    def clone(self) -> "Cookie":
        return replace(self)

    def with_value(self, value: Any) -> "Cookie":
        return replace(self, value=value)

    def with_expiry_time(self, expiry_time: int) -> "Cookie":
        return replace(self, expiry_time=expiry_time)

    def with_max_age(self, max_age: int, clock: Optional[Clock] = None) -> "Cookie":
        return replace(self, expiry_time=cookie_settings.now(clock) + max_age)

    def get_max_age(self, clock: Optional[Clock] = None) -> int:
        """
        Returns the remaining lifetime of the cookie in seconds, which is negative
        for cookies that already expired.
        """
        return self.expiry_time - cookie_settings.now(clock)

    def with_path(self, path: Optional[str]) -> "Cookie":
        return replace(self, path=path or "")

    def with_domain(self, domain: Optional[str]) -> "Cookie":
        return replace(self, domain=domain)

    def with_http_only(self, http_only: bool) -> "Cookie":
        return replace(self, http_only=bool(http_only))

    def with_secure_only(self, secure_only: bool) -> "Cookie":
        return replace(self, secure_only=bool(secure_only))

    def with_same_site(self, same_site: SameSite) -> "Cookie":
        if same_site is not None and not isinstance(same_site, CookieSameSiteMode):
            if not isinstance(same_site, str):
                raise InvalidCookieAttribute("SameSite attribute", same_site)
            same_site = CookieSameSiteMode.from_value(same_site)
        return replace(self, same_site=same_site)

    def for_deletion(self, clock: Optional[Clock] = None) -> "Cookie":
        """
        Returns a copy of this cookie that instructs clients to discard it.
        """
        return replace(
            self,
            value="",
            expiry_time=max(cookie_settings.now(clock) - 3600, 0),
        )

    def to_header(self, clock: Optional[Clock] = None) -> Optional[str]:
        """
        Returns the Set-Cookie header line for this cookie, or None if the cookie
        cannot be represented by a valid header.
        """
        return build_cookie_header(
            self.name,
            self.value,
            self.expiry_time,
            self.path,
            self.domain,
            self.secure_only,
            self.http_only,
            self.same_site,
            clock=clock,
        )

    def save(
        self, transport: "HeadersTransport", clock: Optional[Clock] = None
    ) -> bool:
        """
        Sends the Set-Cookie header for this cookie, returning a value indicating
        whether the header was sent.
        """
        return transport.emit_header(self.to_header(clock))

    def save_and_set(
        self,
        transport: "HeadersTransport",
        jar: "CookieJar",
        clock: Optional[Clock] = None,
    ) -> bool:
        """
        Sends the Set-Cookie header and stores the value in the given jar, so that
        it is visible during the current request.
        """
        jar.set(self.name, self.value)
        return self.save(transport, clock)

    def delete(
        self, transport: "HeadersTransport", clock: Optional[Clock] = None
    ) -> bool:
        """
        Sends a header that instructs the client to discard this cookie. This
        instance is not modified.
        """
        return self.for_deletion(clock).save(transport, clock)

    def delete_and_unset(
        self,
        transport: "HeadersTransport",
        jar: "CookieJar",
        clock: Optional[Clock] = None,
    ) -> bool:
        """
        Sends a header that instructs the client to discard this cookie and removes
        it from the given jar, so that it is gone during the current request.
        """
        jar.unset(self.name)
        return self.delete(transport, clock)


def _normalize_expiry_time(value: Any) -> Optional[int]:
    if value is None:
        return 0
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, float):
        return None
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        return None


def _value_to_str(value: Any) -> str:
    if value is True:
        return "1"
    if isinstance(value, (str, bytes)):
        return ensure_str(value)
    return str(value)


def _calculate_max_age(expiry_time: int, now: int) -> int:
    if expiry_time == 0:
        return 0
    return max(expiry_time - now, 0)


def _check_attributes(
    name: str,
    header: str,
    path: Optional[str],
    domain: Optional[str],
    secure_only: bool,
    same_site: Optional[str],
) -> None:
    if same_site == CookieSameSiteMode.NONE.value and not secure_only:
        warnings.warn(
            "When the 'SameSite' attribute is set to 'None', the 'secure' "
            "attribute should be set as well",
            CookieAttributeWarning,
            stacklevel=3,
        )

    if name.startswith(PREFIX_SECURE) and not secure_only:
        warnings.warn(
            f"Cookies with the '{PREFIX_SECURE}' prefix must have the 'secure' "
            "attribute",
            CookieAttributeWarning,
            stacklevel=3,
        )

    if name.startswith(PREFIX_HOST) and (not secure_only or domain or path != "/"):
        warnings.warn(
            f"Cookies with the '{PREFIX_HOST}' prefix must have the 'secure' "
            "attribute, the path '/' and no domain",
            CookieAttributeWarning,
            stacklevel=3,
        )

    if len(header.encode()) - len(HEADER_PREFIX) > MAX_HEADER_VALUE_LENGTH:
        warnings.warn(
            "The length of the cookie exceeds the maximum length of "
            f"{MAX_HEADER_VALUE_LENGTH} bytes, and it would be ignored or truncated "
            "by clients. See: https://tools.ietf.org/html/rfc6265#section-6.1",
            CookieAttributeWarning,
            stacklevel=3,
        )


def build_cookie_header(
    name: str,
    value: Any = None,
    expiry_time: Any = 0,
    path: Optional[str] = None,
    domain: Optional[str] = None,
    secure_only: bool = False,
    http_only: bool = False,
    same_site: SameSite = None,
    *,
    clock: Optional[Clock] = None,
) -> Optional[str]:
    """
    Builds the header line that sets a cookie with the given options, for
    example: "Set-Cookie: id=abc123; path=/; secure; httponly; SameSite=Lax".

    Returns None if the name of the cookie is not valid or if the expiry time
    is not a number.

    A value that is None, False or an empty string produces a header that makes
    the client delete the cookie: its value is sent as "deleted" with an
    expiration date in the past.

    Values are form-urlencoded with `quote_plus`: spaces become "+", and "~"
    is left as is, unlike PHP `urlencode` which sends "%7E". Both forms decode
    to the same value.
    """
    environment = cookie_settings.environment

    if not is_valid_cookie_name(name, environment.reject_empty_names):
        logger.debug("Cannot build a Set-Cookie header, invalid name: %r", name)
        return None

    normalized_expiry_time = _normalize_expiry_time(expiry_time)
    if normalized_expiry_time is None:
        logger.debug(
            "Cannot build a Set-Cookie header, invalid expiry time: %r", expiry_time
        )
        return None
    expiry_time = normalized_expiry_time

    force_show_expiry = False

    if value is None or value is False or value == "" or value == b"":
        value = DELETED_VALUE
        expiry_time = 0
        force_show_expiry = True

    domain = normalize_domain(domain)
    same_site = _same_site_to_str(same_site)

    parts = [HEADER_PREFIX + name + "=" + quote_plus(_value_to_str(value))]

    if expiry_time > 0 or force_show_expiry:
        now = cookie_settings.now(clock)
        expires = 1 if force_show_expiry else expiry_time
        try:
            expires_value = timestamp_to_cookie_format(expires)
        except (ValueError, OverflowError, OSError):
            logger.debug(
                "Cannot build a Set-Cookie header, expiry time out of range: %r",
                expiry_time,
            )
            return None
        parts.append("expires=" + expires_value)
        parts.append("Max-Age=" + str(_calculate_max_age(expiry_time, now)))

    if path:
        parts.append("path=" + path)

    if domain:
        parts.append("domain=" + domain)

    if secure_only:
        parts.append("secure")

    if http_only:
        parts.append("httponly")

    if same_site in _SAME_SITE_VALUES:
        parts.append("SameSite=" + same_site)

    header = "; ".join(parts)

    if environment.warn_insecure:
        _check_attributes(name, header, path, domain, secure_only, same_site)

    return header


def parse_cookie(raw_value: AnyStr) -> Optional[Cookie]:
    """
    Parses a Set-Cookie header line, like "Set-Cookie: id=abc123; Path=/",
    returning the equivalent cookie, or None if the line is not a Set-Cookie
    header.

    The Max-Age attribute is ignored, the expiration is read from the Expires
    attribute only; unknown attributes are ignored.
    """
    if not raw_value:
        return None

    try:
        line = ensure_str(raw_value).rstrip("\r\n")
    except UnicodeDecodeError:
        logger.debug("Cannot parse a Set-Cookie header from: %r", raw_value)
        return None
    match = _HEADER_PATTERN.match(line)
    if match is None:
        logger.debug("Cannot parse a Set-Cookie header from: %r", line)
        return None

    name, value, attributes = match.groups()

    expiry_time = 0
    path = ""
    domain = None
    http_only = False
    secure_only = False
    same_site = None

    for attribute in attributes.split("; ") if attributes else []:
        lower_attribute = attribute.lower()
        if lower_attribute == "httponly":
            http_only = True
        elif lower_attribute == "secure":
            secure_only = True
        elif lower_attribute.startswith("expires="):
            timestamp = timestamp_from_cookie_format(attribute[8:])
            expiry_time = max(timestamp or 0, 0)
        elif lower_attribute.startswith("domain="):
            domain = attribute[7:]
        elif lower_attribute.startswith("path="):
            path = attribute[5:]
        elif lower_attribute.startswith("samesite="):
            same_site = attribute[9:]

    return Cookie(
        name,
        unquote_plus(value),
        expiry_time=expiry_time,
        path=path,
        domain=domain,
        http_only=http_only,
        secure_only=secure_only,
        same_site=same_site,
    )


def set_cookie(
    transport: "HeadersTransport",
    name: str,
    value: Any = None,
    expiry_time: Any = 0,
    path: Optional[str] = None,
    domain: Optional[str] = None,
    secure_only: bool = False,
    http_only: bool = False,
    same_site: SameSite = None,
) -> bool:
    """
    Builds and sends a Set-Cookie header in a single call, with the same defaults
    of `build_cookie_header`. Returns a value indicating whether the header was
    sent.
    """
    return transport.emit_header(
        build_cookie_header(
            name,
            value,
            expiry_time,
            path,
            domain,
            secure_only,
            http_only,
            same_site,
        )
    )
