"""
Root module of the package. This module re-exports the most commonly used types
to reduce the verbosity of the imports statements.
"""

__version__ = "1.0.0"

from .cookies import HEADER_PREFIX as HEADER_PREFIX
from .cookies import PREFIX_HOST as PREFIX_HOST
from .cookies import PREFIX_SECURE as PREFIX_SECURE
from .cookies import Cookie as Cookie
from .cookies import CookieSameSiteMode as CookieSameSiteMode
from .cookies import build_cookie_header as build_cookie_header
from .cookies import parse_cookie as parse_cookie
from .cookies import set_cookie as set_cookie
from .exceptions import CookieAttributeWarning as CookieAttributeWarning
from .exceptions import CookieError as CookieError
from .exceptions import InvalidCookieAttribute as InvalidCookieAttribute
from .headers import Header as Header
from .headers import Headers as Headers
from .jar import CookieJar as CookieJar
from .messages import HeadersTransport as HeadersTransport
from .messages import Response as Response
from .normalization import normalize_domain as normalize_domain
from .settings import cookie_settings as cookie_settings
from .utils.time import timestamp_from_cookie_format as timestamp_from_cookie_format
from .utils.time import timestamp_to_cookie_format as timestamp_to_cookie_format
