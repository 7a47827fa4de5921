import pytest

from setcookie import CookieJar, Response
from setcookie.settings import cookie_settings

# Tue, 14-Nov-2023 22:13:20 GMT
NOW = 1700000000


def fixed_clock() -> int:
    return NOW


@pytest.fixture(autouse=True)
def default_settings():
    """
    Configures a fixed clock for each test, restoring the default settings
    afterwards.
    """
    cookie_settings.use(clock=fixed_clock)
    yield cookie_settings
    cookie_settings.reset()


@pytest.fixture
def response():
    return Response()


@pytest.fixture
def jar():
    return CookieJar({"id": "hello", "theme": "dark"})
