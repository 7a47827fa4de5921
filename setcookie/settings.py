from typing import Callable, Optional

from setcookie.env import CookiesEnvironmentSettings
from setcookie.utils.time import unix_now

Clock = Callable[[], int]


class CookieSettings:
    """
    Holds the defaults used when building and parsing cookies: the clock used
    to compute expiration dates and the environment settings.

    By default the clock is the system clock and the environment settings are
    read from environment variables each time they are needed. Both can be
    replaced at runtime using the `use` method, for example to obtain
    deterministic headers in tests.
    """

    def __init__(self) -> None:
        self._clock: Clock = unix_now
        self._environment: Optional[CookiesEnvironmentSettings] = None

    def use(
        self,
        clock: Optional[Clock] = None,
        environment: Optional[CookiesEnvironmentSettings] = None,
    ) -> None:
        if clock is not None:
            self._clock = clock
        if environment is not None:
            self._environment = environment

    def reset(self) -> None:
        self._clock = unix_now
        self._environment = None

    @property
    def environment(self) -> CookiesEnvironmentSettings:
        if self._environment is None:
            return CookiesEnvironmentSettings.from_env()
        return self._environment

    def now(self, clock: Optional[Clock] = None) -> int:
        if clock is not None:
            return clock()
        return self._clock()


cookie_settings = CookieSettings()
