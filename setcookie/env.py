import os
from dataclasses import dataclass

from setcookie.utils import truthy


@dataclass(init=False, frozen=True)
class CookiesEnvironmentSettings:
    reject_empty_names: bool
    warn_insecure: bool

    def __init__(
        self,
        reject_empty_names: bool = True,
        warn_insecure: bool = True,
    ) -> None:
        object.__setattr__(self, "reject_empty_names", reject_empty_names)
        object.__setattr__(self, "warn_insecure", warn_insecure)

    @classmethod
    def from_env(cls) -> "CookiesEnvironmentSettings":
        """
        Reads the settings from environment variables:

        - `APP_COOKIES_REJECT_EMPTY_NAMES` (default "1"), set to "0" to accept
          cookies with an empty name, like legacy clients did;
        - `APP_COOKIES_WARN_INSECURE` (default "1"), set to "0" to disable the
          warnings issued for cookies that clients are likely to reject.
        """
        return cls(
            reject_empty_names=truthy(
                os.environ.get("APP_COOKIES_REJECT_EMPTY_NAMES", ""), True
            ),
            warn_insecure=truthy(os.environ.get("APP_COOKIES_WARN_INSECURE", ""), True),
        )
