class CookieError(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class InvalidCookieAttribute(CookieError):
    def __init__(self, attribute: str, value):
        super().__init__(f"Invalid value for the cookie {attribute}: {value!r}")
        self.attribute = attribute
        self.value = value


class CookieAttributeWarning(UserWarning):
    """
    Category of the warnings issued for cookies that are built and sent, but
    that clients are likely to reject or to truncate.
    """
