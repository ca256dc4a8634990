"""Settings warnings."""


class MalformedSettingsWarning(UserWarning):
    """A settings value was outside its accepted range and got clamped.

    Not an error: the value is replaced by the nearest bound and the
    warning is only logged.
    """

    def __init__(self, field: str, value, clamped):
        self.field = field
        self.value = value
        self.clamped = clamped
        super().__init__(f"{field}={value!r} out of range, clamped to {clamped!r}")
