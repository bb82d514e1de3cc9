"""
Exceptions raised while resolving widget events.
"""


class CalendarError(ValueError):
    """Base class for calendar event errors."""


class InvalidDateFormat(CalendarError):
    """A civil date/time string could not be parsed into valid components."""

    def __init__(self, value: str, reason: str = ""):
        self.value = value
        message = f"Invalid date format: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidEventRange(InvalidDateFormat):
    """The resolved end instant falls before the start instant."""

    def __init__(self, start: str, end: str):
        self.start = start
        self.end = end
        super().__init__(end, reason=f"ends before start {start!r}")


class MissingRequiredAttribute(CalendarError):
    """A widget is missing its title or start attribute (not ready yet)."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f"Missing required attribute: {attribute}")
