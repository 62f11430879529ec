from __future__ import annotations


class FormatError(ValueError):
    """Base class for caller mistakes detected by the format engine."""


class InvalidSelectionError(FormatError):
    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(
            f"Invalid selection ({start}, {end}) for text of length {length}"
        )
        self.start = start
        self.end = end
        self.length = length


class UnsupportedActionError(FormatError):
    def __init__(self, action: object) -> None:
        super().__init__(f"Unsupported markdown action: {action!r}")
        self.action = action


class InvalidTitleLevelError(FormatError):
    def __init__(self, level: object) -> None:
        super().__init__(f"Title level must be between 1 and 6, got {level!r}")
        self.level = level
