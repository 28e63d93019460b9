"""Error taxonomy shared by the preferences core and its adapters."""


class PreferencesError(Exception):
    """Base class for every failure raised by the preferences subsystem."""


class IOFailure(PreferencesError):
    """Configuration document could not be read or written."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"I/O failure on {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParseFailure(PreferencesError):
    """Configuration document is not valid JSON or has the wrong shape."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Cannot parse {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownActionError(PreferencesError):
    def __init__(self, action_name: str):
        self.action_name = action_name
        super().__init__(f"Unknown hot key name: {action_name}")


class PromptFailure(PreferencesError):
    """The UI/input layer failed while a choice or text prompt was open."""


class InvalidValueError(PreferencesError):
    """Value rejected by an entry's closed option set, or unknown section/entry."""


__all__ = [
    "PreferencesError",
    "IOFailure",
    "ParseFailure",
    "UnknownActionError",
    "PromptFailure",
    "InvalidValueError",
]
