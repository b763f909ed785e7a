"""Exceptions raised outside the matching core."""


class ParameterShellError(Exception):
    """Base class for parameter shell errors."""


class DataLoadError(ParameterShellError):
    """A data or conditions file could not be read or parsed."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error loading {path}: {reason}")


class NotReadyError(ParameterShellError):
    """Validation was requested before data and conditions were loaded."""
