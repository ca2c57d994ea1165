"""Exception hierarchy for Claude Code Wrapped."""


class WrappedError(Exception):
    """Base exception for all claude-code-wrapped errors"""

    pass


class StatsCacheNotFoundError(WrappedError):
    """Raised when stats-cache.json is missing or unreadable"""

    def __init__(self, message: str = "Could not read Claude Code stats cache"):
        super().__init__(message)


class ExportError(WrappedError):
    """Raised when PNG export cannot locate or capture the report"""

    pass
