"""Exceptions raised during page artifact generation.

All errors derive from PageGenError so callers can catch every
generation failure with a single except clause:

    try:
        generator.generate_code()
    except PageGenError as e:
        print(f"Generation failed: {e}")
"""


class PageGenError(Exception):
    """Base exception for all gql-pagegen errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidPatternError(PageGenError):
    """The configured exclusion pattern or its flags are malformed.

    This is a configuration defect and fails the whole generation run.

    Attributes:
        pattern: The exclusion pattern as configured.
        flags: The pattern flags as configured.
    """

    def __init__(self, pattern: str, flags: str, reason: str):
        self.pattern = pattern
        self.flags = flags
        super().__init__(
            f"Invalid exclusion pattern {pattern!r} with flags {flags!r}: {reason}"
        )


class ConfigError(PageGenError):
    """A configuration value or file could not be used."""

    pass


class DocumentError(PageGenError):
    """An operation document could not be read or parsed.

    Attributes:
        source: Name of the offending document.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load operations from '{source}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)
