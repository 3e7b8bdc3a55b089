"""Error taxonomy for stack conversion."""

from __future__ import annotations


class StackConverterError(Exception):
    """Base class for all stack converter errors."""

    exit_code: int = 1


class ConfigurationError(StackConverterError):
    """No usable source map paths were supplied or found."""


class DirectoryError(StackConverterError):
    """A source map directory is missing or cannot be listed."""


class SourceMapLoadError(StackConverterError):
    """A source map could not be turned into a position resolver.

    The message is embedded verbatim into the frame comment, so it is kept
    short and lower-case.
    """


class SourceMapNotFoundError(SourceMapLoadError):
    """The source map path is empty or does not exist."""


class EmptySourceMapError(SourceMapLoadError):
    """The source map file has no content."""


class SourceMapParseError(SourceMapLoadError):
    """The source map content could not be decoded."""


class StackInputError(StackConverterError):
    """Stack text could not be obtained from the requested input."""


class StackParseError(StackConverterError):
    """Stack text contained no recognizable frames."""
