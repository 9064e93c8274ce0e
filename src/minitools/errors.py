from __future__ import annotations


class MinitoolsError(Exception):
    """Base class for every error raised by the quiz runner and the redirector."""


class FileOpenError(MinitoolsError, OSError):
    """The problem file could not be opened."""


class FileReadError(MinitoolsError, OSError):
    """The problem file was opened but could not be read or decoded."""


class ParseError(MinitoolsError, ValueError):
    """Input data was readable but malformed (CSV record, YAML or JSON payload)."""


class InputReadError(MinitoolsError, RuntimeError):
    """Reading an answer from the input stream failed."""
