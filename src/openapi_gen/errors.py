"""Errors raised by the openapi-gen pipeline."""


class OpenApiGenError(Exception):
    """Base class for failures that abort a generation run."""


class InputNotFoundError(OpenApiGenError):
    """The route source file does not exist or cannot be read."""


class OutputWriteError(OpenApiGenError):
    """The generated document could not be written."""
