"""Exceptions raised by htmlgen."""


class HtmlgenError(Exception):
    """Base class for htmlgen errors."""


class EvaluationDepthError(HtmlgenError):
    """A deferred value kept producing deferred values."""


class DocumentError(HtmlgenError):
    """An element document could not be read or validated."""


__all__ = ["DocumentError", "EvaluationDepthError", "HtmlgenError"]
