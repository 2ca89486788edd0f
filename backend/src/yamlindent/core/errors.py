"""
Exceptions raised while detecting the indentation of a YAML document.

Every failure is terminal for the detection call. All of them derive from
``ValueError`` so callers that already guard against bad input keep working.
"""
from typing import Any

from ..utils.constants import TAB_INDENTATION_MESSAGE


class IndentationDetectionError(ValueError):
    """Base class for all detection failures."""


class YAMLStructureError(IndentationDetectionError):
    """The document is not syntactically valid YAML.

    The message is PyYAML's own diagnostic, passed through unchanged.
    """

    def __init__(self, message: str, problem_mark: Any = None):
        super().__init__(message)
        self.problem_mark = problem_mark


class YAMLEncodingError(IndentationDetectionError):
    """The input bytes are not valid UTF-8."""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class TabIndentationError(IndentationDetectionError):
    """A tab character was found where indentation is expected."""

    def __init__(self, message: str = TAB_INDENTATION_MESSAGE):
        super().__init__(message)
