from .core.detect_indentation import detect_indentation, detect_indentation_bytes
from .core.errors import (
    IndentationDetectionError,
    TabIndentationError,
    YAMLEncodingError,
    YAMLStructureError,
)
from .core.indentation import Indentation

__all__ = [
    "detect_indentation",
    "detect_indentation_bytes",
    "Indentation",
    "IndentationDetectionError",
    "TabIndentationError",
    "YAMLEncodingError",
    "YAMLStructureError",
]
