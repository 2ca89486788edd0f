import logging

from .indentation import Indentation
from ..utils.validate_yaml import validate_yaml
from ..utils.indentation import (
    collect_indent_levels,
    decode_yaml_text,
    find_indentation_unit,
)

log = logging.getLogger(__name__)


def detect_indentation(yaml: str) -> Indentation | None:
    """
    Detects the indentation used in a YAML document.

    The document is first parsed with PyYAML to make sure it is valid, then
    the leading whitespace of its lines is analyzed.

    Args:
        yaml: YAML document text.

    Returns:
        The detected Indentation, or None when the document has no indented
        block content (flat documents, flow-style collections only).

    Raises:
        YAMLStructureError: If the document is not valid YAML.
        TabIndentationError: If a line is indented with a tab.

    Example:
        >>> detect_indentation("root:\\n    child: value\\n").spaces
        4
        >>> detect_indentation("key: value\\n") is None
        True
    """
    if not isinstance(yaml, str):
        raise TypeError(f"Expected str, got {type(yaml).__name__}.")
    return _detect(yaml)


def detect_indentation_bytes(yaml: bytes) -> Indentation | None:
    """
    Byte variant of `detect_indentation`. The bytes must be UTF-8.

    Raises:
        YAMLEncodingError: If the bytes are not valid UTF-8.
    """
    if not isinstance(yaml, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(yaml).__name__}.")
    return _detect(bytes(yaml))


def _detect(yaml: str | bytes) -> Indentation | None:
    validate_yaml(yaml)

    text = decode_yaml_text(yaml)
    levels = collect_indent_levels(text)
    unit = find_indentation_unit(levels)
    log.debug("Collected %d indentation levels, unit: %s", len(levels), unit)

    if unit is None:
        return None
    return Indentation(spaces=unit)
