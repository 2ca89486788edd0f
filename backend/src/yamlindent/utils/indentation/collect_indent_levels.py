from ..constants import COMMENT_PREFIX
from ...core.errors import TabIndentationError, YAMLEncodingError


def decode_yaml_text(yaml_input: str | bytes) -> str:
    """
    Returns the input as text, decoding bytes as strict UTF-8.

    Raises:
        YAMLEncodingError: If the bytes are not valid UTF-8.
    """
    if isinstance(yaml_input, str):
        return yaml_input
    try:
        return yaml_input.decode("utf-8")
    except UnicodeDecodeError as e:
        raise YAMLEncodingError(
            f"invalid UTF-8: {e.reason} at position {e.start}", position=e.start
        ) from e


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def collect_indent_levels(text: str) -> list[int]:
    """
    Collects the number of leading spaces of every content line.

    Blank lines and comment-only lines are skipped. Order follows the document.

    Args:
        text: Decoded YAML document.

    Returns:
        The leading-space count of each content line.

    Raises:
        TabIndentationError: If a content line is indented with a tab.
    """
    levels = []
    for line in _split_lines(text):
        stripped = line.lstrip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        leading_spaces = len(line) - len(line.lstrip(" "))
        # Tabs may neither start the line nor follow the leading spaces
        if line.startswith("\t") or line[leading_spaces : leading_spaces + 1] == "\t":
            raise TabIndentationError()

        levels.append(leading_spaces)
    return levels
