import yaml
from yaml.reader import ReaderError

from ..core.errors import YAMLEncodingError, YAMLStructureError

# PyYAML marks non-printable characters with this pseudo-encoding.
_NON_PRINTABLE_ENCODING = "unicode"


def validate_yaml(yaml_input: str | bytes) -> None:
    """
    Drains a PyYAML event stream over the input to make sure it is valid YAML.

    Args:
        yaml_input: YAML document as text or raw bytes.

    Raises:
        YAMLEncodingError: If PyYAML fails to decode the bytes.
        YAMLStructureError: If the document is not syntactically valid YAML.
    """
    try:
        for event in yaml.parse(yaml_input, Loader=yaml.SafeLoader):
            if isinstance(event, yaml.StreamEndEvent):
                break
    except ReaderError as e:
        if e.encoding != _NON_PRINTABLE_ENCODING:
            raise YAMLEncodingError(
                f"invalid UTF-8: {e.reason} at position {e.position}",
                position=e.position,
            ) from e
        raise YAMLStructureError(str(e)) from e
    except yaml.YAMLError as e:
        raise YAMLStructureError(str(e), getattr(e, "problem_mark", None)) from e
