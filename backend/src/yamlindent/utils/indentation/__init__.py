from .collect_indent_levels import collect_indent_levels, decode_yaml_text
from .find_indentation_unit import find_indentation_unit
