import os

MIN_INDENTATION = 1

TAB_INDENTATION_MESSAGE = "tab characters are not allowed for indentation in YAML"

COMMENT_PREFIX = "#"

DEFAULT_PORT = os.getenv("YAMLINDENT_PORT") or "4000"

SUBMIT_RETRIES = 3
SUBMIT_DELAY = 2
