"""Constants and regexes used throughout the resolver."""

import re

# Placeholder in a values template: ${NAME} or ${NAME:-default}
_PLACEHOLDER_RE = re.compile(
    r'\$\{'
    r'([A-Za-z_][A-Za-z0-9_]*)'   # variable name (captured)
    r'(?::-([^}]*))?'              # optional default clause (captured, may be empty)
    r'\}'
)

# Fixed marker replacing every value in the masked log
REDACTED = "***"

# Argument in a deployment command replaced by the rendered file path
VALUES_ARG = "{values}"

CONFIG_FILE = "deployvalues.yaml"
CONFIG_VERSION = "v1"
