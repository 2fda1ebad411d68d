"""
Deterministic reformatting rules.

This file exists to make non-goals explicit and enforceable:
no quoting, no escaping, no embedded delimiters.
"""

import re

# A comma with optional whitespace on either side. Commas can never appear inside a field.
FIELD_DELIMITER = re.compile(r"\s*,\s*")
LINE_SEPARATOR = "\n"

PLACEHOLDER_OPEN = "{"
PLACEHOLDER_CLOSE = "}"

DEFAULT_TEMPLATE_ENGINE = "basic"
