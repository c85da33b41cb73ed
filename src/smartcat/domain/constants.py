from __future__ import annotations

"""
Domain Constants.

Provides centralized access to application-wide constants: the directive 
wire format, the output artifact name and configuration versioning.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

# Fixed artifact written into the root directory. A copy left behind by a
# previous run is scanned as an ordinary input on the next run.
DEFAULT_OUTPUT_NAME = "concatenated.txt"
DEFAULT_ENCODING = "utf-8"

# Directive wire format: require '<root-relative path>'
REQUIRE_KEYWORD = "require"
PATH_QUOTE = "'"

# Line terminator used for every line written into the artifact
OUTPUT_NEWLINE = "\n"
