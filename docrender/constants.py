"""Layout constants shared by the renderers and the configuration defaults."""

from __future__ import annotations

# Prototypes with more documented parameters than this go multi-line.
MAX_ARGS_BEFORE_MULTILINE = 3

# Prototypes whose single-line form is longer than this go multi-line.
MAX_LENGTH_BEFORE_MULTILINE = 80

CODE_BLOCK_LANGUAGE = "python"
PARAM_INDENT = "    "

MEMBER_SEPARATOR = "\n\n---\n\n"
PARAMETERS_HEADING = "#### Parameters"
RETURNS_HEADING = "#### Returns"
DETAILS_HEADING = "#### Details"
