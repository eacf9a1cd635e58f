"""
Centralized constants and defaults for tmpl
"""

# Directory under the user's home that holds every saved template
STORE_DIRNAME = ".templates"

# Sidecar file inside each template directory holding its tags
METADATA_FILENAME = ".tmpl.yaml"

# Names that are never copied as template content and cannot name a template
RESERVED_NAMES = frozenset({METADATA_FILENAME})

# Environment variable that overrides the store root
STORE_DIR_ENVVAR = "TMPL_STORE_DIR"

# Separator used for tag lists on the command line
TAG_SEPARATOR = ","
