"""
Configuration constants to replace magic strings throughout unbarrel
"""

# Source tree defaults (relative to the invocation directory)
DEFAULT_WORKING_DIR = "client/src"
DEFAULT_GLOB_PATTERN = "**/*.ts"
DEFAULT_MAX_WORKERS = 8

# Module resolution constants
BARREL_STEM = "index"
AUTHORING_EXTENSION = ".ts"   # extension source files are written with
EXECUTABLE_EXTENSION = ".js"  # extension the emitted code is loaded with
RELATIVE_PREFIX = "."
SELF_REEXPORT_TARGET = "./"

# Keywords that introduce a declaration the symbol matcher recognises
DECLARATION_KEYWORDS = ("class", "type", "enum", "const", "let", "var", "interface")

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Diagnostics colouring (disabled by NO_COLOR or UNBARREL_COLOR=0)
COLOR_ENV_VAR = "UNBARREL_COLOR"
