"""
Centralized constants for notelink.

Tunables for mention resolution, snippet extraction and storage live here so
the services and the CLI agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

NOTELINK_CONFIG_DIR = Path.home() / ".config" / "notelink"
DEFAULT_DB_FILENAME = "notelink.db"

# =============================================================================
# SNIPPETS
# =============================================================================

DEFAULT_SNIPPET_WORDS = 10  # Words kept on each side of a mention
SNIPPET_ELLIPSIS = "..."

# =============================================================================
# STUB ENTITY PLACEMENT
# =============================================================================

# Auto-created entities are placed near the note that mentioned them,
# stepping diagonally so several stubs from one note do not overlap.
STUB_OFFSET_X = 300.0
STUB_OFFSET_Y = 100.0
STUB_OFFSET_STEP = 50.0

# =============================================================================
# QUERY LIMITS
# =============================================================================

DEFAULT_LIST_LIMIT = 50

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

ENV_VAR_DEFINITIONS: dict[str, dict] = {
    "NOTELINK_DB": {
        "description": "Path to the SQLite database file",
        "default": None,
        "valid_values": None,
    },
    "NOTELINK_SNIPPET_WORDS": {
        "description": "Words of context kept around a mention in link snippets",
        "default": str(DEFAULT_SNIPPET_WORDS),
        "valid_values": None,
        "integer": True,
    },
    "NOTELINK_LOG_LEVEL": {
        "description": "Log level for the notelink CLI",
        "default": "WARNING",
        "valid_values": LOG_LEVELS,
    },
}
