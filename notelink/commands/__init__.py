"""CLI command modules for notelink."""
