"""Configuration for notelink."""
