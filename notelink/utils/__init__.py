"""Utility modules for notelink.

- logging: logging configuration for the CLI
"""
