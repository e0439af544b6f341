"""
Utils module - Shared utilities for quotevote

- config: highlight colour settings (YAML + environment)
- io_helpers: BOM-safe UTF-8 file I/O and vote JSON loading
- logging_helper: Consistent logging setup
- paths: Common path definitions
"""
