"""
Dictionary loading for the Lojban password generator.

This package contains the fixed-column table readers:
- columns: Column layouts and field extraction
- parser: Strict gismu and cmavo table parsing
"""
