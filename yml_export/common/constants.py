"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Default paths, overridable with --input / --output
DEFAULT_TEMPLATE = "yandex_market_template.xlsx"
DEFAULT_OUTPUT = "yandex_market.xml"

# Catalog generation timestamp (local time)
DATE_FORMAT = "%Y-%m-%d %H:%M"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "  "
