"""
Workbook to YML Catalog Exporter

Modules:
    models      - Data models (ShopSettings, Currency, Category, Product, Offer, Catalog)
    common      - Shared utilities (config loader, cell coercion, logging)
    extraction  - Workbook reading and sheet-to-record mapping
    catalog     - Catalog assembly
    validation  - Cross-reference warnings
    export      - YML XML writer
    converter   - End-to-end pipeline
"""

__version__ = "1.0.0"
