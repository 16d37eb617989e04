"""
Configuration Loader

Loads the YAML workbook layout: sheet names, shop-setting keys and
defaults, product column headers, parameter prefixes and the words
that mark a product as available.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml

LAYOUT_FILE = 'layout.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try the directory shipped inside the package first
    module_dir = Path(__file__).parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str = LAYOUT_FILE) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (default: 'layout.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_sheet_names() -> Dict[str, str]:
    """
    Load the names of the four required sheets.

    Returns:
        Dictionary keyed by role

    Example:
        {
            'shop_settings': 'Настройки магазина',
            'currencies': 'Валюты',
            'categories': 'Категории',
            'products': 'Товары',
        }
    """
    return load_config().get('sheets', {})


def load_shop_settings_layout() -> Dict[str, Dict[str, Any]]:
    """
    Load recognized shop-setting keys and their defaults.

    Returns:
        Dictionary with 'keys' (field -> list of accepted row labels)
        and 'defaults' (field -> fallback value)
    """
    return load_config().get('shop_settings', {})


def load_product_columns() -> Dict[str, List[str]]:
    """
    Load product column headers.

    Returns:
        Dictionary mapping Product field name to accepted headers

    Example:
        {
            'id': ['ID товара', 'Product ID'],
            'price': ['Цена', 'Price'],
            ...
        }
    """
    return load_config().get('product_columns', {})


def load_param_prefixes() -> List[str]:
    """
    Load header prefixes that mark parameter columns.

    Returns:
        List of prefixes, e.g. ['Параметр:', 'Parameter:']
    """
    return load_config().get('param_prefixes', [])


def load_truthy_values() -> set:
    """
    Load availability words meaning "in stock".

    Returns:
        Set of lowercase words
    """
    return {value.lower() for value in load_config().get('truthy_values', [])}


def build_key_lookup(keys: Dict[str, List[str]]) -> Dict[str, str]:
    """
    Build a mapping from every accepted label to its field name.

    Args:
        keys: Field name -> list of accepted labels

    Returns:
        Dictionary mapping label (exact text) to field name

    Example:
        {
            'Название магазина': 'name',
            'Shop name': 'name',
            ...
        }
    """
    lookup = {}
    for field_name, labels in keys.items():
        for label in labels:
            lookup[label] = field_name
    return lookup
