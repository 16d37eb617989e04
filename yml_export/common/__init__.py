# Common utilities
from .coercion import (
    cell_to_str,
    parse_availability,
    parse_optional,
    parse_price,
    split_pictures,
)
from .config_loader import (
    load_config,
    load_param_prefixes,
    load_product_columns,
    load_sheet_names,
    load_shop_settings_layout,
    load_truthy_values,
)
from .log_config import setup_logging
