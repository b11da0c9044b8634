from constants.catalog_fields import (
    BRAND_COLOR_FIELDS,
    CATALOG_LINK_FIELDS,
    CATALOG_NAME_FIELDS,
    CATALOG_PATH_FIELDS,
    CATALOG_THUMB_FIELDS,
    CATALOG_TOP_ORDER_FIELDS,
    CONTACT_LINK,
    DEFAULT_CATEGORY,
    DYNAMIC_CSS_CLASSES,
    EXTERNAL_LINK,
    HEX_COLOR,
    THUMBS_PREFIX,
)

__all__ = [
    "BRAND_COLOR_FIELDS",
    "CATALOG_LINK_FIELDS",
    "CATALOG_NAME_FIELDS",
    "CATALOG_PATH_FIELDS",
    "CATALOG_THUMB_FIELDS",
    "CATALOG_TOP_ORDER_FIELDS",
    "CONTACT_LINK",
    "DEFAULT_CATEGORY",
    "DYNAMIC_CSS_CLASSES",
    "EXTERNAL_LINK",
    "HEX_COLOR",
    "THUMBS_PREFIX",
]
