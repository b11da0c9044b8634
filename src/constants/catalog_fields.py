import re

HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{6})$")
CONTACT_LINK = re.compile(r"^https://wa\.me/\d+$")
EXTERNAL_LINK = re.compile(r"^https://drive\.google\.com/")
LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

THUMBS_PREFIX = "thumbs/"
DEFAULT_CATEGORY = "BAGS"

BRAND_SLUG_FIELDS = ("csvslug",)
BRAND_NAME_FIELDS = ("brandName",)
BRAND_CONTACT_FIELDS = ("whatsapp",)
BRAND_CATEGORY_FIELDS = ("defaultCategory",)

# field, default, theme label used in warnings
BRAND_COLOR_FIELDS = (
    ("primary", "primaryColor", "#d4af37", "luxury gold"),
    ("accent", "accentColor", "#e8b4a0", "rose gold"),
    ("text", "textColor", "#f5f5f5", "luxury white"),
    ("background", "bgColor", "#0a0a0a", "luxury black"),
)

CATALOG_NAME_FIELDS = ("Name", "Folder/Product")
CATALOG_PATH_FIELDS = ("RelativePath", "Relative Path", "Relative_Path")
CATALOG_LINK_FIELDS = ("Drive Link", "Drive")
CATALOG_THUMB_FIELDS = ("Thumbs Path", "Thumb")
CATALOG_TOP_ORDER_FIELDS = ("TopOrder", "Top Order")

# Classes added at runtime by the storefront script; never purged.
DYNAMIC_CSS_CLASSES = (
    "card", "card-product", "card-folder", "card-thumb", "card-body", "card-title",
    "card-count", "card-overlay", "folder-icon", "product-badge", "product-indicator",
    "search-result", "search-results", "skeleton-card", "skeleton-image", "luxury-spinner",
    "mobile-visible", "clickable-logo", "current", "empty-state", "loading-indicator",
)
