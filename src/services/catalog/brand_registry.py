"""
Brand registry construction.

Every anomaly in a brand row degrades to a warning plus a default value;
the registry build never fails.
"""

import json
import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple

from constants.catalog_fields import (
    BRAND_CATEGORY_FIELDS,
    BRAND_COLOR_FIELDS,
    BRAND_CONTACT_FIELDS,
    BRAND_NAME_FIELDS,
    BRAND_SLUG_FIELDS,
    CONTACT_LINK,
    DEFAULT_CATEGORY,
    HEX_COLOR,
)
from models.catalog import BrandColors, BrandRecord, BuildIssues
from services.catalog.row_fields import first_field

logger = logging.getLogger(__name__)


def is_hex_color(value: str) -> bool:
    return bool(HEX_COLOR.match(value or ""))


def validate_color(
    slug: str, field_name: str, raw: str, default: str, label: str, issues: BuildIssues
) -> str:
    """Return the color unchanged when valid, else the themed default."""
    value = (raw or "").strip()
    if is_hex_color(value):
        return value
    if value:
        _warn(issues, f'Brand {slug}: invalid {field_name} "{value}" -> {label} used')
    return default


def validate_contact_link(slug: str, raw: str, issues: BuildIssues) -> Optional[str]:
    value = (raw or "").strip()
    if not value:
        return None
    if CONTACT_LINK.match(value):
        return value
    _warn(issues, f"Brand {slug}: contact link {value!r} is not wa.me/<number>, ignored")
    return None


def build_brand(row: Mapping[str, str], slug: str, name: str, issues: BuildIssues) -> BrandRecord:
    colors = {
        attr: validate_color(slug, field_name, row.get(field_name, ""), default, label, issues)
        for attr, field_name, default, label in BRAND_COLOR_FIELDS
    }
    return BrandRecord(
        slug=slug,
        display_name=name,
        colors=BrandColors(**colors),
        contact_link=validate_contact_link(slug, first_field(row, BRAND_CONTACT_FIELDS), issues),
        default_category=first_field(row, BRAND_CATEGORY_FIELDS) or DEFAULT_CATEGORY,
    )


def build_brand_registry(
    rows: Iterable[Mapping[str, str]], issues: BuildIssues
) -> Dict[str, BrandRecord]:
    brands: Dict[str, BrandRecord] = {}
    for row in rows:
        slug, name = _identity(row)
        if not slug and not name:
            continue
        if not slug or not name:
            _warn(issues, f"Brand row skipped (needs both slug & name): {_row_repr(row)}")
            continue
        if slug in brands:
            _warn(issues, f"Duplicate brand slug ignored: {slug}")
            continue
        brands[slug] = build_brand(row, slug, name, issues)

    logger.info(f"Processed {len(brands)} brands")
    return brands


def _identity(row: Mapping[str, str]) -> Tuple[str, str]:
    return first_field(row, BRAND_SLUG_FIELDS), first_field(row, BRAND_NAME_FIELDS)


def _row_repr(row: Mapping[str, str]) -> str:
    return json.dumps(dict(row), ensure_ascii=False)


def _warn(issues: BuildIssues, message: str) -> None:
    logger.warning(message)
    issues.warn(message)
