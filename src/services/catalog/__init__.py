"""
Catalog build services.

Flat brand and catalog rows go in; a validated, fully annotated tree and a
serializable snapshot come out. Each stage is importable on its own.
"""

from services.catalog.brand_registry import build_brand_registry, is_hex_color, validate_color
from services.catalog.integrity import scan_missing_thumbnails, thumbnail_references
from services.catalog.paths import ancestor_paths, normalize_path, path_segments, to_thumb_site_path
from services.catalog.propagation import (
    aggregate_counts,
    attach_folder_metadata,
    convert_empty_folders,
    fill_thumbnails_from_ancestors,
    propagate_metadata,
    propagate_thumbnails_up,
    verify_product_counts,
)
from services.catalog.snapshot import render_snapshot, snapshot_dict, write_snapshot
from services.catalog.tree_builder import build_catalog_tree, collect_ancestor_paths, read_catalog_row

__all__ = [
    "aggregate_counts",
    "ancestor_paths",
    "attach_folder_metadata",
    "build_brand_registry",
    "build_catalog_tree",
    "collect_ancestor_paths",
    "convert_empty_folders",
    "fill_thumbnails_from_ancestors",
    "is_hex_color",
    "normalize_path",
    "path_segments",
    "propagate_metadata",
    "propagate_thumbnails_up",
    "read_catalog_row",
    "render_snapshot",
    "scan_missing_thumbnails",
    "snapshot_dict",
    "thumbnail_references",
    "to_thumb_site_path",
    "validate_color",
    "verify_product_counts",
    "write_snapshot",
]
