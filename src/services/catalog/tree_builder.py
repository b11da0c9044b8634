"""
Catalog tree construction.

Turns flat catalog rows (one per filesystem entry) into a nested tree of
folders and products. A row carrying an external link becomes a product only
when no other row is nested beneath its path; otherwise it is a folder and its
link, thumbnail and ordering are kept as FolderMetadata for the propagation
passes.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Set

from constants.catalog_fields import (
    CATALOG_LINK_FIELDS,
    CATALOG_NAME_FIELDS,
    CATALOG_PATH_FIELDS,
    CATALOG_THUMB_FIELDS,
    CATALOG_TOP_ORDER_FIELDS,
    EXTERNAL_LINK,
    LEADING_INT,
)
from models.catalog import (
    BuildIssues,
    CatalogBuild,
    CatalogTree,
    FolderMetadata,
    FolderNode,
    InvalidLink,
    ProductNode,
)
from services.catalog.paths import ancestor_paths, normalize_path, path_segments, to_thumb_site_path
from services.catalog.row_fields import first_field

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100


@dataclass(frozen=True)
class CatalogRow:
    name: str
    path: str
    external_link: str
    thumbnail: str
    top_order_raw: str

    @property
    def segments(self) -> List[str]:
        return path_segments(self.path)


def read_catalog_row(row: Mapping[str, str]) -> CatalogRow:
    return CatalogRow(
        name=first_field(row, CATALOG_NAME_FIELDS),
        path=normalize_path(first_field(row, CATALOG_PATH_FIELDS)),
        external_link=first_field(row, CATALOG_LINK_FIELDS),
        thumbnail=to_thumb_site_path(first_field(row, CATALOG_THUMB_FIELDS)),
        top_order_raw=first_field(row, CATALOG_TOP_ORDER_FIELDS),
    )


def collect_ancestor_paths(rows: Iterable[CatalogRow]) -> Set[str]:
    """Every path that some row is nested beneath, independent of row order."""
    ancestors: Set[str] = set()
    for row in rows:
        ancestors.update(ancestor_paths(row.path))
    return ancestors


def parse_top_order(raw: str) -> Optional[int]:
    match = LEADING_INT.match(raw or "")
    return int(match.group(1)) if match else None


def is_valid_external_link(link: str) -> bool:
    return bool(EXTERNAL_LINK.match(link))


def ensure_folder_chain(tree: CatalogTree, segs: Sequence[str]) -> Optional[CatalogTree]:
    """Materialize the folders along segs and return the last one's children.

    Returns None when the chain runs into a product; products are never
    turned back into folders.
    """
    children = tree
    for seg in segs:
        node = children.get(seg)
        if node is None:
            node = FolderNode()
            children[seg] = node
        elif isinstance(node, ProductNode):
            return None
        children = node.children
    return children


def insert_product(
    tree: CatalogTree,
    row: CatalogRow,
    placeholder_thumb: str,
    issues: BuildIssues,
) -> bool:
    """Insert a leaf product; returns True when a new product was added."""
    segs = row.segments
    parent = ensure_folder_chain(tree, segs[:-1])
    if parent is None:
        _warn(issues, f"Product {row.path} skipped: an ancestor is already a product")
        return False

    key = segs[-1]
    existing = parent.get(key)
    parent[key] = ProductNode(
        external_link=row.external_link,
        thumbnail=row.thumbnail or placeholder_thumb,
    )
    if isinstance(existing, ProductNode):
        _warn(issues, f"Duplicate product row for {row.path}, last row kept")
        return False
    return True


def record_folder(build: CatalogBuild, row: CatalogRow, issues: BuildIssues) -> None:
    segs = row.segments
    if ensure_folder_chain(build.tree, segs) is None:
        _warn(issues, f"Folder {row.path} skipped: path is already a product")
        return

    meta = build.folder_meta.setdefault(row.path, FolderMetadata())
    if row.thumbnail:
        meta.thumbnail = row.thumbnail
    if row.external_link:
        meta.external_link = row.external_link
    if len(segs) == 1:
        order = parse_top_order(row.top_order_raw)
        if order is not None:
            meta.top_order = order


def build_catalog_tree(
    raw_rows: Sequence[Mapping[str, str]],
    placeholder_thumb: str,
    issues: BuildIssues,
) -> CatalogBuild:
    rows = [read_catalog_row(r) for r in raw_rows]
    ancestors = collect_ancestor_paths(rows)
    build = CatalogBuild()

    for row in rows:
        if not row.path or not row.name:
            continue

        build.processed_rows += 1
        if build.processed_rows % PROGRESS_EVERY == 0:
            logger.info(f"Processed {build.processed_rows}/{len(rows)} catalog rows")

        is_candidate = bool(row.external_link)
        if is_candidate and not is_valid_external_link(row.external_link):
            issues.invalid_links.append(
                InvalidLink(name=row.name, path=row.path, link=row.external_link)
            )

        if is_candidate and row.path not in ancestors:
            if insert_product(build.tree, row, placeholder_thumb, issues):
                build.total_products += 1
        else:
            record_folder(build, row, issues)

    logger.info(
        f"Built catalog tree: {build.total_products} products, "
        f"{len(build.tree)} categories, {len(issues.invalid_links)} invalid links"
    )
    return build


def _warn(issues: BuildIssues, message: str) -> None:
    logger.warning(message)
    issues.warn(message)
