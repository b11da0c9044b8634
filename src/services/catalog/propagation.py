"""
Metadata propagation over a built catalog tree.

The passes run in a fixed order because each one depends on the previous
having settled: folder metadata must be attached before empty folders can be
converted, products must exist before thumbnails bubble up, and thumbnails
must be final before the ancestor fallback fills the gaps. Counts come last.
"""

import logging
from typing import List, Optional

from models.catalog import CatalogBuild, CatalogTree, FolderMetadata, FolderNode, ProductNode, TreeNode

logger = logging.getLogger(__name__)


def _join(prefix: str, key: str) -> str:
    return f"{prefix}/{key}" if prefix else key


def attach_folder_metadata(tree: CatalogTree, folder_meta: dict, prefix: str = "") -> None:
    for key, node in tree.items():
        if isinstance(node, ProductNode):
            continue
        here = _join(prefix, key)
        meta: Optional[FolderMetadata] = folder_meta.get(here)
        if meta is not None:
            if meta.thumbnail:
                node.thumbnail = meta.thumbnail
            if meta.external_link:
                node.external_link = meta.external_link
            if meta.top_order is not None:
                node.top_order = meta.top_order
        attach_folder_metadata(node.children, folder_meta, here)


def convert_empty_folders(tree: CatalogTree, placeholder_thumb: str) -> int:
    """Replace childless folders that carry a link with products.

    Returns the number of conversions.
    """
    converted = 0
    for key, node in list(tree.items()):
        if isinstance(node, ProductNode):
            continue
        if not node.children and node.external_link:
            tree[key] = ProductNode(
                external_link=node.external_link,
                thumbnail=node.thumbnail or placeholder_thumb,
            )
            converted += 1
        elif node.children:
            converted += convert_empty_folders(node.children, placeholder_thumb)
    return converted


def propagate_thumbnails_up(tree: CatalogTree) -> None:
    for node in tree.values():
        if isinstance(node, ProductNode):
            continue
        propagate_thumbnails_up(node.children)
        if not node.thumbnail:
            node.thumbnail = _first_child_thumbnail(node)


def _first_child_thumbnail(folder: FolderNode) -> str:
    for child in folder.children.values():
        if child.thumbnail:
            return child.thumbnail
    return ""


def fill_thumbnails_from_ancestors(tree: CatalogTree, placeholder_thumb: str, inherited: str = "") -> None:
    for node in tree.values():
        current = node.thumbnail or inherited or placeholder_thumb
        if not node.thumbnail:
            node.thumbnail = current
        if isinstance(node, FolderNode):
            fill_thumbnails_from_ancestors(node.children, placeholder_thumb, current)


def aggregate_counts(node: TreeNode) -> int:
    if isinstance(node, ProductNode):
        return 1
    total = sum(aggregate_counts(child) for child in node.children.values())
    node.product_count = total
    return total


def count_products(node: TreeNode) -> int:
    if isinstance(node, ProductNode):
        return 1
    return sum(count_products(child) for child in node.children.values())


def verify_product_counts(tree: CatalogTree, prefix: str = "") -> List[str]:
    """Paths of folders whose stored count disagrees with their descendants."""
    mismatched: List[str] = []
    for key, node in tree.items():
        if isinstance(node, ProductNode):
            continue
        here = _join(prefix, key)
        if node.product_count != count_products(node):
            mismatched.append(here)
        mismatched.extend(verify_product_counts(node.children, here))
    return mismatched


def propagate_metadata(build: CatalogBuild, placeholder_thumb: str) -> int:
    """Run every enrichment pass in order; returns the final product total."""
    attach_folder_metadata(build.tree, build.folder_meta)

    converted = convert_empty_folders(build.tree, placeholder_thumb)
    build.total_products += converted
    if converted:
        logger.info(f"Converted {converted} empty linked folders into products")

    propagate_thumbnails_up(build.tree)
    fill_thumbnails_from_ancestors(build.tree, placeholder_thumb)

    for node in build.tree.values():
        aggregate_counts(node)

    mismatched = verify_product_counts(build.tree)
    if mismatched:
        logger.debug(f"Product count mismatch after aggregation: {mismatched[:5]}")

    return build.total_products
