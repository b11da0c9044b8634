import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from models.catalog import BrandRecord, CatalogTree, FolderNode, ProductNode, TreeNode

logger = logging.getLogger(__name__)


def brand_dict(brand: BrandRecord) -> Dict[str, Any]:
    colors = brand.colors
    return {
        "slug": brand.slug,
        "displayName": brand.display_name,
        "colors": {
            "primary": colors.primary,
            "accent": colors.accent,
            "text": colors.text,
            "background": colors.background,
        },
        "contactLink": brand.contact_link or "",
        "defaultCategory": brand.default_category,
    }


def node_dict(node: TreeNode) -> Dict[str, Any]:
    if isinstance(node, ProductNode):
        return {
            "isProduct": True,
            "externalLink": node.external_link,
            "thumbnail": node.thumbnail,
        }
    return _folder_dict(node)


def _folder_dict(folder: FolderNode) -> Dict[str, Any]:
    item: Dict[str, Any] = {"isProduct": False, "thumbnail": folder.thumbnail}
    if folder.external_link:
        item["externalLink"] = folder.external_link
    if folder.top_order is not None:
        item["topOrder"] = folder.top_order
    item["productCount"] = folder.product_count
    item["children"] = tree_dict(folder.children)
    return item


def tree_dict(tree: CatalogTree) -> Dict[str, Any]:
    return {key: node_dict(node) for key, node in tree.items()}


def snapshot_dict(
    brands: Mapping[str, BrandRecord], tree: CatalogTree, total_products: int
) -> Dict[str, Any]:
    return {
        "brands": {slug: brand_dict(brand) for slug, brand in brands.items()},
        "catalog": {"totalProducts": total_products, "tree": tree_dict(tree)},
    }


def render_snapshot(snapshot: Dict[str, Any]) -> str:
    return json.dumps(snapshot, indent=2, ensure_ascii=False)


def write_snapshot(path: Path, snapshot: Dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_snapshot(snapshot), encoding="utf-8")
    logger.info(f"Wrote catalog snapshot to {path}")
    return path
