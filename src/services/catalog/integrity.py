import asyncio
import logging
from pathlib import Path
from typing import Callable, List, Tuple

from models.catalog import CatalogTree, FolderNode, MissingThumbnail

logger = logging.getLogger(__name__)

ExistsFn = Callable[[Path], bool]


def thumbnail_references(tree: CatalogTree, placeholder_thumb: str, prefix: str = "") -> List[Tuple[str, str]]:
    """(path, thumbnail) for every non-placeholder thumbnail, in pre-order."""
    refs: List[Tuple[str, str]] = []
    for key, node in tree.items():
        here = f"{prefix}/{key}" if prefix else key
        if node.thumbnail and node.thumbnail != placeholder_thumb:
            refs.append((here, node.thumbnail))
        if isinstance(node, FolderNode):
            refs.extend(thumbnail_references(node.children, placeholder_thumb, here))
    return refs


def resolve_asset(assets_root: Path, site_path: str) -> Path:
    return assets_root / site_path.lstrip("/")


async def _check_one(path: Path, exists: ExistsFn, semaphore: asyncio.Semaphore) -> bool:
    async with semaphore:
        return await asyncio.to_thread(exists, path)


async def scan_missing_thumbnails(
    tree: CatalogTree,
    assets_root: Path,
    placeholder_thumb: str,
    concurrency: int = 16,
    exists: ExistsFn = Path.exists,
) -> List[MissingThumbnail]:
    refs = thumbnail_references(tree, placeholder_thumb)
    semaphore = asyncio.Semaphore(max(1, concurrency))
    coros = [_check_one(resolve_asset(assets_root, thumb), exists, semaphore) for _, thumb in refs]
    results = await asyncio.gather(*coros)

    missing = [
        MissingThumbnail(path=path, thumbnail=thumb)
        for (path, thumb), found in zip(refs, results)
        if not found
    ]
    logger.info(f"Checked {len(refs)} thumbnails, {len(missing)} missing")
    return missing
