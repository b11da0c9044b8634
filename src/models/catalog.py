"""
Data models for the catalog build.

Brands are immutable once built. Tree nodes are mutable: the propagation
passes fill in thumbnails and counts in place, and an empty folder carrying
an external link may be replaced by a product under the same key.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass(frozen=True)
class BrandColors:
    primary: str
    accent: str
    text: str
    background: str


@dataclass(frozen=True)
class BrandRecord:
    slug: str
    display_name: str
    colors: BrandColors
    contact_link: Optional[str]
    default_category: str


@dataclass
class ProductNode:
    """Terminal catalog entry. Never has children."""
    external_link: str
    thumbnail: str

    @property
    def is_product(self) -> bool:
        return True


@dataclass
class FolderNode:
    thumbnail: str = ""
    external_link: Optional[str] = None
    top_order: Optional[int] = None
    product_count: int = 0
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    @property
    def is_product(self) -> bool:
        return False


TreeNode = Union[ProductNode, FolderNode]
CatalogTree = Dict[str, TreeNode]


@dataclass
class FolderMetadata:
    """Fields observed on folder rows, merged into the tree after construction."""
    thumbnail: Optional[str] = None
    external_link: Optional[str] = None
    top_order: Optional[int] = None


@dataclass(frozen=True)
class InvalidLink:
    name: str
    path: str
    link: str


@dataclass(frozen=True)
class MissingThumbnail:
    path: str
    thumbnail: str


@dataclass
class BuildIssues:
    """Append-only findings collected by every stage of a single run."""
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    invalid_links: List[InvalidLink] = field(default_factory=list)
    missing_thumbnails: List[MissingThumbnail] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


@dataclass
class CatalogBuild:
    tree: CatalogTree = field(default_factory=dict)
    folder_meta: Dict[str, FolderMetadata] = field(default_factory=dict)
    total_products: int = 0
    processed_rows: int = 0
