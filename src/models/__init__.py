from models.catalog import (
    BrandColors,
    BrandRecord,
    BuildIssues,
    CatalogBuild,
    CatalogTree,
    FolderMetadata,
    FolderNode,
    InvalidLink,
    MissingThumbnail,
    ProductNode,
    TreeNode,
)
from models.schemas import HealthReport

__all__ = [
    "BrandColors",
    "BrandRecord",
    "BuildIssues",
    "CatalogBuild",
    "CatalogTree",
    "FolderMetadata",
    "FolderNode",
    "HealthReport",
    "InvalidLink",
    "MissingThumbnail",
    "ProductNode",
    "TreeNode",
]
