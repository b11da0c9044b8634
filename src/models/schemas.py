from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class _ReportModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PerformanceMetrics(_ReportModel):
    total_brands: int = Field(..., alias="totalBrands")
    total_products: int = Field(..., alias="totalProducts")
    total_categories: int = Field(..., alias="totalCategories")
    catalog_entries: int = Field(..., alias="catalogEntries")
    processed_rows: int = Field(..., alias="processedRows")


class QualityMetrics(_ReportModel):
    invalid_links: int = Field(..., alias="invalidLinks")
    missing_thumbnails: int = Field(..., alias="missingThumbnails")
    warnings: int
    errors: int


class OptimizationMetrics(_ReportModel):
    css_optimized: bool = Field(False, alias="cssOptimized")
    js_optimized: bool = Field(False, alias="jsOptimized")
    assets_minified: bool = Field(False, alias="assetsMinified")
    original_css_size: int = Field(0, alias="originalCssSize")
    final_css_size: int = Field(0, alias="finalCssSize")
    original_js_size: int = Field(0, alias="originalJsSize")
    final_js_size: int = Field(0, alias="finalJsSize")


class InvalidLinkSample(_ReportModel):
    name: str
    path: str
    link: str


class MissingThumbnailSample(_ReportModel):
    path: str
    thumbnail: str


class CategorySample(_ReportModel):
    name: str
    items: int


class ReportDetails(_ReportModel):
    invalid_links: List[InvalidLinkSample] = Field(default_factory=list, alias="invalidLinks")
    missing_thumb_files: List[MissingThumbnailSample] = Field(
        default_factory=list, alias="missingThumbFiles"
    )
    warnings: List[str] = Field(default_factory=list)
    sample_categories: List[CategorySample] = Field(default_factory=list, alias="sampleCategories")


class HealthReport(_ReportModel):
    timestamp: datetime
    performance: PerformanceMetrics
    quality: QualityMetrics
    optimization: OptimizationMetrics
    details: ReportDetails
