import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Mapping, Optional

from models.catalog import BrandRecord, BuildIssues, CatalogTree, FolderNode
from models.schemas import (
    CategorySample,
    HealthReport,
    InvalidLinkSample,
    MissingThumbnailSample,
    OptimizationMetrics,
    PerformanceMetrics,
    QualityMetrics,
    ReportDetails,
)
from services.asset_optimizer import AssetOptimization

logger = logging.getLogger(__name__)

INVALID_LINK_SAMPLE = 5
MISSING_THUMB_SAMPLE = 10
WARNING_SAMPLE = 5
CATEGORY_SAMPLE = 10


def _kb(size: int) -> int:
    return round(size / 1024)


def category_count(tree: CatalogTree, name: str) -> int:
    node = tree[name]
    return node.product_count if isinstance(node, FolderNode) else 1


def _optimization(assets: Optional[AssetOptimization]) -> OptimizationMetrics:
    if assets is None:
        return OptimizationMetrics()
    return OptimizationMetrics(
        css_optimized=assets.css_optimized,
        js_optimized=assets.js_optimized,
        assets_minified=assets.assets_minified,
        original_css_size=_kb(assets.original_css_size),
        final_css_size=_kb(assets.final_css_size),
        original_js_size=_kb(assets.original_js_size),
        final_js_size=_kb(assets.final_js_size),
    )


def _details(tree: CatalogTree, issues: BuildIssues) -> ReportDetails:
    return ReportDetails(
        invalid_links=[
            InvalidLinkSample(name=i.name, path=i.path, link=i.link)
            for i in issues.invalid_links[:INVALID_LINK_SAMPLE]
        ],
        missing_thumb_files=[
            MissingThumbnailSample(path=m.path, thumbnail=m.thumbnail)
            for m in issues.missing_thumbnails[:MISSING_THUMB_SAMPLE]
        ],
        warnings=issues.warnings[:WARNING_SAMPLE],
        sample_categories=[
            CategorySample(name=name, items=category_count(tree, name))
            for name in list(tree)[:CATEGORY_SAMPLE]
        ],
    )


def build_health_report(
    brands: Mapping[str, BrandRecord],
    tree: CatalogTree,
    total_products: int,
    catalog_entries: int,
    processed_rows: int,
    issues: BuildIssues,
    assets: Optional[AssetOptimization] = None,
    timestamp: Optional[datetime] = None,
) -> HealthReport:
    return HealthReport(
        timestamp=timestamp or datetime.now(timezone.utc),
        performance=PerformanceMetrics(
            total_brands=len(brands),
            total_products=total_products,
            total_categories=len(tree),
            catalog_entries=catalog_entries,
            processed_rows=processed_rows,
        ),
        quality=QualityMetrics(
            invalid_links=len(issues.invalid_links),
            missing_thumbnails=len(issues.missing_thumbnails),
            warnings=len(issues.warnings),
            errors=len(issues.errors),
        ),
        optimization=_optimization(assets),
        details=_details(tree, issues),
    )


def write_health_report(path: Path, report: HealthReport) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json", by_alias=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Wrote health report to {path}")
    return path


def render_summary(report: HealthReport, tree: CatalogTree) -> str:
    perf = report.performance
    quality = report.quality
    lines: List[str] = [
        "## Catalog Build Summary",
        "",
        "### Performance Metrics",
        f"- **Brands:** {perf.total_brands}",
        f"- **Products:** {perf.total_products}",
        f"- **Categories:** {perf.total_categories}",
        f"- **Catalog Entries Processed:** {perf.catalog_entries}",
        "",
        "### Quality Assurance",
        f"- **Missing Thumbnails:** {quality.missing_thumbnails}",
        f"- **Invalid Links:** {quality.invalid_links}",
        f"- **Warnings:** {quality.warnings}" if quality.warnings else "- **No Warnings**",
        f"- **Errors:** {quality.errors}" if quality.errors else "- **No Errors**",
    ]
    if report.optimization.assets_minified:
        opt = report.optimization
        lines += [
            "",
            "### Optimization Results",
            f"- **CSS:** {opt.original_css_size}KB -> {opt.final_css_size}KB",
            f"- **JavaScript:** {opt.original_js_size}KB -> {opt.final_js_size}KB",
        ]
    lines += ["", "### Categories"]
    lines += [f"- **{name}:** {category_count(tree, name)} items" for name in tree]
    return "\n".join(lines)


def write_step_summary(path: Optional[str], summary: str) -> None:
    if not path:
        return
    Path(path).write_text(summary, encoding="utf-8")
    logger.info(f"Wrote build summary to {path}")
