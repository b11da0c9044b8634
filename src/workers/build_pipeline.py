import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from config import Settings
from models.catalog import BuildIssues
from models.schemas import HealthReport
from services.asset_optimizer import AssetOptimization, optimize_assets
from services.catalog import (
    build_brand_registry,
    build_catalog_tree,
    propagate_metadata,
    scan_missing_thumbnails,
    snapshot_dict,
    write_snapshot,
)
from services.health_report import (
    build_health_report,
    render_summary,
    write_health_report,
    write_step_summary,
)
from services.sources import fetch_sources, parse_csv_rows

logger = logging.getLogger(__name__)

SNAPSHOT_FILE = "data.json"
HEALTH_FILE = "health.json"


class ConfigurationError(RuntimeError):
    pass


@dataclass
class BuildOutcome:
    snapshot_path: Path
    report_path: Path
    report: HealthReport
    issues: BuildIssues

    @property
    def exit_code(self) -> int:
        return 1 if self.issues.errors else 0


def require_sources(settings: Settings) -> None:
    missing = settings.missing_sources()
    if missing:
        raise ConfigurationError(f"Missing {' or '.join(missing)}")


async def run_build(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> BuildOutcome:
    """Fetch both sources, build and enrich the catalog, then write the artifacts.

    Raises ConfigurationError or SourceFetchError before anything is written.
    """
    require_sources(settings)
    placeholder = settings.placeholder_thumb

    logger.info("Fetching CSV sources")
    sources = await fetch_sources(
        settings.brands_csv_url,
        settings.master_csv_url,
        timeout=settings.fetch_timeout,
        client=client,
    )
    brand_rows = parse_csv_rows(sources.brands)
    master_rows = parse_csv_rows(sources.master)
    logger.info(f"Parsed {len(brand_rows)} brand rows and {len(master_rows)} catalog rows")

    issues = BuildIssues()
    brands = build_brand_registry(brand_rows, issues)
    build = build_catalog_tree(master_rows, placeholder, issues)
    total_products = propagate_metadata(build, placeholder)

    issues.missing_thumbnails.extend(
        await scan_missing_thumbnails(
            build.tree,
            settings.public_dir,
            placeholder,
            concurrency=settings.thumbnail_scan_concurrency,
        )
    )

    assets: Optional[AssetOptimization] = None
    if settings.optimize_assets:
        assets = optimize_assets(settings.public_dir, issues)

    snapshot_path = write_snapshot(
        settings.public_dir / SNAPSHOT_FILE,
        snapshot_dict(brands, build.tree, total_products),
    )
    report = build_health_report(
        brands,
        build.tree,
        total_products,
        catalog_entries=len(master_rows),
        processed_rows=build.processed_rows,
        issues=issues,
        assets=assets,
    )
    report_path = write_health_report(settings.build_dir / HEALTH_FILE, report)

    summary = render_summary(report, build.tree)
    logger.info("\n" + summary)
    write_step_summary(settings.github_step_summary, summary)

    return BuildOutcome(
        snapshot_path=snapshot_path,
        report_path=report_path,
        report=report,
        issues=issues,
    )
