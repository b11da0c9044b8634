from .asset_optimizer import AssetOptimization, optimize_assets
from .health_report import build_health_report, render_summary, write_health_report
from .sources import SourceFetchError, SourceTexts, fetch_sources, parse_csv_rows

__all__ = [
    "AssetOptimization",
    "SourceFetchError",
    "SourceTexts",
    "build_health_report",
    "fetch_sources",
    "optimize_assets",
    "parse_csv_rows",
    "render_summary",
    "write_health_report",
]
