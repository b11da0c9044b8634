import json
from datetime import datetime, timezone

from models import BuildIssues, FolderNode, InvalidLink, MissingThumbnail, ProductNode
from services.asset_optimizer import AssetOptimization
from services.health_report import build_health_report, render_summary, write_health_report, write_step_summary

FIXED_TIME = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _tree():
    return {
        "BAGS": FolderNode(product_count=2, children={
            "Mini": ProductNode("https://drive.google.com/m", "/thumbs/m.webp"),
            "Maxi": ProductNode("https://drive.google.com/x", "/thumbs/x.webp"),
        }),
        "GIFT": ProductNode("https://drive.google.com/g", "/thumbs/g.webp"),
    }


def _issues():
    issues = BuildIssues()
    issues.warnings.extend(f"warning {i}" for i in range(8))
    issues.invalid_links.extend(InvalidLink(f"n{i}", f"BAGS/n{i}", "http://bad") for i in range(7))
    issues.missing_thumbnails.extend(MissingThumbnail(f"BAGS/{i}", f"/thumbs/{i}.webp") for i in range(12))
    return issues


def test_report_counts_and_samples():
    report = build_health_report(
        {}, _tree(), 3, catalog_entries=10, processed_rows=9, issues=_issues(), timestamp=FIXED_TIME
    )

    assert report.performance.total_products == 3
    assert report.performance.total_categories == 2
    assert report.performance.processed_rows == 9
    assert report.quality.invalid_links == 7
    assert report.quality.missing_thumbnails == 12
    assert report.quality.warnings == 8
    assert report.quality.errors == 0
    assert len(report.details.invalid_links) == 5
    assert len(report.details.missing_thumb_files) == 10
    assert len(report.details.warnings) == 5
    assert [(c.name, c.items) for c in report.details.sample_categories] == [("BAGS", 2), ("GIFT", 1)]


def test_report_serializes_with_camel_case_keys(tmp_path):
    assets = AssetOptimization(css_optimized=True, original_css_size=4096, final_css_size=1024)
    report = build_health_report(
        {}, _tree(), 3, catalog_entries=3, processed_rows=3, issues=BuildIssues(),
        assets=assets, timestamp=FIXED_TIME,
    )
    path = write_health_report(tmp_path / "build" / "health.json", report)
    payload = json.loads(path.read_text(encoding="utf-8"))

    assert payload["timestamp"].startswith("2026-01-02T03:04:05")
    assert payload["performance"]["totalProducts"] == 3
    assert payload["quality"]["missingThumbnails"] == 0
    assert payload["optimization"]["cssOptimized"] is True
    assert payload["optimization"]["assetsMinified"] is True
    assert payload["optimization"]["originalCssSize"] == 4
    assert payload["optimization"]["finalCssSize"] == 1
    assert payload["details"]["sampleCategories"][0] == {"name": "BAGS", "items": 2}


def test_summary_lists_categories_and_quality():
    issues = BuildIssues()
    issues.errors.append("boom")
    report = build_health_report(
        {}, _tree(), 3, catalog_entries=3, processed_rows=3, issues=issues, timestamp=FIXED_TIME
    )
    summary = render_summary(report, _tree())

    assert "- **Products:** 3" in summary
    assert "- **No Warnings**" in summary
    assert "- **Errors:** 1" in summary
    assert "- **BAGS:** 2 items" in summary
    assert "- **GIFT:** 1 items" in summary


def test_step_summary_written_only_when_configured(tmp_path):
    target = tmp_path / "summary.md"
    write_step_summary(None, "ignored")
    assert not target.exists()

    write_step_summary(str(target), "## Summary")
    assert target.read_text(encoding="utf-8") == "## Summary"
