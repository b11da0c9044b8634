import pytest

from config import Settings
from models import BuildIssues
from services.health_report import build_health_report
from workers.build_pipeline import BuildOutcome, ConfigurationError, require_sources


def _outcome(tmp_path, issues):
    report = build_health_report({}, {}, 0, catalog_entries=0, processed_rows=0, issues=issues)
    return BuildOutcome(
        snapshot_path=tmp_path / "data.json",
        report_path=tmp_path / "health.json",
        report=report,
        issues=issues,
    )


def test_exit_code_is_zero_without_errors(tmp_path):
    issues = BuildIssues()
    issues.warn("Skipping row without name")

    assert _outcome(tmp_path, issues).exit_code == 0


def test_exit_code_is_one_with_errors(tmp_path):
    issues = BuildIssues(errors=["snapshot incomplete"])

    outcome = _outcome(tmp_path, issues)

    assert outcome.exit_code == 1
    assert outcome.report.quality.errors == 1


def test_require_sources_names_missing_urls():
    settings = Settings(_env_file=None, brands_csv_url="https://example.com/b.csv", master_csv_url="")

    with pytest.raises(ConfigurationError, match="MASTER_CSV_URL"):
        require_sources(settings)
