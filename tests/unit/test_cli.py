from pathlib import Path

import pytest

import cli
from models import BuildIssues
from services.health_report import build_health_report
from workers.build_pipeline import BuildOutcome


def _set_sources(monkeypatch):
    monkeypatch.setenv("BRANDS_CSV_URL", "https://sheets.example.com/brands.csv")
    monkeypatch.setenv("MASTER_CSV_URL", "https://sheets.example.com/master.csv")


def _outcome(tmp_path, issues):
    report = build_health_report({}, {}, 0, catalog_entries=0, processed_rows=0, issues=issues)
    return BuildOutcome(
        snapshot_path=tmp_path / "data.json",
        report_path=tmp_path / "health.json",
        report=report,
        issues=issues,
    )


def test_parse_args_overrides_settings(monkeypatch):
    monkeypatch.delenv("OPTIMIZE_ASSETS", raising=False)
    args = cli.parse_args(["--public-dir", "site", "--build-dir", "out", "--skip-assets", "--log-level", "debug"])
    settings = cli.load_settings(args)

    assert settings.public_dir == Path("site")
    assert settings.build_dir == Path("out")
    assert settings.optimize_assets is False
    assert settings.log_level == "DEBUG"


def test_parse_args_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        cli.parse_args(["--log-level", "verbose"])


def test_main_exits_non_zero_without_sources(monkeypatch, tmp_path):
    monkeypatch.delenv("BRANDS_CSV_URL", raising=False)
    monkeypatch.delenv("MASTER_CSV_URL", raising=False)
    monkeypatch.chdir(tmp_path)

    assert cli.main(["--public-dir", str(tmp_path / "public")]) == 1
    assert not (tmp_path / "public" / "data.json").exists()


def test_main_exits_non_zero_on_invalid_env_log_level(monkeypatch, tmp_path):
    _set_sources(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    monkeypatch.chdir(tmp_path)

    async def fail_if_called(settings):
        raise AssertionError("build should not start")

    monkeypatch.setattr(cli, "run_build", fail_if_called)

    assert cli.main([]) == 1


def test_main_returns_outcome_exit_code_on_errors(monkeypatch, tmp_path):
    _set_sources(monkeypatch)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    issues = BuildIssues(errors=["snapshot incomplete"])

    async def fake_run_build(settings):
        return _outcome(tmp_path, issues)

    monkeypatch.setattr(cli, "run_build", fake_run_build)

    assert cli.main(["--public-dir", str(tmp_path / "public")]) == 1


def test_main_returns_zero_on_clean_build(monkeypatch, tmp_path):
    _set_sources(monkeypatch)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)

    async def fake_run_build(settings):
        return _outcome(tmp_path, BuildIssues())

    monkeypatch.setattr(cli, "run_build", fake_run_build)

    assert cli.main(["--public-dir", str(tmp_path / "public")]) == 0
