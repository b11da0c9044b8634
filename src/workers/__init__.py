from workers.build_pipeline import BuildOutcome, ConfigurationError, run_build

__all__ = ["BuildOutcome", "ConfigurationError", "run_build"]
