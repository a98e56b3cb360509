"""Environment-aware TOML configuration loading with a command to print it."""

__version__ = "0.1.0"

__all__ = ["basic_config", "cli", "environment", "errors", "poem_config"]