"""Project configuration."""

from fnscaffold.config.loader import CONFIG_FILENAME, ensure_functions_dir, load_config

__all__ = ["CONFIG_FILENAME", "ensure_functions_dir", "load_config"]
