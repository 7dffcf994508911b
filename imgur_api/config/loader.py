"""YAML configuration loader with environment variable overrides.

Configuration is layered (later layers win):

  1. A YAML file of setting names to values, e.g. ``config/imgur.yaml``
  2. ``.env`` file entries
  3. ``IMGUR_*`` environment variables
"""

from pathlib import Path

import yaml

from imgur_api.config.settings import Settings
from imgur_api.utils.errors import ConfigurationError


def load_config(path: str = "config/imgur.yaml") -> Settings:
    """Load YAML settings and overlay environment-based values.

    Args:
        path: Path to the YAML configuration file.  A missing file is
              treated as empty.

    Returns:
        Fully resolved :class:`Settings`.

    Raises:
        ConfigurationError: If the file does not hold a mapping.
    """
    config_path = Path(path)
    yaml_config: dict = {}
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    if not isinstance(yaml_config, dict):
        raise ConfigurationError(
            message=f"Expected a mapping in {path}, got {type(yaml_config).__name__}",
            provider_name="config",
        )

    # Fields present in model_fields_set came from the env or .env file.
    env_settings = Settings()
    env_overrides = env_settings.model_dump(include=env_settings.model_fields_set)

    merged = {key.lower(): value for key, value in yaml_config.items()}
    merged.update(env_overrides)
    return Settings(**merged)
