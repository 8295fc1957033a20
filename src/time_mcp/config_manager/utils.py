# config_manager/utils.py
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from loguru import logger
from pydantic import ValidationError

from .main import Config


def read_yaml(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML configuration file. A missing file yields an empty mapping.
    """
    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file not found: {path}, using defaults")
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return data


def validate_config(config_data: Dict[str, Any]) -> Config:
    """
    Validate configuration data against the Config model.

    Raises:
        ValidationError: If the configuration fails validation.
    """
    try:
        return Config.model_validate(config_data)
    except ValidationError as e:
        logger.error(f"Error validating configuration: {e}")
        raise
