#!/usr/bin/env python3
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .engines import ENGINES

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
	"engine": None,
	"indent": 2,
	"json_output_name": "output.json",
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
	"""Load settings from a YAML file, falling back to DEFAULTS for missing keys."""
	config = dict(DEFAULTS)
	if config_path and os.path.exists(config_path):
		with open(config_path, "r", encoding="utf-8") as f:
			user_config = yaml.safe_load(f) or {}
		if not isinstance(user_config, dict):
			raise ValueError(f"Config file {config_path} must contain a mapping")
		config.update({k: v for k, v in user_config.items() if k in DEFAULTS})
	elif config_path:
		logger.warning("Config file %s not found, using defaults", config_path)

	if config["engine"] is not None and config["engine"] not in ENGINES:
		raise ValueError(f"Unknown engine '{config['engine']}' in {config_path}, expected one of: {', '.join(ENGINES)}")
	return config
