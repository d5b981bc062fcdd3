"""
Configuration loader for the benchmark log parser.

This module provides the ConfigLoader class for loading parser settings
from YAML files, with optional environment-specific overrides.
"""
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from bench_parser.config.parser_config import ParserConfig
from bench_parser.util.log_config import setup_logger

logger = setup_logger(__name__)


class ConfigLoader:

    def __init__(self, config_file: Path, env: Optional[str] = None):
        self.config_file = config_file
        self.env = env
        self.config_data = self._load_config()

    def env_config_file(self) -> Optional[Path]:
        if not self.env:
            return None
        return self.config_file.with_name(f"{self.config_file.stem}_{self.env}{self.config_file.suffix}")

    def _load_config(self) -> ParserConfig:
        """
        Load and parse parser configuration from a YAML file.
        Supports environment-specific overrides via <name>_<env>.yaml

        Returns:
            ParserConfig: Configured parser configuration instance
        """
        with open(self.config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        env_file = self.env_config_file()
        if env_file is not None:
            with open(env_file, "r", encoding="utf-8") as f:
                env_data = yaml.safe_load(f) or {}
                # dict.update() overwrites existing keys
                data.update(env_data)
            logger.debug(f"Applied environment override: {env_file}")

        return self.to_config(data)

    @staticmethod
    def to_config(data: Dict[str, Any]) -> ParserConfig:
        known = {f.name for f in fields(ParserConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        config = ParserConfig(**{k: v for k, v in data.items() if k in known})
        if isinstance(config.inputs, str):
            config.inputs = [config.inputs]
        config.dataset_size = int(config.dataset_size)
        return config
