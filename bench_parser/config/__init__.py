"""Configuration module for the benchmark log parser."""

from .config_loader import ConfigLoader
from .parser_config import ParserConfig

__all__ = ["ConfigLoader", "ParserConfig"]
