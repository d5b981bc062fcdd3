"""
Static enrichment tables.

Maps dataset names to publication metadata and benchmark banners to
canonical application names. The data lives in metadata.yaml (or a file
given in the configuration) and is loaded once per process.
"""
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from bench_parser.models.metadata_info import AppInfo, PublicationInfo
from bench_parser.util.log_config import setup_logger

logger = setup_logger(__name__)

DEFAULT_METADATA_FILE = Path(__file__).parent / "metadata.yaml"
UNKNOWN_VERSION = "Unknown"
UNKNOWN_DATATYPE = "UNKNOWN"
WHOLE_GENOME_DATATYPE = "Whole Genome"


@dataclass(frozen=True)
class PublicationEntry:
    keyword: str
    info: PublicationInfo


@dataclass(frozen=True)
class AppVariant:
    contains: str
    name: str
    gui: bool = False


@dataclass(frozen=True)
class AppEntry:
    match: str
    name: str
    version: Optional[str]  # None: taken from the log's version line
    variants: List[AppVariant] = field(default_factory=list)


class MetadataTables:

    def __init__(self, publications: List[PublicationEntry], apps: List[AppEntry],
                 fallback_datatypes: Optional[Dict[str, str]] = None):
        self.publications = publications
        self.apps = apps
        self.fallback_datatypes = fallback_datatypes or {
            "unknown": UNKNOWN_DATATYPE,
            "whole_genome": WHOLE_GENOME_DATATYPE,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetadataTables":
        publications = [
            PublicationEntry(
                keyword=str(pub["keyword"]).lower(),
                info=PublicationInfo(
                    name=pub["name"],
                    ntax=int(pub.get("ntax", 0)),
                    alignment_count=int(pub.get("alignment_count", 0)),
                    character_count=int(pub.get("character_count", 0)),
                    site_count=int(pub.get("site_count", 0)),
                    datatype=pub.get("datatype", UNKNOWN_DATATYPE),
                ),
            )
            for pub in data.get("publications", [])
        ]
        apps = [
            AppEntry(
                match=app["match"],
                name=app.get("name", app["match"]),
                version=app.get("version"),
                variants=[AppVariant(**variant) for variant in app.get("variants", [])],
            )
            for app in data.get("apps", [])
        ]
        return cls(publications, apps, data.get("fallback_datatypes"))

    @classmethod
    def load(cls, path: Path) -> "MetadataTables":
        """
        Load tables from a YAML file.

        Args:
            path: YAML file with ``publications``, ``apps`` and optional
                ``fallback_datatypes`` keys

        Returns:
            MetadataTables instance
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        tables = cls.from_dict(data)
        logger.debug(f"Loaded {len(tables.publications)} publications and "
                     f"{len(tables.apps)} apps from {path}")
        return tables

    def fallback_datatype(self, key: str) -> str:
        return self.fallback_datatypes.get(key, key)

    def resolve_publication(self, dataset_name: str, fallback_datatype: str = UNKNOWN_DATATYPE) -> PublicationInfo:
        """
        Publication metadata for a dataset name.

        Unknown names are not an error: they come back with zero counts and
        ``fallback_datatype`` so the gap stays visible in the output.
        """
        lowered = dataset_name.lower()
        for entry in self.publications:
            if entry.keyword in lowered:
                return entry.info
        logger.debug(f"No publication matches dataset '{dataset_name}'")
        return PublicationInfo(name=dataset_name, datatype=fallback_datatype)

    def resolve_app(self, banner: str, version: str) -> AppInfo:
        for entry in self.apps:
            if entry.match not in banner:
                continue
            name = entry.name
            gui = False
            for variant in entry.variants:
                if variant.contains in banner:
                    name = variant.name
                    gui = variant.gui
                    break
            if entry.version is None:
                app_version = f"v{version}" if version else UNKNOWN_VERSION
            else:
                app_version = entry.version
            return AppInfo(name=name, version=app_version, is_gui=gui)
        logger.debug(f"No application matches banner '{banner}'")
        return AppInfo(name=banner, version=UNKNOWN_VERSION)


@lru_cache(maxsize=None)
def load_metadata(path: Optional[Path] = None) -> MetadataTables:
    return MetadataTables.load(path or DEFAULT_METADATA_FILE)


def resolve_publication(dataset_name: str, fallback_datatype: str = UNKNOWN_DATATYPE) -> PublicationInfo:
    return load_metadata().resolve_publication(dataset_name, fallback_datatype)


def resolve_app(banner: str, version: str) -> AppInfo:
    return load_metadata().resolve_app(banner, version)
