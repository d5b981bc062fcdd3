from dataclasses import dataclass


@dataclass(frozen=True)
class AppInfo:
    """Canonical application name and version resolved from a banner."""
    name: str
    version: str
    is_gui: bool = False


@dataclass(frozen=True)
class PublicationInfo:
    """Citation metadata of a published alignment dataset."""
    name: str
    ntax: int = 0
    alignment_count: int = 0
    character_count: int = 0
    site_count: int = 0
    datatype: str = "UNKNOWN"

    @property
    def dataset_label(self) -> str:
        return f"{self.name} ({self.datatype})"
