from enum import Enum


class OsName(Enum):
    LINUX = "Linux"
    MACOS = "macOS"
    MACOS_MB_AIR = "macOS (Mb Air)"
    WSL = "Windows (WSL)"
