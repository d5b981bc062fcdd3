from enum import Enum


class Platform(Enum):
    LAPTOP = "Laptop"
    DESKTOP = "Desktop"
