from enum import Enum


class ReaderState(Enum):
    IDLE = "idle"
    IN_BENCHMARK = "in_benchmark"
    IN_DATASET = "in_dataset"
