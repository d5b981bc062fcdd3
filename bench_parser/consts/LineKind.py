from enum import Enum


class LineKind(Enum):
    SYSTEM_INFO = "system_info"
    BANNER = "banner"
    VERSION_TAG = "version_tag"
    DATASET_START = "dataset_start"
    RESULT_ROW = "result_row"
    OTHER = "other"
