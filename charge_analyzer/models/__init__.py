from .frames import ChargeDataset
from .results import BatchResult, ResultRecord, SkippedFile

__all__ = [
    "BatchResult",
    "ChargeDataset",
    "ResultRecord",
    "SkippedFile",
]
