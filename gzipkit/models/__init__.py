from .common import CompressionLevel, DestinationDecision, Extension, JobStatus
from .compress import BatchReport, CompressionJob, CompressionRequest, CompressionResult, ItemError

__all__ = [
    "BatchReport",
    "CompressionJob",
    "CompressionLevel",
    "CompressionRequest",
    "CompressionResult",
    "DestinationDecision",
    "Extension",
    "ItemError",
    "JobStatus",
]
