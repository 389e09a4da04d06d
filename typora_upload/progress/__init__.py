"""Console reporting."""

from .reporter import UploadProgressContext, UploadReporter

__all__ = ["UploadProgressContext", "UploadReporter"]
