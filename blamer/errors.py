"""
Exception hierarchy for the scan/report pipeline.

Every error here is fatal: it carries the path that failed and is chained
to the underlying OSError or UnicodeDecodeError via ``raise ... from``.
"""
from __future__ import annotations

from typing import Optional


class BlamerError(Exception):
	"""Base class for all pipeline errors."""

	action = "process"

	def __init__(self, path: str, cause: Optional[BaseException] = None):
		self.path = path
		self.cause = cause
		detail = f": {cause}" if cause is not None else ""
		super().__init__(f"cannot {self.action} {path}{detail}")


class DirectoryListError(BlamerError):
	action = "list directory"


class FileReadError(BlamerError):
	action = "read file"


class OutputCreateError(BlamerError):
	action = "create output"


class OutputWriteError(BlamerError):
	action = "write output"


class StageError(Exception):
	"""Raised by the pipeline to name the stage in which a BlamerError occurred."""

	def __init__(self, stage: str, error: BlamerError):
		self.stage = stage
		self.error = error
		super().__init__(f"Failed to {stage}: {error}")
