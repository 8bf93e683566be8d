from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Tuple

from .errors import DirectoryListError


logger = logging.getLogger(__name__)


def _raise_list_error(err: OSError) -> None:
	raise DirectoryListError(err.filename or "", err) from err


def has_suffix(filename: str, suffixes: Iterable[str]) -> bool:
	return filename.endswith(tuple(suffixes))


def scan_repository(root: str, suffixes: Tuple[str, ...] = (".rs",)) -> Iterator[str]:
	"""Yield the full path of every file under root ending in one of suffixes.

	Directories are walked depth-first in sorted order. Any directory that
	cannot be listed aborts the walk with DirectoryListError.
	"""
	for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_list_error):
		dirnames.sort()
		for filename in sorted(filenames):
			if not has_suffix(filename, suffixes):
				continue
			path = os.path.join(dirpath, filename)
			logger.debug("matched %s", path)
			yield path
