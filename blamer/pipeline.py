from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import BlamerError, StageError
from .extract import AnnotationExtractor
from .fs_scan import scan_repository
from .model import ScanConfig, ScanResult
from .report import ensure_output_dir, write_counts, write_leaderboards


logger = logging.getLogger(__name__)


def collect(config: ScanConfig) -> ScanResult:
	"""Walk config.root and count annotations per category and blamer."""
	extractor = AnnotationExtractor(config.kinds)
	tables = extractor.new_tables()
	files_scanned = 0
	for path in scan_repository(config.root, config.suffixes):
		extractor.count_file(path, tables)
		files_scanned += 1
	logger.info("scanned %d files under %s", files_scanned, config.root)
	return ScanResult(root=config.root, files_scanned=files_scanned, tables=tables)


def run(config: ScanConfig) -> Tuple[ScanResult, List[str]]:
	"""Run the full pipeline and return the result with the written report paths.

	The first failure aborts the run; it is re-raised as a StageError naming
	the stage that failed.
	"""
	stage = "create output directory"
	try:
		ensure_output_dir(config.output_dir)
		stage = "extract comments"
		result = collect(config)
		stage = "write TODO counts"
		counts_path = write_counts(config.output_dir, result.tables)
		stage = "write top TODO blamer"
		board_path = write_leaderboards(config.output_dir, result.tables, config.top_n)
	except BlamerError as e:
		raise StageError(stage, e) from e
	return result, [counts_path, board_path]
