"""Blamer package for tallying TODO/FIXME annotations per author across a source tree.

Modules:
- fs_scan.py: Recursive source tree walk with suffix filtering.
- extract.py: Annotation pattern matching and per-blamer counting.
- report.py: Counts dump and top-N leaderboard writers.
- pipeline.py: Walk, extract and report composed for one ScanConfig.
- model.py: Pydantic models for kinds, tables, matches and results.
- errors.py: Fatal error hierarchy.
"""

__all__ = [
	"fs_scan",
	"extract",
	"report",
	"pipeline",
	"model",
	"errors",
]
