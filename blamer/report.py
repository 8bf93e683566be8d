from __future__ import annotations

import logging
import os
from typing import Dict, List

from .errors import OutputCreateError, OutputWriteError
from .model import FrequencyTable, Leaderboard


logger = logging.getLogger(__name__)

COUNTS_FILENAME = "todo_counts.txt"
LEADERBOARD_FILENAME = "top_todo_blamer.txt"


def format_counts(tables: Dict[str, FrequencyTable]) -> str:
	parts: List[str] = []
	for category, table in tables.items():
		parts.append(f"{category}\n")
		for blamer, count in table.counts.items():
			parts.append(f"{blamer}: {count}\n")
		parts.append("\n")
	return "".join(parts)


def build_leaderboards(tables: Dict[str, FrequencyTable], top_n: int) -> List[Leaderboard]:
	return [
		Leaderboard(category=category, entries=table.ranked(top_n))
		for category, table in tables.items()
	]


def format_leaderboards(boards: List[Leaderboard]) -> str:
	sections: List[str] = []
	for board in boards:
		lines = [f"Top {board.category} Blamer:\n"]
		lines.extend(f"{e.rank}. {e.blamer}\n" for e in board.entries)
		sections.append("".join(lines))
	return "\n".join(sections)


def ensure_output_dir(path: str) -> None:
	try:
		os.makedirs(path, exist_ok=True)
	except OSError as e:
		raise OutputCreateError(path, e) from e


def _write_text(path: str, text: str) -> None:
	try:
		fh = open(path, "w", encoding="utf-8")
	except OSError as e:
		raise OutputCreateError(path, e) from e
	try:
		with fh:
			fh.write(text)
	except OSError as e:
		raise OutputWriteError(path, e) from e
	logger.info("wrote %s", path)


def write_counts(output_dir: str, tables: Dict[str, FrequencyTable]) -> str:
	path = os.path.join(output_dir, COUNTS_FILENAME)
	_write_text(path, format_counts(tables))
	return path


def write_leaderboards(output_dir: str, tables: Dict[str, FrequencyTable], top_n: int = 5) -> str:
	path = os.path.join(output_dir, LEADERBOARD_FILENAME)
	_write_text(path, format_leaderboards(build_leaderboards(tables, top_n)))
	return path
