from __future__ import annotations

import logging
import re
from typing import Dict, Iterator, List, Optional

from .errors import FileReadError
from .model import AnnotationMatch, FrequencyTable, KindRule


logger = logging.getLogger(__name__)

# Horizontal whitespace only, so a match never spans two lines.
_HSPACE = r"[^\S\r\n]*"


def build_pattern(kinds: List[KindRule]) -> "re.Pattern[str]":
	"""Compile the ``// KIND(blamer): description`` pattern for the given kinds."""
	tokens = sorted({re.escape(rule.token) for rule in kinds}, key=len, reverse=True)
	return re.compile(
		r"//" + _HSPACE
		+ r"(?P<kind>" + "|".join(tokens) + r")"
		+ r"\((?P<blamer>\w+)\):" + _HSPACE
		+ r"(?P<description>[^\r\n]*)",
		re.IGNORECASE | re.ASCII,
	)


def read_source(path: str) -> str:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise FileReadError(path, e) from e


class AnnotationExtractor:
	"""Find annotations in source text and fold them into frequency tables."""

	def __init__(self, kinds: List[KindRule]):
		self.categories: Dict[str, str] = {rule.token.lower(): rule.category for rule in kinds}
		self.order: List[str] = [rule.category for rule in kinds]
		self.pattern = build_pattern(kinds)

	def new_tables(self) -> Dict[str, FrequencyTable]:
		tables: Dict[str, FrequencyTable] = {}
		for category in self.order:
			tables.setdefault(category, FrequencyTable(category=category))
		return tables

	def iter_matches(self, text: str, path: Optional[str] = None) -> Iterator[AnnotationMatch]:
		pos, line = 0, 1
		for m in self.pattern.finditer(text):
			category = self.categories.get(m.group("kind").lower())
			if category is None:
				continue
			line += text.count("\n", pos, m.start())
			pos = m.start()
			yield AnnotationMatch(
				kind=category,
				blamer=m.group("blamer"),
				description=m.group("description").strip(),
				path=path,
				line=line,
			)

	def count_text(self, text: str, tables: Dict[str, FrequencyTable]) -> int:
		found = 0
		for m in self.pattern.finditer(text):
			category = self.categories.get(m.group("kind").lower())
			if category is None:
				continue
			tables[category].add(m.group("blamer"))
			found += 1
		return found

	def count_file(self, path: str, tables: Dict[str, FrequencyTable]) -> int:
		found = self.count_text(read_source(path), tables)
		logger.debug("%s: %d annotations", path, found)
		return found
