from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class KindRule(BaseModel):
	token: str
	category: str

	@field_validator("token")
	@classmethod
	def _token_is_word(cls, v: str) -> str:
		if not v or not v.replace("_", "").isalnum():
			raise ValueError(f"kind token must be a word, got {v!r}")
		return v.lower()


DEFAULT_KINDS: List[KindRule] = [
	KindRule(token="todo", category="TODO"),
	KindRule(token="fixme", category="FIXME"),
]


class AnnotationMatch(BaseModel):
	kind: str
	blamer: str
	description: str = ""
	path: Optional[str] = None
	line: Optional[int] = None


class RankedEntry(BaseModel):
	rank: int
	blamer: str
	count: int


class FrequencyTable(BaseModel):
	"""Blamer -> count for one category, keyed in first-seen order."""

	category: str
	counts: Dict[str, int] = {}

	def add(self, blamer: str) -> None:
		self.counts[blamer] = self.counts.get(blamer, 0) + 1

	def total(self) -> int:
		return sum(self.counts.values())

	def ranked(self, limit: Optional[int] = None) -> List[RankedEntry]:
		# sorted() is stable, so equal counts keep first-seen order
		order = sorted(self.counts.items(), key=lambda item: item[1], reverse=True)
		if limit is not None:
			order = order[:limit]
		return [RankedEntry(rank=i, blamer=b, count=c) for i, (b, c) in enumerate(order, 1)]


class ScanConfig(BaseModel):
	root: str = "input/test_prj"
	suffixes: Tuple[str, ...] = (".rs",)
	output_dir: str = "output"
	top_n: int = Field(default=5, ge=1)
	kinds: List[KindRule] = Field(default_factory=lambda: list(DEFAULT_KINDS))

	@field_validator("suffixes")
	@classmethod
	def _suffixes_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
		if not v:
			raise ValueError("at least one file suffix is required")
		return v

	@field_validator("kinds")
	@classmethod
	def _kinds_not_empty(cls, v: List[KindRule]) -> List[KindRule]:
		if not v:
			raise ValueError("at least one kind rule is required")
		tokens = [rule.token for rule in v]
		dupes = sorted({t for t in tokens if tokens.count(t) > 1})
		if dupes:
			raise ValueError(f"duplicate kind tokens: {', '.join(dupes)}")
		return v


class ScanResult(BaseModel):
	root: str
	files_scanned: int = 0
	tables: Dict[str, FrequencyTable]


class Leaderboard(BaseModel):
	category: str
	entries: List[RankedEntry]


class ScanReport(BaseModel):
	result: ScanResult
	leaderboards: List[Leaderboard]
