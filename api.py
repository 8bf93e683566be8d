from __future__ import annotations

import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from blamer.errors import BlamerError, DirectoryListError
from blamer.model import KindRule, ScanConfig, ScanReport
from blamer.pipeline import collect
from blamer.report import build_leaderboards


app = FastAPI(title="TODO Blamer")


class ScanRequest(BaseModel):
	root_path: str
	suffixes: Optional[List[str]] = None
	top_n: int = Field(default=5, ge=1)
	kinds: Optional[List[KindRule]] = None


@app.post("/scan", response_model=ScanReport)
def scan(req: ScanRequest) -> ScanReport:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	fields = {"root": root, "top_n": req.top_n}
	if req.suffixes is not None:
		fields["suffixes"] = tuple(req.suffixes)
	if req.kinds is not None:
		fields["kinds"] = req.kinds
	try:
		config = ScanConfig(**fields)
	except ValidationError as e:
		raise HTTPException(status_code=422, detail=str(e)) from e

	try:
		result = collect(config)
	except DirectoryListError as e:
		raise HTTPException(status_code=400, detail=str(e)) from e
	except BlamerError as e:
		raise HTTPException(status_code=422, detail=str(e)) from e

	return ScanReport(result=result, leaderboards=build_leaderboards(result.tables, config.top_n))
