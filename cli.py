from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from blamer.errors import BlamerError, StageError
from blamer.model import KindRule, ScanConfig, ScanReport
from blamer.pipeline import collect, run
from blamer.report import build_leaderboards


logger = logging.getLogger("cli")


def setup_logging(level: str = "WARNING") -> None:
	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper()))
	for handler in root.handlers[:]:
		root.removeHandler(handler)
	handler = logging.StreamHandler(sys.stderr)
	handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
	root.addHandler(handler)


def parse_kind(value: str) -> KindRule:
	token, sep, category = value.partition("=")
	if not sep or not token or not category:
		raise argparse.ArgumentTypeError(f"expected TOKEN=CATEGORY, got {value!r}")
	try:
		return KindRule(token=token, category=category)
	except ValidationError as e:
		raise argparse.ArgumentTypeError(str(e.errors()[0]["msg"])) from e


def config_from_args(args: argparse.Namespace) -> ScanConfig:
	fields = {"root": args.root, "top_n": args.top}
	if args.suffix:
		fields["suffixes"] = tuple(args.suffix)
	if args.kind:
		fields["kinds"] = args.kind
	if getattr(args, "output_dir", None):
		fields["output_dir"] = args.output_dir
	return ScanConfig(**fields)


def cmd_scan(args: argparse.Namespace) -> int:
	config = config_from_args(args)
	try:
		run(config)
	except StageError as e:
		logger.error("%s", e)
		return 1
	print("Comment extraction and analysis completed.")
	return 0


def cmd_report(args: argparse.Namespace) -> int:
	config = config_from_args(args)
	try:
		result = collect(config)
	except BlamerError as e:
		logger.error("Failed to extract comments: %s", e)
		return 1
	report = ScanReport(result=result, leaderboards=build_leaderboards(result.tables, config.top_n))
	print(json.dumps(report.model_dump(), indent=2))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def _add_scan_options(p: argparse.ArgumentParser) -> None:
	p.add_argument("--root", default="input/test_prj", help="Root directory to scan")
	p.add_argument("--suffix", action="append", help="File suffix to scan (repeatable, default .rs)")
	p.add_argument("--top", type=int, default=5, help="Leaderboard size")
	p.add_argument(
		"--kind",
		action="append",
		type=parse_kind,
		metavar="TOKEN=CATEGORY",
		help="Annotation kind (repeatable; replaces the default todo/fixme table)",
	)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="todo-blamer")
	parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
	sub = parser.add_subparsers(dest="cmd", required=True)

	ps = sub.add_parser("scan", help="Scan a tree and write the counts and leaderboard files")
	_add_scan_options(ps)
	ps.add_argument("--output-dir", default="output", help="Directory for the report files")
	ps.set_defaults(func=cmd_scan)

	pr = sub.add_parser("report", help="Scan a tree and print counts and leaderboards as JSON")
	_add_scan_options(pr)
	pr.set_defaults(func=cmd_report)

	pv = sub.add_parser("serve", help="Run FastAPI server")
	pv.add_argument("--host", default="127.0.0.1")
	pv.add_argument("--port", type=int, default=8000)
	pv.add_argument("--reload", action="store_true")
	pv.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	setup_logging(args.log_level)
	if args.cmd != "serve" and args.top < 1:
		parser.error("--top must be at least 1")
	try:
		return args.func(args)
	except ValidationError as e:
		parser.error(e.errors()[0]["msg"])


if __name__ == "__main__":
	sys.exit(main())
