import json

import pytest

from cli import main


def test_scan_command(tmp_path, capsys):
	root = tmp_path / "prj"
	root.mkdir()
	(root / "a.rs").write_text("// TODO(alice): x\n// XXX(bob): y\n")
	out = tmp_path / "output"

	code = main(["scan", "--root", str(root), "--output-dir", str(out), "--kind", "todo=TODO", "--kind", "xxx=HACK"])
	assert code == 0
	assert "Comment extraction and analysis completed." in capsys.readouterr().out
	assert (out / "todo_counts.txt").read_text() == "TODO\nalice: 1\n\nHACK\nbob: 1\n\n"


def test_scan_command_failure(tmp_path, capsys):
	code = main(["scan", "--root", str(tmp_path / "missing"), "--output-dir", str(tmp_path / "out")])
	assert code == 1
	captured = capsys.readouterr()
	assert "Failed to extract comments" in captured.err
	assert "completed" not in captured.out


def test_report_command_prints_json(tmp_path, capsys):
	(tmp_path / "m.go").write_text("// FIXME(gopher): leak\n")
	code = main(["report", "--root", str(tmp_path), "--suffix", ".go", "--top", "1"])
	assert code == 0
	data = json.loads(capsys.readouterr().out)
	assert data["result"]["files_scanned"] == 1
	assert data["result"]["tables"]["FIXME"]["counts"] == {"gopher": 1}
	assert data["leaderboards"][1] == {
		"category": "FIXME",
		"entries": [{"rank": 1, "blamer": "gopher", "count": 1}],
	}


def test_bad_kind_argument(capsys):
	with pytest.raises(SystemExit):
		main(["report", "--kind", "nonsense"])


def test_bad_top_argument(tmp_path):
	with pytest.raises(SystemExit):
		main(["report", "--root", str(tmp_path), "--top", "0"])


def test_duplicate_kind_argument(tmp_path, capsys):
	with pytest.raises(SystemExit):
		main(["report", "--root", str(tmp_path), "--kind", "todo=TODO", "--kind", "TODO=OTHER"])
	assert "duplicate kind tokens: todo" in capsys.readouterr().err
