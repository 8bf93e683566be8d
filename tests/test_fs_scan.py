import os

import pytest

from blamer.errors import DirectoryListError
from blamer.fs_scan import has_suffix, scan_repository


def test_suffix_filter_and_recursion(tmp_path):
	(tmp_path / "a" / "b").mkdir(parents=True)
	(tmp_path / "top.rs").write_text("")
	(tmp_path / "notes.txt").write_text("// TODO(x): y")
	(tmp_path / "a" / "b" / "deep.rs").write_text("")
	(tmp_path / "a" / "b" / "deep.rs.bak").write_text("")

	found = list(scan_repository(str(tmp_path), (".rs",)))
	assert found == [
		os.path.join(str(tmp_path), "top.rs"),
		os.path.join(str(tmp_path), "a", "b", "deep.rs"),
	]


def test_multiple_suffixes(tmp_path):
	(tmp_path / "x.go").write_text("")
	(tmp_path / "y.rs").write_text("")
	(tmp_path / "z.py").write_text("")
	names = sorted(os.path.basename(p) for p in scan_repository(str(tmp_path), (".rs", ".go")))
	assert names == ["x.go", "y.rs"]


def test_directory_named_like_source_is_not_yielded(tmp_path):
	(tmp_path / "pkg.rs").mkdir()
	(tmp_path / "pkg.rs" / "inner.rs").write_text("")
	found = list(scan_repository(str(tmp_path)))
	assert found == [os.path.join(str(tmp_path), "pkg.rs", "inner.rs")]


def test_missing_root_raises(tmp_path):
	missing = tmp_path / "absent"
	with pytest.raises(DirectoryListError) as exc:
		list(scan_repository(str(missing)))
	assert exc.value.path == str(missing)


def test_has_suffix():
	assert has_suffix("main.rs", [".rs"])
	assert not has_suffix("main.rst", [".rs"])


def test_unlistable_nested_directory_aborts_walk(tmp_path, monkeypatch):
	(tmp_path / "a" / "locked").mkdir(parents=True)
	(tmp_path / "a" / "locked" / "hidden.rs").write_text("")
	(tmp_path / "first.rs").write_text("")
	real_scandir = os.scandir

	def scandir(path="."):
		if os.path.basename(os.fspath(path)) == "locked":
			raise PermissionError(13, "Permission denied", os.fspath(path))
		return real_scandir(path)

	monkeypatch.setattr(os, "scandir", scandir)
	walk = scan_repository(str(tmp_path))
	assert next(walk) == os.path.join(str(tmp_path), "first.rs")
	with pytest.raises(DirectoryListError) as exc:
		next(walk)
	assert exc.value.path == os.path.join(str(tmp_path), "a", "locked")
	assert isinstance(exc.value.__cause__, PermissionError)
