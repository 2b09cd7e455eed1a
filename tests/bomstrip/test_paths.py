from __future__ import annotations

from pathlib import Path

from bomstrip.paths import backup_path_for, expand_arguments, staging_directory


def test_backup_path_replaces_extension():
    assert backup_path_for(Path("dir/notes.txt")) == Path("dir/notes.bak")
    assert backup_path_for(Path("archive.tar.gz")) == Path("archive.tar.bak")


def test_backup_path_without_extension_appends():
    assert backup_path_for(Path("README")) == Path("README.bak")
    assert backup_path_for(Path(".bashrc")) == Path(".bashrc.bak")


def test_staging_directory_falls_back_to_cwd():
    assert staging_directory(Path("file.txt")) == Path(".")
    assert staging_directory(Path("a/b/file.txt")) == Path("a/b")


def test_expand_arguments_globs_patterns(tmp_path):
    for name in ("b.txt", "a.txt", "c.csv"):
        (tmp_path / name).write_bytes(b"x")
    expanded = expand_arguments([str(tmp_path / "*.txt")])
    assert expanded == [tmp_path / "a.txt", tmp_path / "b.txt"]


def test_expand_arguments_keeps_plain_and_unmatched_values(tmp_path):
    plain = tmp_path / "plain.txt"
    pattern = tmp_path / "*.none"
    assert expand_arguments([plain, pattern]) == [plain, pattern]


def test_expand_arguments_prefers_existing_literal_name(tmp_path):
    literal = tmp_path / "odd[1].txt"
    literal.write_bytes(b"x")
    (tmp_path / "odd1.txt").write_bytes(b"x")
    assert expand_arguments([literal]) == [literal]
