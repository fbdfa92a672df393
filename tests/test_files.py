"""Tests for source file records and directory listing."""

import os

import pytest

from cxxtool.files import SourceFile, list_dir, read_file, write_file


class TestSourceFile:
    def test_read_keeps_line_endings(self, tmp_path):
        path = tmp_path / "a.c"
        path.write_bytes(b"int a;\r\nint b;\n")
        file = SourceFile(path, "a.c").read()
        assert file.data == "int a;\r\nint b;\n"
        assert file.is_loaded
        assert not file.is_modified

    def test_set_data_records_operations(self, tmp_path):
        path = tmp_path / "a.c"
        path.write_text("x\n")
        file = SourceFile(path).read()

        file.set_data(file.data, "NoTabs")
        assert file.ops == []
        assert not file.is_modified

        file.set_data("y\n", "ExpandTemplates")
        assert file.ops == ["ExpandTemplates"]
        assert file.is_modified

    def test_modified_is_identity_based(self, tmp_path):
        path = tmp_path / "a.c"
        path.write_text("int x;\n")
        file = SourceFile(path).read()
        copy = "".join(list(file.original))
        assert copy == file.original and copy is not file.original
        file.set_data(copy, "Rebuilt")
        assert file.is_modified

    def test_write(self, tmp_path):
        path = tmp_path / "a.c"
        path.write_text("old\n")
        file = SourceFile(path).read()
        file.set_data("new\r\n", "WindowsEOL")
        file.write()
        assert path.read_bytes() == b"new\r\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.c"]

    def test_unloaded(self, tmp_path):
        file = SourceFile(tmp_path / "a.c")
        assert not file.is_loaded
        assert file.rel_name == str(tmp_path / "a.c")

    def test_write_requires_read(self, tmp_path):
        file = SourceFile(tmp_path / "a.c", "a.c")
        with pytest.raises(RuntimeError, match="never read"):
            file.write()
        assert not (tmp_path / "a.c").exists()

    def test_set_data_records_several_operations(self, tmp_path):
        path = tmp_path / "a.c"
        path.write_text("\tx \n")
        file = SourceFile(path).read()
        file.set_data("x\n", "NoTabs", "NoTrailingSpaces")
        assert file.ops == ["NoTabs", "NoTrailingSpaces"]


class TestWriteFile:
    def test_keeps_permissions(self, tmp_path):
        path = tmp_path / "gen.sh"
        path.write_text("a\n")
        os.chmod(path, 0o755)
        write_file(path, "b\n")
        assert read_file(path) == "b\n"
        assert path.stat().st_mode & 0o777 == 0o755

    def test_creates_file(self, tmp_path):
        path = tmp_path / "new.h"
        write_file(path, "x\n")
        assert read_file(path) == "x\n"


class TestListDir:
    @pytest.fixture
    def tree(self, tmp_path):
        (tmp_path / "sub" / "deep").mkdir(parents=True)
        (tmp_path / "vendor").mkdir()
        for rel in ["b.c", "a.h", "notes.txt", "sub/c.cpp", "sub/deep/d.hpp", "vendor/v.c", "sub/skip.c"]:
            (tmp_path / rel).write_text("x\n")
        return tmp_path

    def test_files_before_subdirectories(self, tree):
        names = [f.rel_name for f in list_dir(tree)]
        assert names == [
            "a.h", "b.c", "notes.txt",
            "sub/c.cpp", "sub/skip.c", "sub/deep/d.hpp",
            "vendor/v.c",
        ]

    def test_exclude_and_accept(self, tree):
        files = list_dir(tree, ["vendor", "sub/skip.c"], lambda name: not name.endswith(".txt"))
        assert [f.rel_name for f in files] == ["a.h", "b.c", "sub/c.cpp", "sub/deep/d.hpp"]
        assert files[0].path == tree / "a.h"

    def test_skips_symlinks(self, tree):
        (tree / "link.c").symlink_to(tree / "b.c")
        (tree / "linkdir").symlink_to(tree / "sub", target_is_directory=True)
        names = [f.rel_name for f in list_dir(tree)]
        assert "link.c" not in names
        assert not any(name.startswith("linkdir") for name in names)
