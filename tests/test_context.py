# tests/test_context.py
import json

import pytest

from github_llm.core.context import (
    build_context, build_context_from_dir, build_context_from_file, serialize_context,
)
from github_llm.core.errors import NotFoundError, UsageError
from github_llm.core.models import FileContext


def test_file_context_is_literal_text(tmp_path):
    f = tmp_path / "app.js"
    f.write_text("const x = \"[1]\";\nconsole.log(x);\n", encoding="utf-8")
    assert build_context_from_file(f) == "const x = \"[1]\";\nconsole.log(x);\n"


def test_file_context_missing_raises_not_found(tmp_path):
    with pytest.raises(NotFoundError, match="File not found"):
        build_context_from_file(tmp_path / "missing.txt")


def test_file_context_rejects_directory(tmp_path):
    with pytest.raises(NotFoundError):
        build_context_from_file(tmp_path)


def test_file_context_keeps_undecodable_bytes_as_replacement(tmp_path):
    f = tmp_path / "blob.bin"
    f.write_bytes(b"ok\xff")
    assert build_context_from_file(f) == "ok\ufffd"


def test_dir_context_lists_top_level_files_only(context_dir):
    entries = build_context_from_dir(context_dir)
    assert [e.path for e in entries] == ["a.txt", "b.txt"]
    assert entries[0] == FileContext(path="a.txt", content="alpha\n", encoding="utf-8")


def test_dir_context_missing_raises_not_found(tmp_path):
    with pytest.raises(NotFoundError, match="Directory not found"):
        build_context_from_dir(tmp_path / "nope")


def test_empty_dir_gives_empty_list(tmp_path):
    assert build_context_from_dir(tmp_path) == []


def test_build_context_dispatch(context_dir):
    assert build_context() is None
    assert build_context(file=str(context_dir / "a.txt")) == "alpha\n"
    assert len(build_context(directory=str(context_dir))) == 2


def test_build_context_rejects_file_and_dir(context_dir):
    with pytest.raises(UsageError):
        build_context(file=str(context_dir / "a.txt"), directory=str(context_dir))


def test_serialize_file_context_is_json_string():
    assert serialize_context('say "hi"\n') == '"say \\"hi\\"\\n"'


def test_serialize_dir_context_is_json_array(context_dir):
    records = json.loads(serialize_context(build_context_from_dir(context_dir)))
    assert records == [
        {"path": "a.txt", "content": "alpha\n", "encoding": "utf-8"},
        {"path": "b.txt", "content": "beta\n", "encoding": "utf-8"},
    ]
