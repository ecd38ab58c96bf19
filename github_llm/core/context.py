# github_llm/core/context.py
"""
文件上下文构建器：把单个文件或一个目录转换为可嵌入 JSON 的上下文片段。

- 单文件：返回文件的原始文本
- 目录：返回目录下（非递归）每个普通文件的 {path, content, encoding} 记录
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from .errors import NotFoundError, UsageError
from .models import CONTEXT_ENCODING, Context, ContextMode, FileContext


def _read_text(path: Path) -> str:
    # 原始字节按 UTF-8 解释，无法解码的字节以替换字符保留
    return path.read_bytes().decode(CONTEXT_ENCODING, errors="replace")


def build_context_from_file(path: Union[str, Path]) -> str:
    """Return the literal text of a single file."""
    file_path = Path(path)
    if not file_path.is_file():
        raise NotFoundError(f"File not found: {path}")
    return _read_text(file_path)


def build_context_from_dir(path: Union[str, Path]) -> List[FileContext]:
    """
    Build one record per regular file directly inside ``path``, ordered by
    name. Sub-directories are not descended into.
    """
    dir_path = Path(path)
    if not dir_path.is_dir():
        raise NotFoundError(f"Directory not found: {path}")

    entries = []
    for child in sorted(dir_path.iterdir(), key=lambda p: p.name):
        if not child.is_file():
            continue
        entries.append(FileContext(
            path=child.relative_to(dir_path).as_posix(),
            content=_read_text(child),
        ))
    return entries


def context_mode_for(file: Optional[str], directory: Optional[str]) -> ContextMode:
    if file and directory:
        raise UsageError("Cannot use both -f and -d at the same time.")
    if file:
        return ContextMode.FILE
    if directory:
        return ContextMode.DIRECTORY
    return ContextMode.NONE


def build_context(file: Optional[str] = None, directory: Optional[str] = None) -> Optional[Context]:
    """根据上下文模式分派到对应的构建函数；无上下文时返回 None"""
    mode = context_mode_for(file, directory)
    if mode is ContextMode.FILE:
        return build_context_from_file(file)
    if mode is ContextMode.DIRECTORY:
        return build_context_from_dir(directory)
    return None


def serialize_context(context: Context) -> str:
    """
    JSON text embedded as the second text block of the user message: a JSON
    string for a single file, a JSON array of records for a directory.
    """
    if isinstance(context, str):
        return json.dumps(context, ensure_ascii=False)
    return json.dumps([entry.to_dict() for entry in context], ensure_ascii=False)
