"""Copy static files into a distribution directory, skipping up-to-date ones."""

from __future__ import annotations

import os
import re
import shutil
import stat
import time
from pathlib import Path
from typing import Pattern, Union

__all__ = ["DEFAULT_FILE_INCL_PATTERN", "copy_dir_filtered", "copy_file"]

DEFAULT_FILE_INCL_PATTERN: Pattern[str] = re.compile(
    r"[.](css|js|html|map|jpg|jpeg|png|gif|svg|eot|ttf|otf|woff|woff2|wasm)$"
)
"""Extensions of common static web assets."""

PathLike = Union[str, "os.PathLike[str]"]


def copy_dir_filtered(
    src_dir: PathLike,
    dst_dir: PathLike,
    file_incl_pattern: Pattern[str] | str | None = None,
) -> None:
    """Recursively copy files whose base name matches ``file_incl_pattern``.

    ``DEFAULT_FILE_INCL_PATTERN`` is used when no pattern is given.  The
    destination is skipped if it lies inside the source, and directories are
    only created in the destination when a file is copied into them.  Each
    file goes through :func:`copy_file`.
    """
    if file_incl_pattern is None:
        pattern = DEFAULT_FILE_INCL_PATTERN
    elif isinstance(file_incl_pattern, str):
        pattern = re.compile(file_incl_pattern)
    else:
        pattern = file_incl_pattern

    dst_root = Path(os.path.abspath(dst_dir))

    def copy_dir(src: Path, dst: Path) -> None:
        if src == dst_root:
            return
        with os.scandir(src) as entries:
            items = list(entries)
        for entry in items:
            if entry.is_dir(follow_symlinks=False):
                copy_dir(src / entry.name, dst / entry.name)
                continue
            if not pattern.search(entry.name):
                continue
            dst.mkdir(mode=0o755, parents=True, exist_ok=True)
            copy_file(src / entry.name, dst / entry.name)

    copy_dir(Path(os.path.abspath(src_dir)), dst_root)


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy ``src`` to ``dst``, following symlinks; directories are not copied.

    If ``dst`` already has the same size and modification time (to the
    second) it is assumed up to date and left alone.  After a copy the
    destination's modification time is set to the source's.
    """
    src_path = os.path.abspath(src)
    dst_path = os.path.abspath(dst)

    src_st = os.stat(src_path)
    if stat.S_ISDIR(src_st.st_mode):
        raise IsADirectoryError(f"source ({src_path!r}) is directory, cannot copy_file")

    try:
        dst_st = os.stat(dst_path)
    except FileNotFoundError:
        dst_st = None

    if dst_st is not None:
        if stat.S_ISDIR(dst_st.st_mode):
            raise IsADirectoryError(
                f"destination ({dst_path!r}) is directory, cannot copy_file"
            )
        same_time = dst_st.st_mtime_ns // 10**9 == src_st.st_mtime_ns // 10**9
        if same_time and dst_st.st_size == src_st.st_size:
            return

    fd = os.open(
        dst_path,
        os.O_CREAT | os.O_TRUNC | os.O_WRONLY,
        stat.S_IMODE(src_st.st_mode),
    )
    with os.fdopen(fd, "wb") as dst_f, open(src_path, "rb") as src_f:
        shutil.copyfileobj(src_f, dst_f)

    os.utime(dst_path, ns=(time.time_ns(), src_st.st_mtime_ns))