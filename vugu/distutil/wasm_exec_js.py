"""Locate wasm_exec.js in the local Go distribution."""

from __future__ import annotations

import os

from .execute import _go_env

__all__ = ["wasm_exec_js_path"]


def wasm_exec_js_path() -> str:
    """Return the path of ``misc/wasm/wasm_exec.js`` under ``go env GOROOT``.

    Raises FileNotFoundError if GOROOT is empty or the file does not exist.
    """
    goroot = _go_env("GOROOT")
    if not goroot:
        raise FileNotFoundError(
            "failed to find wasm_exec.js, empty path from `go env GOROOT`"
        )
    path = os.path.join(goroot, "misc", "wasm", "wasm_exec.js")
    os.stat(path)
    return path