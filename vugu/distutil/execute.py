"""Run commands with the Go binary directory added to PATH."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable

__all__ = ["ExecError", "env_exec", "run"]


class ExecError(RuntimeError):
    """A command exited unsuccessfully; carries its combined output."""

    def __init__(self, name: str, args: list[str], returncode: int, output: str) -> None:
        self.name = name
        self.args_list = args
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"error running: {name} {args}; exit status {returncode}; output:\n{output}\n"
        )


def _go_env(var: str) -> str:
    """Return the stripped value printed by ``go env <var>``."""
    result = subprocess.run(
        ["go", "env", var],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        check=True,
    )
    return result.stdout.strip()


def env_exec(env: Iterable[str] | None, name: str, *args: str) -> str:
    """Run ``name`` with ``args`` and return its combined output.

    ``env`` holds extra ``KEY=VALUE`` settings applied over the current
    environment.  If the ``bin`` directory under ``go env GOPATH`` exists it
    is appended to PATH.  On failure the error is printed and
    :class:`ExecError` raised.
    """
    child_env = dict(os.environ)

    go_bin_dir = os.path.join(_go_env("GOPATH"), "bin")
    if os.path.exists(go_bin_dir) and "PATH" in child_env:
        child_env["PATH"] = f"{child_env['PATH']}{os.pathsep}{go_bin_dir}"

    for setting in env or ():
        key, sep, value = setting.partition("=")
        child_env[key] = value if sep else ""

    result = subprocess.run(
        [name, *args],
        env=child_env,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
    )
    if result.returncode != 0:
        err = ExecError(name, list(args), result.returncode, result.stdout)
        print(err, end="")
        raise err
    return result.stdout


def run(name: str, *args: str) -> str:
    """Like :func:`env_exec` with no extra environment settings."""
    return env_exec(None, name, *args)