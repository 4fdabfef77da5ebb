import os
import stat
import sys

import pytest

from vugu.distutil.execute import ExecError, env_exec, run


@pytest.fixture
def fake_go(tmp_path, monkeypatch):
    """Put a fake `go` on PATH that prints FAKE_GO_<VAR> for `go env <VAR>`."""
    bindir = tmp_path / "fakebin"
    bindir.mkdir()
    script = bindir / "go"
    script.write_text(
        f"#!{sys.executable}\n"
        "import os, sys\n"
        "if os.environ.get('FAKE_GO_FAIL'):\n"
        "    sys.exit(1)\n"
        "print(os.environ.get('FAKE_GO_' + sys.argv[2], ''))\n"
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", str(bindir) + os.pathsep + os.environ.get("PATH", ""))
    gopath = tmp_path / "gopath"
    gopath.mkdir()
    monkeypatch.setenv("FAKE_GO_GOPATH", str(gopath))
    return gopath


def test_env_exec_sets_extra_variables(fake_go):
    out = env_exec(
        ["VUGU_TEST_VAR=hello"],
        sys.executable,
        "-c",
        "import os; print(os.environ['VUGU_TEST_VAR'])",
    )
    assert out.strip() == "hello"


def test_env_exec_appends_go_bin_when_present(fake_go):
    go_bin = fake_go / "bin"
    go_bin.mkdir()
    out = run(sys.executable, "-c", "import os; print(os.environ['PATH'])")
    assert out.strip().split(os.pathsep)[-1] == str(go_bin)


def test_env_exec_leaves_path_without_go_bin(fake_go):
    out = run(sys.executable, "-c", "import os; print(os.environ['PATH'])")
    assert str(fake_go / "bin") not in out.strip().split(os.pathsep)


def test_run_returns_combined_output(fake_go):
    out = run(
        sys.executable,
        "-c",
        "import sys; sys.stdout.write('out'); sys.stdout.flush(); sys.stderr.write('err')",
    )
    assert "out" in out and "err" in out


def test_run_failure_raises_with_output(fake_go, capsys):
    with pytest.raises(ExecError) as info:
        run(sys.executable, "-c", "import sys; print('boom'); sys.exit(3)")
    assert info.value.returncode == 3
    assert "boom" in info.value.output
    assert "boom" in capsys.readouterr().out


def test_go_env_failure_raises(fake_go, monkeypatch, tmp_path):
    monkeypatch.setenv("FAKE_GO_FAIL", "1")
    marker = tmp_path / "ran.txt"
    with pytest.raises(Exception) as info:
        run(
            sys.executable,
            "-c",
            f"open({str(marker)!r}, 'w').write('ran')",
        )
    assert not isinstance(info.value, ExecError)
    assert not marker.exists()


def test_missing_go_raises(tmp_path, monkeypatch):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    with pytest.raises(FileNotFoundError):
        run(sys.executable, "-c", "print(1)")