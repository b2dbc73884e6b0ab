import subprocess
from unittest.mock import MagicMock

import pytest

from dockpeek.runner import CommandError, CommandRunner


def completed(returncode=0, stdout="", stderr=""):
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


def test_run_returns_stdout(mocker):
    run = mocker.patch("dockpeek.runner.subprocess.run", return_value=completed(stdout="ok\n"))
    assert CommandRunner().run(["ps", "--format", "json"]) == "ok\n"

    cmd = run.call_args.args[0]
    assert cmd == ["docker", "ps", "--format", "json"]
    assert run.call_args.kwargs["stderr"] == subprocess.PIPE


def test_custom_binary(mocker):
    run = mocker.patch("dockpeek.runner.subprocess.run", return_value=completed())
    CommandRunner("podman").run(["images", "--format", "json"])
    assert run.call_args.args[0][0] == "podman"


def test_merge_stderr_for_logs(mocker):
    run = mocker.patch("dockpeek.runner.subprocess.run", return_value=completed(stdout="out\nerr\n"))
    assert CommandRunner().run(["logs", "c1"], merge_stderr=True) == "out\nerr\n"
    assert run.call_args.kwargs["stderr"] == subprocess.STDOUT


def test_nonzero_exit_raises_with_stderr(mocker):
    mocker.patch(
        "dockpeek.runner.subprocess.run",
        return_value=completed(returncode=1, stderr="Error: No such object: nope\n"),
    )
    with pytest.raises(CommandError) as excinfo:
        CommandRunner().run(["inspect", "nope"])

    err = excinfo.value
    assert err.returncode == 1
    assert err.stderr == "Error: No such object: nope"
    assert err.args_list == ["docker", "inspect", "nope"]
    assert "No such object" in str(err)


def test_missing_binary_raises(mocker):
    mocker.patch("dockpeek.runner.subprocess.run", side_effect=FileNotFoundError("docker"))
    with pytest.raises(CommandError, match="command not found"):
        CommandRunner().run(["ps"])


def test_os_error_raises(mocker):
    mocker.patch("dockpeek.runner.subprocess.run", side_effect=PermissionError("denied"))
    with pytest.raises(CommandError) as excinfo:
        CommandRunner().run(["ps"])
    assert excinfo.value.returncode is None
