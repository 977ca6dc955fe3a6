"""Tests for node-gyp and native header installation."""

import os
import subprocess
from unittest.mock import MagicMock, call, patch

import pytest

from constants import Constants
from headers.installer import (
    install_headers,
    install_missing_headers,
    node_gyp_path,
    parse_installed_versions,
    tool_dir,
)
from headers.rc_parser import HeaderInfo


def _write_rc(path, disturl, target):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f'disturl "{disturl}"\ntarget "{target}"\n')


class FakeRunner:
    """Stands in for subprocess.run and records every command."""

    def __init__(self, list_output="", yarn_returncode=0, yarn_error=None):
        self.list_output = list_output
        self.yarn_returncode = yarn_returncode
        self.yarn_error = yarn_error
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if cmd[0] == Constants.YARN_CMD:
            if self.yarn_error is not None:
                raise self.yarn_error
            return MagicMock(returncode=self.yarn_returncode)
        if cmd[1] == "list":
            return MagicMock(returncode=0, stdout=self.list_output)
        return MagicMock(returncode=0)

    @property
    def installs(self):
        return [cmd for cmd, _ in self.calls if len(cmd) > 1 and cmd[1] == "install" and cmd[0] != Constants.YARN_CMD]


class TestParseInstalledVersions:
    """Parsing of node-gyp list output."""

    def test_drops_log_lines(self):
        output = "gyp info it worked if it ends with ok\n10.0.0\n13.5.2\r\ngyp info ok\n"
        assert parse_installed_versions(output) == {"10.0.0", "13.5.2"}

    def test_empty_output(self):
        assert parse_installed_versions("") == set()


class TestInstallMissingHeaders:
    """Independent local/remote decisions."""

    def test_skips_installed_and_absent(self):
        specs = [HeaderInfo("https://local", "10.0.0"), None]
        with patch("headers.installer.subprocess.run") as mock_run:
            count = install_missing_headers("node-gyp.cmd", {"10.0.0"}, specs)
        assert count == 0
        mock_run.assert_not_called()

    def test_installs_each_missing_target(self):
        specs = [HeaderInfo("https://local", "11.0.0"), HeaderInfo("https://remote", "12.0.0")]
        with patch("headers.installer.subprocess.run") as mock_run:
            count = install_missing_headers("node-gyp.cmd", set(), specs)
        assert count == 2
        assert mock_run.call_args_list == [
            call(["node-gyp.cmd", "install", "--dist-url", "https://local", "11.0.0"], check=True),
            call(["node-gyp.cmd", "install", "--dist-url", "https://remote", "12.0.0"], check=True),
        ]


class TestInstallHeaders:
    """End-to-end behavior of install_headers."""

    def test_only_missing_remote_installed(self, tmp_path):
        _write_rc(tmp_path / ".yarnrc", "https://local/dist", "10.0.0")
        _write_rc(tmp_path / "remote" / ".yarnrc", "https://remote/dist", "12.0.0")
        runner = FakeRunner(list_output="gyp info it worked\n10.0.0\n")
        with patch("headers.installer.subprocess.run", side_effect=runner):
            result = install_headers(str(tmp_path))
        assert not result.failed
        assert runner.installs == [
            [node_gyp_path(str(tmp_path)), "install", "--dist-url", "https://remote/dist", "12.0.0"],
        ]

    def test_yarn_install_runs_in_tool_dir(self, tmp_path):
        runner = FakeRunner()
        with patch("headers.installer.subprocess.run", side_effect=runner):
            install_headers(str(tmp_path))
        cmd, kwargs = runner.calls[0]
        assert cmd == [Constants.YARN_CMD, "install"]
        assert kwargs["cwd"] == tool_dir(str(tmp_path))
        assert tool_dir(str(tmp_path)) == os.path.join(str(tmp_path), "build", "npm", "gyp")

    def test_no_rc_files_means_no_installs(self, tmp_path):
        runner = FakeRunner()
        with patch("headers.installer.subprocess.run", side_effect=runner):
            result = install_headers(str(tmp_path))
        assert not result.failed
        assert runner.installs == []

    def test_yarn_failure_recorded(self, tmp_path):
        _write_rc(tmp_path / ".yarnrc", "https://local/dist", "10.0.0")
        runner = FakeRunner(yarn_returncode=1)
        with patch("headers.installer.subprocess.run", side_effect=runner):
            result = install_headers(str(tmp_path))
        assert result.errors == [Constants.MSG_NODE_GYP_FAILED]
        assert len(runner.calls) == 1

    def test_yarn_missing_recorded(self, tmp_path):
        runner = FakeRunner(yarn_error=FileNotFoundError("yarn.cmd"))
        with patch("headers.installer.subprocess.run", side_effect=runner):
            result = install_headers(str(tmp_path))
        assert result.failed

    def test_list_failure_propagates(self, tmp_path):
        def run(cmd, **kwargs):
            if cmd[0] == Constants.YARN_CMD:
                return MagicMock(returncode=0)
            raise subprocess.CalledProcessError(1, cmd)

        with patch("headers.installer.subprocess.run", side_effect=run):
            with pytest.raises(subprocess.CalledProcessError):
                install_headers(str(tmp_path))
