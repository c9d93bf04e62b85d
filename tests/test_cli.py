"""Unit tests for bypassh.cli."""

import json
import sys
from unittest.mock import MagicMock, patch

import pytest

from bypassh import __version__
from bypassh.cli import entrypoint, main
from bypassh.config import ConfigParseError
from bypassh.models import DEFAULT_CONFIG, BypasshConfig
from bypassh.proxy import SpawnError


def _cli_patches(**overrides):
    """Return a patch.multiple context with standard defaults plus overrides."""
    defaults = dict(
        load_config=MagicMock(return_value=(DEFAULT_CONFIG, None)),
        ProcessProxy=MagicMock(),
    )
    defaults.update(overrides)
    return patch.multiple("bypassh.cli.app", **defaults)


def _proxy_returning(code: int) -> MagicMock:
    proxy_cls = MagicMock()
    proxy_cls.return_value.run.return_value = code
    return proxy_cls


# ---------------------------------------------------------------------------
# Fast paths
# ---------------------------------------------------------------------------


class TestFastPaths:
    def test_version_prints_banner_without_spawning(self, capsys):
        proxy_cls = MagicMock()
        with _cli_patches(ProcessProxy=proxy_cls):
            assert main(["-V"]) == 0

        out = capsys.readouterr().out
        assert f"bypassh {__version__}" in out
        assert "OpenSSH" in out
        proxy_cls.assert_not_called()

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_prints_usage(self, capsys, flag):
        with _cli_patches():
            assert main([flag], prog="ssh.exe") == 0

        out = capsys.readouterr().out
        assert out.startswith("Usage: ssh.exe [-options...] destination [command]")
        assert '"ssh_path": "/usr/bin/ssh"' in out
        assert "C:\\\\Windows\\\\system32\\\\wsl.exe" in out

    def test_print_config_outputs_tab_indented_json(self, capsys):
        config = BypasshConfig(distro="Debian")
        with _cli_patches(load_config=MagicMock(return_value=(config, None))):
            assert main(["-P"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("config: {\n\t\"distro\": \"Debian\"")
        assert json.loads(out[len("config: "):]) == config.model_dump()
        assert "parse error" not in out

    def test_print_config_reports_parse_error(self, capsys):
        error = ConfigParseError("cannot read bypassh.json: No such file or directory")
        with _cli_patches(load_config=MagicMock(return_value=(DEFAULT_CONFIG, error))):
            assert main(["-P"]) == 0

        out = capsys.readouterr().out
        assert "parse error: cannot read bypassh.json" in out

    def test_flags_after_first_argument_are_forwarded(self):
        proxy_cls = _proxy_returning(0)
        with _cli_patches(ProcessProxy=proxy_cls):
            main(["host", "-V"])

        argv = proxy_cls.return_value.run.call_args[0][1]
        assert argv[-2:] == ["host", "-V"]


# ---------------------------------------------------------------------------
# Proxying
# ---------------------------------------------------------------------------


class TestProxying:
    def test_builds_wsl_command_line_with_translated_args(self):
        proxy_cls = _proxy_returning(0)
        with _cli_patches(ProcessProxy=proxy_cls):
            main(["-F", "C:\\Users\\me\\.ssh\\config", "host"])

        executable, argv = proxy_cls.return_value.run.call_args[0]
        assert executable == DEFAULT_CONFIG.wsl_path
        assert argv == [
            DEFAULT_CONFIG.wsl_path,
            "-d",
            "Ubuntu",
            "/usr/bin/ssh",
            "-F",
            "/mnt/c/Users/me/.ssh/config",
            "host",
        ]

    def test_uses_configured_distro_for_share_paths(self):
        config = BypasshConfig(distro="Debian", ssh_path="/opt/ssh")
        proxy_cls = _proxy_returning(0)
        with _cli_patches(
            load_config=MagicMock(return_value=(config, None)), ProcessProxy=proxy_cls
        ):
            main(["-i\\\\wsl$\\Debian\\home\\me\\id", "host"])

        argv = proxy_cls.return_value.run.call_args[0][1]
        assert argv[1:] == ["-d", "Debian", "/opt/ssh", "-i/home/me/id", "host"]

    def test_returns_child_exit_code(self):
        with _cli_patches(ProcessProxy=_proxy_returning(42)):
            assert main(["host"]) == 42

    def test_config_error_still_proxies_with_defaults(self):
        error = ConfigParseError("invalid bypassh.json")
        proxy_cls = _proxy_returning(0)
        with _cli_patches(
            load_config=MagicMock(return_value=(DEFAULT_CONFIG, error)), ProcessProxy=proxy_cls
        ):
            assert main(["host"]) == 0

        proxy_cls.return_value.run.assert_called_once()

    def test_spawn_error_returns_one_and_prints_error(self, capsys):
        proxy_cls = MagicMock()
        proxy_cls.return_value.run.side_effect = SpawnError("failed to start wsl.exe")
        with _cli_patches(ProcessProxy=proxy_cls):
            assert main(["host"]) == 1

        assert "Error: failed to start wsl.exe" in capsys.readouterr().err

    def test_nonexistent_launcher_end_to_end(self, tmp_path, capsys):
        missing = str(tmp_path / "wsl.exe")
        config = BypasshConfig(wsl_path=missing)
        with patch("bypassh.cli.app.load_config", return_value=(config, None)):
            assert main(["host"]) == 1

        assert "Error: failed to start" in capsys.readouterr().err

    def test_child_exit_code_end_to_end(self):
        # python stands in for wsl.exe: "-d" is a no-op flag, "-c" runs the code.
        config = BypasshConfig(
            wsl_path=sys.executable, distro="-c", ssh_path="import sys; sys.exit(42)"
        )
        with patch("bypassh.cli.app.load_config", return_value=(config, None)):
            assert main(["host"]) == 42


class TestEntrypoint:
    def test_entrypoint_exits_with_main_result(self):
        with patch("bypassh.cli.app.main", return_value=5):
            with pytest.raises(SystemExit) as exc_info:
                entrypoint()

        assert exc_info.value.code == 5
