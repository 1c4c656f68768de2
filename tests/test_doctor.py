"""Tests for the ``fruitkit doctor`` command (cli/doctor.py).

The network probe is mocked — no internet, no local API required.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from unittest.mock import MagicMock, patch

import httpx
import pytest

from fruitkit.cli import exit_codes
from fruitkit.cli.doctor import (
    _api_check,
    _fruitkit_version_check,
    _os_check,
    _package_check,
    _python_version_check,
    collect_checks,
    run_doctor,
)
from fruitkit.version import __version__

_API_OK = ("fruit API", "http://localhost:3000/api/ -> 200", "[green]OK[/green]")


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestPackageCheck:
    def test_installed_package(self) -> None:
        label, value, status = _package_check("httpx")
        assert label == "httpx"
        assert value == version("httpx")
        assert "OK" in status

    def test_missing_package(self) -> None:
        with patch(
            "fruitkit.cli.doctor.version",
            side_effect=PackageNotFoundError("ghost"),
        ):
            _, value, status = _package_check("ghost")
        assert value == "NOT INSTALLED"
        assert "FAIL" in status


class TestApiCheck:
    def test_reachable(self) -> None:
        with patch("httpx.get", return_value=MagicMock(status_code=200, is_error=False)) as mock_get:
            label, value, status = _api_check()
        assert label == "fruit API"
        assert value.endswith("-> 200")
        assert "OK" in status
        mock_get.assert_called_once_with("http://localhost:3000/api/", timeout=1.0)

    def test_server_error_is_a_warning(self) -> None:
        with patch("httpx.get", return_value=MagicMock(status_code=503, is_error=True)):
            _, value, status = _api_check()
        assert value.endswith("-> 503")
        assert "WARN" in status
        assert "OK" not in status

    def test_unreachable_is_a_warning(self) -> None:
        with patch("httpx.get", side_effect=httpx.ConnectError("refused")):
            _, value, status = _api_check()
        assert "unreachable" in value
        assert "WARN" in status


class TestCollectChecks:
    @patch("fruitkit.cli.doctor._api_check", return_value=_API_OK)
    def test_lists_every_direct_dependency(self, _mock_api: MagicMock) -> None:
        labels = [label for label, _, _ in collect_checks()]
        for distribution in ("httpx", "pydantic", "pydantic-settings", "rich"):
            assert distribution in labels


class TestStaticChecks:
    def test_version_row(self) -> None:
        assert _fruitkit_version_check() == ("fruitkit", __version__, "[green]OK[/green]")

    def test_os_row(self) -> None:
        label, value, status = _os_check()
        assert label == "OS"
        assert value
        assert "OK" in status


# ---------------------------------------------------------------------------
# run_doctor
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("fruitkit.cli.doctor._api_check", return_value=_API_OK)
    def test_all_present_returns_success(
        self, _mock_api: MagicMock, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_doctor() == exit_codes.SUCCESS
        assert "All checks passed" in capsys.readouterr().err

    @patch(
        "fruitkit.cli.doctor._api_check",
        return_value=("fruit API", "unreachable", "[yellow]WARN[/yellow]"),
    )
    def test_api_warning_still_succeeds(self, _mock_api: MagicMock) -> None:
        assert run_doctor() == exit_codes.SUCCESS

    @patch("fruitkit.cli.doctor._api_check", return_value=_API_OK)
    @patch(
        "fruitkit.cli.doctor._python_version_check",
        return_value=("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]"),
    )
    def test_failed_check_returns_general_error(
        self,
        _mock_py: MagicMock,
        _mock_api: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_doctor() == exit_codes.GENERAL_ERROR
        assert "Some checks failed" in capsys.readouterr().err
