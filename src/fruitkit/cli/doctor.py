"""``fruitkit doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies fruitkit's requirements.
No business logic resides here; it purely collects and displays
diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from rich.table import Table

from fruitkit.cli import exit_codes
from fruitkit.cli.console import console
from fruitkit.core.fruit_service import build_fruit_url
from fruitkit.version import __version__

_API_PROBE_TIMEOUT_SECONDS: float = 1.0


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    value = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", value, status


def _package_check(distribution: str) -> tuple[str, str, str]:
    """Return (label, value, status) for an installed distribution."""
    try:
        return distribution, version(distribution), "[green]OK[/green]"
    except PackageNotFoundError:
        return distribution, "NOT INSTALLED", "[red]FAIL[/red]"


def _api_check() -> tuple[str, str, str]:
    """Probe the local fruit API.  Unreachable is a warning, not a failure."""
    import httpx

    url = build_fruit_url("")
    try:
        response = httpx.get(url, timeout=_API_PROBE_TIMEOUT_SECONDS)
    except httpx.HTTPError:
        return "fruit API", f"{url} unreachable", "[yellow]WARN[/yellow]"
    if response.is_error:
        return "fruit API", f"{url} -> {response.status_code}", "[yellow]WARN[/yellow]"
    return "fruit API", f"{url} -> {response.status_code}", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _fruitkit_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the fruitkit version row."""
    return "fruitkit", __version__, "[green]OK[/green]"


def collect_checks() -> list[tuple[str, str, str]]:
    """Run every diagnostic and return the rows in display order."""
    return [
        _fruitkit_version_check(),
        _python_version_check(),
        _package_check("httpx"),
        _package_check("pydantic"),
        _package_check("pydantic-settings"),
        _package_check("rich"),
        _os_check(),
        _api_check(),
    ]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    table = Table(
        title="fruitkit doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
