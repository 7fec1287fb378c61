"""``nix-wrap --doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies nix-wrap's requirements.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from nix_wrap.cli import exit_codes
from nix_wrap.cli.console import console
from nix_wrap.core.cache_key import default_defexpr_dir
from nix_wrap.exceptions import NixWrapError
from nix_wrap.infra.filesystem import LocalFileSystem
from nix_wrap.infra.tool_detector import detect_tool, nix_install_commands
from nix_wrap.utils.constants import GIT, NIX_ENV, NIX_SHELL
from nix_wrap.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = major >= 3 and minor >= 10
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(name: str, *, required: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for an executable on PATH.

    A missing *required* tool fails the run; others only warn.
    """
    tool = detect_tool(name)
    if tool.found:
        path_str = str(tool.path) if tool.path else "found"
        return name, path_str, "[green]OK[/green]"
    if required:
        return name, "not found", "[red]FAIL[/red]"
    return name, "not found", "[yellow]WARN[/yellow]"


def _channels_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the ``~/.nix-defexpr`` row."""
    fs = LocalFileSystem()
    try:
        defexpr_dir = default_defexpr_dir(fs)
        present = fs.is_dir(defexpr_dir)
    except NixWrapError as exc:
        return "Channels", str(exc), "[red]FAIL[/red]"
    if present:
        return "Channels", str(defexpr_dir), "[green]OK[/green]"
    return "Channels", f"{defexpr_dir} missing", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _nixwrap_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the nix-wrap version row."""
    return "nix-wrap", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nnix-wrap doctor")
    print("=" * 64)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}")
    print("-" * 64)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<40} {plain_status:<8}")
    print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _nixwrap_version_check(),
        _python_version_check(),
        _tool_check(NIX_ENV, required=True),
        _tool_check(NIX_SHELL, required=False),
        _tool_check(GIT, required=False),
        _channels_check(),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="nix-wrap doctor",
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
    else:
        _print_plain_doctor_table(checks)

    # Show Nix install guidance when nix-env is missing.
    if not detect_tool(NIX_ENV).found:
        commands = nix_install_commands()
        if rich_available:
            console.print("[yellow]Nix is not installed.[/yellow]")
            console.print("Install using:\n")
            for cmd in commands:
                console.print(f"  [bold]{cmd}[/bold]")
            console.print()
        else:
            print("Nix is not installed.")
            print("Install using:\n")
            for cmd in commands:
                print(f"  {cmd}")
            print()

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.")
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.")
    return exit_codes.SUCCESS
