"""``twoptr doctor`` — installation diagnostics.

Three kinds of rows:

* the interpreter (FAIL below Python 3.10),
* the optional ``ui`` extra (WARN when rich or questionary is missing;
  only ``demo`` and coloured output need them),
* a self-test per algorithm that replays its first canned sample and
  compares it with the known answer (FAIL on mismatch).
"""

from __future__ import annotations

import importlib.util
import platform
import sys
from dataclasses import dataclass

from twoptr.cli import exit_codes
from twoptr.cli.console import console
from twoptr.core.samples import PALINDROME, REMOVE_NTH, THREE_SUM, run_samples
from twoptr.version import __version__

OK: str = "OK"
WARN: str = "WARN"
FAIL: str = "FAIL"

_STATUS_STYLE: dict[str, str] = {OK: "green", WARN: "yellow", FAIL: "red"}

_EXPECTED_FIRST_SAMPLE: dict[str, str] = {
    THREE_SUM: "[[-1, -1, 2], [-1, 0, 1]]",
    REMOVE_NTH: "1 -> 2 -> 3 -> 5 -> nil",
    PALINDROME: "true",
}


@dataclass(frozen=True, slots=True)
class CheckResult:
    """One row of the doctor report."""

    label: str
    value: str
    status: str
    """One of :data:`OK`, :data:`WARN`, :data:`FAIL`."""


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def check_python() -> CheckResult:
    ok = sys.version_info[:2] >= (3, 10)
    return CheckResult(
        "Python",
        platform.python_version(),
        OK if ok else FAIL,
    )


def check_ui_package(module: str) -> CheckResult:
    """Report whether *module* from the ``ui`` extra is importable."""
    try:
        found = importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        found = False
    if found:
        return CheckResult(module, "installed", OK)
    return CheckResult(module, "missing (pip install 'twoptr[ui]')", WARN)


def check_algorithm(algorithm: str) -> CheckResult:
    """Replay the first sample of *algorithm* against its known answer."""
    got = run_samples(algorithm)[0].result
    expected = _EXPECTED_FIRST_SAMPLE[algorithm]
    if got == expected:
        return CheckResult(f"self-test {algorithm}", got, OK)
    return CheckResult(f"self-test {algorithm}", f"{got} (expected {expected})", FAIL)


def collect_checks() -> list[CheckResult]:
    return [
        check_python(),
        check_ui_package("rich"),
        check_ui_package("questionary"),
        *(check_algorithm(name) for name in _EXPECTED_FIRST_SAMPLE),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_plain(checks: list[CheckResult]) -> None:
    width = max(len(c.label) for c in checks) + 2
    print(f"\ntwoptr {__version__} doctor", file=sys.stderr)
    for check in checks:
        print(f"  {check.status:<5} {check.label:<{width}} {check.value}", file=sys.stderr)
    print(file=sys.stderr)


def _render_rich(checks: list[CheckResult]) -> None:
    from rich.markup import escape
    from rich.table import Table

    table = Table(title=f"twoptr {__version__} doctor", border_style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Check", style="bold")
    table.add_column("Value")
    for check in checks:
        style = _STATUS_STYLE[check.status]
        table.add_row(f"[{style}]{check.status}[/{style}]", check.label, escape(check.value))
    console.print(table)


def run_doctor() -> int:
    """Run every check, render the report, and return an exit code.

    Returns :data:`exit_codes.GENERAL_ERROR` if any check failed.
    """
    checks = collect_checks()
    rich_ok = any(c.label == "rich" and c.status == OK for c in checks)

    if rich_ok:
        _render_rich(checks)
    else:
        _render_plain(checks)

    failed = [c.label for c in checks if c.status == FAIL]
    if failed:
        console.print(f"[bold red]Failed:[/bold red] {', '.join(failed)}")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
