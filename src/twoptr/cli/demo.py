"""``twoptr demo`` — replay the canned samples of one algorithm.

This module is responsible for:

* Prompting the user to pick an algorithm via questionary arrow keys
  (only when none was given on the command line).
* Rendering a Rich table of sample inputs and outputs.

The samples themselves come from :mod:`twoptr.core.samples`; nothing in
here computes a result.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from twoptr.cli import exit_codes
from twoptr.cli.console import output
from twoptr.core.samples import ALGORITHM_TITLES, ALGORITHMS, SampleResult, run_samples
from twoptr.exceptions import DemoSelectionError, EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install 'twoptr[ui]'",
            hint="Or name the algorithm directly, e.g. `twoptr demo three-sum`.",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for sample rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install 'twoptr[ui]'",
        ) from exc
    return Table


def _escape(text: str) -> str:
    """Escape Rich markup in user-visible sample text."""
    from rich.markup import escape

    return escape(text)


def _build_choice_label(index: int, algorithm: str) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  1.  three-sum    Zero-sum triplets"``
    """
    return f"  {index + 1}.  {algorithm:<12} {ALGORITHM_TITLES[algorithm]}"


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def _display_sample_table(
    algorithm: str,
    results: Sequence[SampleResult],
) -> None:
    """Print a Rich table of replayed samples to stdout."""
    table_class = _import_rich_table()

    table = table_class(
        title=ALGORITHM_TITLES[algorithm],
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Input", justify="left", overflow="fold")
    table.add_column("Output", justify="left", overflow="fold")

    for i, sample in enumerate(results, start=1):
        table.add_row(str(i), _escape(sample.arguments), _escape(sample.result))

    output.print(table)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def prompt_algorithm_selection() -> str:
    """Prompt the user to choose one of :data:`ALGORITHMS`.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    DemoSelectionError
        If the user cancels the prompt (Esc / None return).
    """
    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_choice_label(i, name), value=name)
        for i, name in enumerate(ALGORITHMS)
    ]

    selected: str | None = questionary.select(
        "Select an algorithm to demo:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise DemoSelectionError(
            "No algorithm selected.",
            hint="Use arrow keys to pick an algorithm, then press Enter.",
        )

    return selected


def run_demo(algorithm: str | None = None) -> int:
    """Replay and render the samples of *algorithm* (prompting if ``None``)."""
    if algorithm is None:
        algorithm = prompt_algorithm_selection()

    results = run_samples(algorithm)
    _display_sample_table(algorithm, results)
    return exit_codes.SUCCESS
