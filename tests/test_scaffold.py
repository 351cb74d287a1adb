"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* The CLI routes every sub-command.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

import twoptr
from twoptr import __version__
from twoptr.cli import exit_codes
from twoptr.cli.app import cli, main
from twoptr.exceptions import (
    DemoSelectionError,
    EnvironmentError,
    InvalidPositionError,
    TwoptrError,
    UnknownAlgorithmError,
)


# ---------------------------------------------------------------------------
# Version / public API
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestPublicApi:
    @pytest.mark.parametrize(
        "name",
        ["find_zero_sum_triplets", "remove_nth_from_end", "is_palindrome", "ListNode"],
    )
    def test_exported_from_root(self, name: str) -> None:
        assert name in twoptr.__all__
        assert hasattr(twoptr, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidPositionError,
            UnknownAlgorithmError,
            DemoSelectionError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TwoptrError]
    ) -> None:
        assert issubclass(exc_class, TwoptrError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TwoptrError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TwoptrError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = TwoptrError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage" in capsys.readouterr().out.lower()

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("twoptr.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        code = main(["doctor"])
        assert code == exit_codes.SUCCESS

    @patch("twoptr.cli.demo.run_demo", return_value=exit_codes.SUCCESS)
    def test_demo_dispatches_with_algorithm(self, mock_demo: object) -> None:
        code = main(["demo", "palindrome"])
        assert code == exit_codes.SUCCESS
        mock_demo.assert_called_once_with("palindrome")  # type: ignore[attr-defined]

    def test_demo_rejects_unknown_algorithm(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["demo", "bubble-sort"])
        assert exc_info.value.code == 2

    def test_non_integer_value_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["three-sum", "1", "two", "3"])
        assert exc_info.value.code == 2


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli(self, monkeypatch: pytest.MonkeyPatch, error: BaseException) -> int:
        from twoptr.cli import app as app_module

        def _raise(argv: list[str] | None = None) -> int:
            raise error

        monkeypatch.setattr(app_module, "main", _raise)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return int(exc_info.value.code)  # type: ignore[arg-type]

    def test_twoptr_error_maps_to_general_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(
            monkeypatch, InvalidPositionError("Position 9 is too large.", hint="Use 1..5"),
        )
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Position 9 is too large." in err
        assert "Use 1..5" in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        code = self._run_cli(monkeypatch, KeyboardInterrupt())
        assert code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(monkeypatch, RuntimeError("kaboom"))
        assert code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError" in capsys.readouterr().err

    def test_success_exits_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["twoptr", "palindrome", "abba"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
