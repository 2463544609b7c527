"""Unit tests for the command-line interface."""

from unittest.mock import AsyncMock, patch

import pytest

from stock_manager.cli import main
from stock_manager.db import ConnectivityResult


class TestDbCheck:
    """Test suite for `stock-manager db check`."""

    def test_success_exits_zero(self, db_env, reachable_engine, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a reachable database returns exit code 0."""
        with patch("stock_manager.cli.initialize", return_value=reachable_engine), patch(
            "stock_manager.cli.verify_connectivity", AsyncMock(return_value=ConnectivityResult(ok=True))
        ):
            exit_code = main(["db", "check"])

        assert exit_code == 0
        assert "Connected to inventory@localhost" in capsys.readouterr().out
        reachable_engine.dispose.assert_awaited_once()

    def test_failure_exits_one(self, db_env, reachable_engine, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an unreachable database returns exit code 1 with the cause."""
        result = ConnectivityResult(ok=False, error=OSError("Connection refused"))
        with patch("stock_manager.cli.initialize", return_value=reachable_engine), patch(
            "stock_manager.cli.verify_connectivity", AsyncMock(return_value=result)
        ):
            exit_code = main(["db", "check"])

        err = capsys.readouterr().err
        assert exit_code == 1
        assert "Connection refused" in err
        assert "secret" not in err
        reachable_engine.dispose.assert_awaited_once()

    def test_missing_configuration_exits_two(
        self, db_env, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test missing variables are reported without touching the database."""
        monkeypatch.delenv("DB_PASSWORD")

        with patch("stock_manager.cli.initialize") as initialize:
            exit_code = main(["db", "check"])

        assert exit_code == 2
        assert "DB_PASSWORD" in capsys.readouterr().err
        initialize.assert_not_called()

    def test_subcommand_required(self) -> None:
        """Test argparse rejects a missing subcommand."""
        with pytest.raises(SystemExit):
            main(["db"])
