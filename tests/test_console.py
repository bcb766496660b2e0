import argparse

import httpx
import pytest

from unittest.mock import Mock, patch

from app.client import console
from app.client.console import ConsoleClient, wait_for_server_start


def _console(client, answers):
    """Helper: console client fed with scripted answers"""

    answers = iter(answers)
    return ConsoleClient(client, input_func=lambda prompt: next(answers))


def test_exit_immediately(client, capsys):
    _console(client, ["8"]).run()

    assert "Goodbye" in capsys.readouterr().out


def test_invalid_option(client, capsys):
    _console(client, ["x", "8"]).run()

    assert "Invalid option" in capsys.readouterr().out


def test_add_and_list_orders(client, store, capsys):
    _console(client, ["3", "1", "2", "5", "1", "8"]).run()

    out = capsys.readouterr().out
    assert "added successfully" in out
    assert "Orders for table 1" in out
    assert "Bread" in out
    assert store.count_items(1) == 1


def test_remove_not_ordered(client, capsys):
    _console(client, ["4", "1", "1", "8"]).run()

    out = capsys.readouterr().out
    assert "Remove menu item failed (409)" in out


def test_reprompt_on_bad_id(client, store, capsys):
    """Non-numeric input is asked again instead of crashing"""

    _console(client, ["3", "one", "1", "1", "8"]).run()

    assert "Please enter a positive integer." in capsys.readouterr().out
    assert store.count_items(1) == 1


def test_menus_and_tables(client, capsys):
    _console(client, ["1", "2", "8"]).run()

    out = capsys.readouterr().out
    assert "Soup" in out
    assert "Tables: [1, 2]" in out


def test_simulation_rejects_too_many_tables(client, capsys):
    _console(client, ["7", "500", "8"]).run()

    assert "maximum number of tables" in capsys.readouterr().out


def test_simulation_rejects_zero_tables(client, capsys):
    """Zero tables is reported and the loop keeps going"""

    _console(client, ["7", "0", "8"]).run()

    out = capsys.readouterr().out
    assert "at least one table" in out
    assert "Goodbye" in out


def test_request_errors_do_not_stop_loop(capsys):
    failing = Mock()
    failing.get.side_effect = httpx.ConnectError("refused")

    _console(failing, ["2", "8"]).run()

    out = capsys.readouterr().out
    assert "Request failed" in out
    assert "Goodbye" in out


# ========== server bootstrap ==========

def test_wait_for_server_start_ready():
    with patch("httpx.get", Mock(return_value=Mock(status_code=200))), \
            patch("time.sleep") as sleep:
        assert wait_for_server_start("http://127.0.0.1:1", retries=3)
        sleep.assert_not_called()


def test_wait_for_server_start_gives_up():
    get = Mock(side_effect=httpx.ConnectError("refused"))

    with patch("httpx.get", get), patch("time.sleep") as sleep:
        assert not wait_for_server_start("http://127.0.0.1:1", retries=3)

    assert get.call_count == 3
    assert sleep.call_count == 3


def test_main_exits_when_server_fails(capsys):
    args = argparse.Namespace(host="127.0.0.1", port=1)

    with patch.object(console, "parse_cli_args", Mock(return_value=args)), \
            patch.object(console, "start_server_in_thread") as start, \
            patch.object(console, "wait_for_server_start", Mock(return_value=False)):
        with pytest.raises(SystemExit, match="1"):
            console.main()

    start.assert_called_with("127.0.0.1", 1)
    assert "failed to start" in capsys.readouterr().err
