import logging

import pytest

from fruitcatch import __main__ as cli
from fruitcatch.run_terminal import EXIT_FAILURE


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.seed is None
    assert args.log_level == "WARNING"
    assert args.log_file is None
    assert args.poll_interval == pytest.approx(0.001)


def test_parse_args_rejects_unknown_level():
    with pytest.raises(SystemExit):
        cli.parse_args(["--log-level", "LOUD"])


def test_main_returns_runner_status(monkeypatch):
    seen = {}

    class StubRunner:
        def __init__(self, *, state, poll_interval):
            seen["state"] = state
            seen["poll"] = poll_interval

        def run(self):
            return EXIT_FAILURE

    monkeypatch.setattr(cli, "GameRunner", StubRunner)
    monkeypatch.setattr(cli, "configure_logging", lambda *_args: None)
    assert cli.main(["--seed", "3", "--poll-interval", "0"]) == EXIT_FAILURE
    assert seen["poll"] == 0
    assert seen["state"].running


def test_main_reports_interrupt(monkeypatch):
    class InterruptedRunner:
        def __init__(self, **_kwargs):
            pass

        def run(self):
            raise KeyboardInterrupt

    monkeypatch.setattr(cli, "GameRunner", InterruptedRunner)
    monkeypatch.setattr(cli, "configure_logging", lambda *_args: None)
    assert cli.main([]) == cli.EXIT_INTERRUPTED


def test_configure_logging_to_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    path = tmp_path / "fruit.log"
    try:
        cli.configure_logging("DEBUG", str(path))
        logging.getLogger("fruitcatch.test").debug("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in path.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(level)
