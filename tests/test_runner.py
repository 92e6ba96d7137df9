import asyncio
import importlib.util
import logging
import pathlib
import sys
import types
from unittest.mock import AsyncMock

import pytest

from v4hooks.errors import FetchFailedError

RUNNER_PATH = pathlib.Path(__file__).parent.parent / "uniswap-v4-hooks.py"


@pytest.fixture
def runner(monkeypatch, tmp_path):
    config = types.ModuleType("config")
    config.api_key = "key"
    config.chain_id = "1"
    config.request_timeout = None
    config.json_output = str(tmp_path / "hook_tags.json")
    config.csv_output = None
    config.log_file = None
    monkeypatch.setitem(sys.modules, "config", config)

    spec = importlib.util.spec_from_file_location("uniswap_v4_hooks", RUNNER_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    yield module

    logger = logging.getLogger("v4hooks")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_runner_reports_fetch_failure_without_logging_it_again(runner, monkeypatch, caplog, capsys):
    monkeypatch.setattr(runner, "return_tags", AsyncMock(side_effect=FetchFailedError("Failed to fetch data: boom")))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as excinfo:
            asyncio.run(runner.main())

    assert excinfo.value.code == 1
    assert "Hook tag fetch failed: Failed to fetch data: boom" in capsys.readouterr().out
    assert not [r for r in caplog.records if "Hook tag fetch failed" in r.getMessage()]


def test_runner_writes_tags(runner, monkeypatch, tmp_path):
    tags = [{
        "Contract Address": "eip155:1:0x1234567890abcdef",
        "Public Name Tag": "Hook #0",
        "Project Name": "Uniswap v4",
        "UI/Website Link": "https://uniswap.org",
        "Public Note": "Uniswap V4's Hook #0 contract",
    }]
    monkeypatch.setattr(runner, "return_tags", AsyncMock(return_value=tags))

    asyncio.run(runner.main())

    assert (tmp_path / "hook_tags.json").exists()
