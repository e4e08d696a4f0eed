import logging
from typing import Iterator

import pytest
from click.testing import CliRunner

from node_observer.node_observer import demo


@pytest.fixture(autouse=True)
def restore_package_log_level() -> Iterator[None]:
    package_logger = logging.getLogger(demo.PACKAGE_LOGGER)
    level = package_logger.level
    yield
    package_logger.setLevel(level)


def test_demo_runs_all_demonstrations() -> None:
    result = CliRunner().invoke(demo.main, [])

    assert result.exit_code == 0
    assert "Visited nodes: [10, 20, 30, 40, 50]" in result.output
    assert "Calculator sum: 15" in result.output
    assert "Statistics: Count=5, Sum=15, Min=1, Max=5, Avg=3.00" in result.output
    assert "Visited nodes: []" in result.output
    assert "Second run - Visited: [100, 200, 300]" in result.output
    assert "Correctly caught error for None sequence: Sequence cannot be None" in result.output
    assert "Correctly caught error for None listener: Listener cannot be None" in result.output
    assert "All demonstrations completed successfully!" in result.output


def test_demo_verbose_flag_logs_visits(caplog: pytest.LogCaptureFixture) -> None:
    result = CliRunner().invoke(demo.main, ["--verbose"])

    assert result.exit_code == 0
    messages = [record.getMessage() for record in caplog.records]
    assert "BasicListener visited node: 10" in messages
    assert "Navigating 5 values." in messages
    assert "Navigation finished." in messages


def test_demo_quiet_by_default(caplog: pytest.LogCaptureFixture) -> None:
    result = CliRunner().invoke(demo.main, [])

    assert result.exit_code == 0
    assert not [r for r in caplog.records if r.levelno < logging.WARNING]


def test_demo_reports_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken() -> None:
        raise RuntimeError("demo-broke")

    monkeypatch.setattr(demo, "DEMONSTRATIONS", [broken])

    assert demo.run_demonstrations() == 1
