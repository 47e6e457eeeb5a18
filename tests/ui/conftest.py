"""Shared fixtures for CLI tests."""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep argument processing away from real handlers, log files and config.

    Returns:
        The patched ``setup_logger`` used by the argument parser.
    """
    mock_config = mocker.patch("pathgrammar.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    return mocker.patch("pathgrammar.ui.cli.args.parser.setup_logger")
