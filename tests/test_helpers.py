"""Unit tests for helper functions."""

import logging
import unittest
from unittest.mock import patch

from rich.logging import RichHandler

from camrig.helpers import setup_logging


class TestSetupLogging(unittest.TestCase):
    """Test setup_logging."""

    def test_configures_rich_handler(self) -> None:
        """Test that the root logger gets a RichHandler at the requested level."""
        with patch("camrig.helpers.logging.basicConfig") as basic_config:
            setup_logging("info")

        basic_config.assert_called_once()
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.INFO
        assert len(kwargs["handlers"]) == 1
        assert isinstance(kwargs["handlers"][0], RichHandler)
