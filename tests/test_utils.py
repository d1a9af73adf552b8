"""Tests for utility functions."""

import pytest
import os
import logging
from unittest.mock import patch, MagicMock

from gameprefs.utils import (
    setup_logging, log_exception, get_logger, clamp, make_directory, init_dirs, Dirs
)


class TestLoggingSetup:
    """Test logging setup functions."""
    
    def test_setup_logging_default(self):
        """Test basic logging setup."""
        logger = setup_logging()
        
        assert logger.name == "gameprefs"
        assert logger.level == logging.INFO
        assert len(logger.handlers) > 0
    
    def test_setup_logging_with_level(self):
        """Test logging setup with custom level."""
        logger = setup_logging(level="DEBUG")
        
        assert logger.level == logging.DEBUG
    
    def test_setup_logging_with_file(self, tmp_path):
        """Test logging setup with file handler."""
        log_file = str(tmp_path / "gameprefs.log")
        logger = setup_logging(log_file=log_file)
        
        try:
            # Should have both console and file handlers
            handler_types = [type(h).__name__ for h in logger.handlers]
            assert 'StreamHandler' in handler_types
            assert 'FileHandler' in handler_types
            
            # Test that logging to file works
            logger.info("Test message")
            
            with open(log_file, 'r') as f:
                content = f.read()
                assert "Test message" in content
                assert "gameprefs - INFO" in content
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
    
    def test_setup_logging_replaces_handlers(self):
        """Calling setup twice does not duplicate handlers."""
        setup_logging()
        logger = setup_logging()
        
        assert len(logger.handlers) == 1
    
    def test_get_logger(self):
        """Test logger retrieval."""
        logger = get_logger("test_module")
        
        assert logger.name == "test_module"
        assert isinstance(logger, logging.Logger)
    
    def test_log_exception(self):
        """Test exception logging."""
        test_exception = ValueError("Test error")
        mock_logger = MagicMock()
        
        log_exception(test_exception, "test_context", logger=mock_logger)
        
        # Message at error level, traceback at debug level
        mock_logger.error.assert_called_once()
        mock_logger.debug.assert_called_once()
        first_call_args = mock_logger.error.call_args_list[0][0][0]
        assert "test_context" in first_call_args
        assert "ValueError" in first_call_args
    
    def test_log_exception_default_logger(self):
        """Test exception logging falls back to the package logger."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger
            
            log_exception(OSError("disk full"), "saving")
            
            mock_get_logger.assert_called_with("gameprefs")
            assert "disk full" in mock_logger.error.call_args[0][0]


class TestUtilityFunctions:
    """Test general utility functions."""
    
    def test_clamp_within_range(self):
        """Test clamping values within range."""
        assert clamp(5, 0, 10) == 5
        assert clamp(0, 0, 10) == 0
        assert clamp(10, 0, 10) == 10
    
    def test_clamp_below_range(self):
        """Test clamping values below range."""
        assert clamp(-5, 0, 10) == 0
        assert clamp(-1, 0, 10) == 0
    
    def test_clamp_above_range(self):
        """Test clamping values above range."""
        assert clamp(15, 0, 10) == 10
        assert clamp(100, 0, 10) == 10
    
    def test_clamp_open_bounds(self):
        """Test clamping with a missing bound."""
        assert clamp(10000, 512, None) == 10000
        assert clamp(100, 512, None) == 512
        assert clamp(-100, None, 3) == -100
        assert clamp(7, None, None) == 7


class TestDirectories:
    """Test directory bootstrap."""
    
    def test_dirs_layout(self):
        dirs = Dirs.under("base")
        assert dirs.worlds == os.path.join("base", "worlds")
        assert dirs.video == os.path.join("base", "screenshots", "rapid-screenshots")
    
    def test_init_dirs_creates_everything(self, tmp_path):
        base = str(tmp_path / "client")
        dirs = init_dirs(base)
        
        for path in (dirs.base, dirs.worlds, dirs.screenshots, dirs.video,
                     dirs.replay, dirs.mods, dirs.speedrun, dirs.bank):
            assert os.path.isdir(path)
    
    def test_init_dirs_is_repeatable(self, tmp_path):
        base = str(tmp_path)
        init_dirs(base)
        init_dirs(base)
        assert os.path.isdir(os.path.join(base, "worlds"))
    
    def test_make_directory_replaces_file(self, tmp_path):
        path = tmp_path / "replay"
        path.write_text("not a folder")
        
        make_directory(str(path))
        
        assert path.is_dir()
    
    def test_init_dirs_warns_on_failure(self, tmp_path, caplog):
        with patch("gameprefs.utils.make_directory", side_effect=[str(tmp_path)] + [OSError("denied")] * 7):
            with caplog.at_level(logging.WARNING, logger="gameprefs.utils"):
                init_dirs(str(tmp_path))
        
        assert caplog.text.count("Could not create directory") == 7
