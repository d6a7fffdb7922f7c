"""
Logging System for the Symbolic Algebra Engine

Centralized, level-gated logging so library calls stay quiet by default
while build/simplify/derive activity can be traced when needed.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the expression engine"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Warnings
    MODERATE = 2    # Key milestones
    DETAILED = 3    # SymPy simplification summaries
    VERBOSE = 4     # All information including debug details


class SymbolicAlgebraLogger:
    """
    Centralized logger for the expression engine with level-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('symbolic_algebra')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove any existing handlers

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_algebra_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def is_enabled(self, required_level: LogLevel) -> bool:
        return self._should_log(required_level)

    def milestone(self, message: str):
        """Important milestones - shown from moderate level onwards"""
        if self._should_log(LogLevel.MODERATE):
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def operation_summary(self, operation: str, details: Dict[str, Any]):
        """Log a per-operation summary table"""
        if not self._should_log(LogLevel.DETAILED):
            return

        self.logger.info(f"{operation.upper()}:")
        for key, value in details.items():
            if isinstance(value, float):
                self.logger.info(f"  {key:.<30} {value:.6f}")
            else:
                self.logger.info(f"  {key:.<30} {value}")


# Global logger instance
_global_logger: Optional[SymbolicAlgebraLogger] = None


def get_logger() -> SymbolicAlgebraLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicAlgebraLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicAlgebraLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SymbolicAlgebraLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = SymbolicAlgebraLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_milestone(message: str):
    """Log milestone message"""
    get_logger().milestone(message)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
