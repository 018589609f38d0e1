"""
Structured Logging for County Lookup
====================================

Bounded Context: Observability

JSON-structured logging for index construction and batch lookups.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from county_processor.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="service")
    >>> logger.info(
    ...     event=LogEvent.BATCH_COMPLETED,
    ...     message="Resolved 3 points",
    ...     metadata={'size': 3, 'unmatched': 1}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
