"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators (Elasticsearch, CloudWatch Insights)

Event Naming Convention:
    <component>.<category>.<action>

    component: index, lookup, batch, records, error
    category: built, resolved, completed
    action: success, failed

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.unmatched
    | filter event = "batch.completed"
    | stats sum(metadata.size) by bin(5m)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - index.*: Region index construction
    - lookup.*: Single-point lookups
    - batch.*: Batch lookups
    - records.*: Record ingestion
    - error.*: Error conditions
    """

    # ========== Index Events ==========
    INDEX_LOADING = "index.loading"
    """Started reading region geometry."""

    INDEX_BUILT = "index.built"
    """Region index constructed and ready for queries."""

    # ========== Lookup Events ==========
    LOOKUP_RESOLVED = "lookup.resolved"
    """Single point resolved to a region."""

    LOOKUP_NO_MATCH = "lookup.no_match"
    """Single point outside every region."""

    # ========== Batch Events ==========
    BATCH_STARTED = "batch.started"
    """Batch lookup submitted to the worker pool."""

    BATCH_COMPLETED = "batch.completed"
    """Batch lookup finished (all elements resolved)."""

    # ========== Record Events ==========
    RECORDS_LOADED = "records.loaded"
    """Record source decoded."""

    RECORDS_WRITTEN = "records.written"
    """Lookup results written to output."""

    # ========== Error Events ==========
    GEOMETRY_ERROR = "error.geometry"
    """Region geometry failed validation."""

    RECORD_DECODE_ERROR = "error.record_decode"
    """A record row could not be decoded."""

    CONFIG_ERROR = "error.config"
    """Configuration failed validation."""
