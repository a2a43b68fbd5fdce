"""Shared helpers for the journal-portal selection widgets."""

from jp_common.api import JPError, configure_logging

__all__ = ["configure_logging", "JPError"]
