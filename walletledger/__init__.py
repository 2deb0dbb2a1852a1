"""Mini README: Core package initializer for the WalletLedger tracker.

This module exposes convenience imports so callers can reach the ledger
store, projections, and the presentation-facing controller without knowing
the exact module structure. Nothing heavy is imported at package level.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
