"""Reconciliation of declared registration entries with the registry."""

from __future__ import annotations

from .entries import EntryOperation, EntryReconciler

__all__ = ["EntryOperation", "EntryReconciler"]
