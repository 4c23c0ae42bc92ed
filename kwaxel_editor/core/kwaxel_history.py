#!/usr/bin/env python3
"""
Snapshot-based undo/redo history for the Kwaxel editor.

Every entry is a full, independent copy of the pixel buffer taken before a
mutation. The grid is small (32x32 x 4 bytes = 4 KiB per snapshot), so whole
snapshots keep restore trivially exact.
"""

# Standard library imports
from typing import Any

from .kwaxel_constants import MAX_HISTORY
from .kwaxel_models import PixelBuffer
from .kwaxel_utils import debug_log


class HistoryManager:
    """Manages the undo and redo stacks.

    The undo stack holds the most recent pre-mutation snapshots (newest last)
    up to max_entries; the oldest are evicted first. The redo stack holds
    states displaced by undo (next redo first) and is cleared whenever a new
    mutation begins.
    """

    def __init__(self, max_entries: int = MAX_HISTORY) -> None:
        """Initialize the history manager.

        Args:
            max_entries: Maximum number of undo snapshots to retain
        """
        if max_entries < 1:
            raise ValueError("History must hold at least one entry")
        self.max_entries: int = max_entries
        self.undo_stack: list[PixelBuffer] = []
        self.redo_stack: list[PixelBuffer] = []

    def _push_undo(self, buffer: PixelBuffer) -> None:
        self.undo_stack.append(buffer.clone())
        if len(self.undo_stack) > self.max_entries:
            self.undo_stack.pop(0)
            debug_log("HISTORY", "History cap reached, oldest snapshot evicted", "DEBUG")

    def begin_mutation(self, current: PixelBuffer) -> None:
        """Snapshot the buffer before a paint session or import.

        Args:
            current: The buffer about to be replaced
        """
        self._push_undo(current)
        self.redo_stack.clear()

    def undo(self, current: PixelBuffer) -> PixelBuffer:
        """Step back one snapshot.

        Args:
            current: The buffer currently shown

        Returns:
            The restored buffer, or current itself if there is nothing to undo
        """
        if not self.undo_stack:
            return current
        self.redo_stack.insert(0, current.clone())
        return self.undo_stack.pop()

    def redo(self, current: PixelBuffer) -> PixelBuffer:
        """Re-apply the most recently undone state.

        Args:
            current: The buffer currently shown

        Returns:
            The restored buffer, or current itself if there is nothing to redo
        """
        if not self.redo_stack:
            return current
        self._push_undo(current)
        return self.redo_stack.pop(0)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def undo_count(self) -> int:
        return len(self.undo_stack)

    @property
    def redo_count(self) -> int:
        return len(self.redo_stack)

    def clear(self) -> None:
        """Clear all undo/redo history."""
        self.undo_stack.clear()
        self.redo_stack.clear()

    def get_memory_usage(self) -> dict[str, Any]:
        """Get current memory usage statistics."""
        total = sum(entry.data.nbytes for entry in self.undo_stack + self.redo_stack)
        return {
            "total_bytes": total,
            "undo_count": self.undo_count,
            "redo_count": self.redo_count,
            "can_undo": self.can_undo,
            "can_redo": self.can_redo,
        }
