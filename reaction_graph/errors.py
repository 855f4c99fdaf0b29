from __future__ import annotations


class GraphDataError(ValueError):
    """Raised when chart input cannot be turned into curve geometry."""
