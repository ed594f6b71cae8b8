"""
Core type definitions for printbuf.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Capabilities
# ============================================================================


@typing.runtime_checkable
class Describable(typing.Protocol):
    """Anything that can describe a failure as plain text."""

    def text(self) -> str: ...


# ============================================================================
# Type aliases
# ============================================================================

# FailureFactory = zero-arg callable producing a fresh failure
type FailureFactory[F] = Callable[[], F]

__all__ = (
    "Describable",
    "FailureFactory",
)
