"""
Buffered printing for failure messages.

Build failure text incrementally and expose it as a plain string:

- PrintBuf         - lazily created, appendable text buffer
- BufferedFailure  - Exception base class embedding a PrintBuf
- Describable      - protocol for "has failure text"
- lift             - moving buffered failures through kungfu Result
"""

# Core types
from ._types import Describable, FailureFactory

# Accumulator
from .buffer import PrintBuf

# Failures
from .failure import BufferedFailure

# Lift helpers
from . import lift
from .lift import catching, catching_async, describe, fail, fail_async

__all__ = (
    # Types
    "Describable",
    "FailureFactory",
    # Accumulator
    "PrintBuf",
    # Failures
    "BufferedFailure",
    # Lift module (namespace import)
    "lift",
    # Lift functions (direct import)
    "catching",
    "catching_async",
    "describe",
    "fail",
    "fail_async",
)
