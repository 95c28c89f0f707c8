"""
Thin adapters over the shared generator core

- serverless: function-runtime event handler
- local: offline in-process fallback
"""

from .serverless import handler, handle_event
from .local import synthesize_local_batch, generate_local

__all__ = [
    "handler",
    "handle_event",
    "synthesize_local_batch",
    "generate_local",
]
