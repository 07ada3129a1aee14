"""Logger state shared by the gitlab_release logging package.

Holds the queue and listener behind the single ``gitlab_release`` root
logger so setup runs exactly once per process.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock guarding root logger initialization
        root_initialized: Whether the root logger has been set up
        queue_listener: Background thread draining the log queue
        log_queue: Queue the root QueueHandler writes to

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton."""
    return _state
