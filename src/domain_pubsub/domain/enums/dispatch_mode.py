"""Dispatch mode enum.

Read from the subscription file: each (domain, event) entry declares whether
the domain's handler runs inline or is handed to the async job backend.
"""

from enum import Enum


class DispatchMode(str, Enum):
    """How a subscribed handler is executed.

    Values:
        SYNC: Awaited inline by the dispatcher, failures reach the emitter.
        ASYNC: Handed off to the job backend, failures stay in the backend.
    """

    SYNC = "sync"
    ASYNC = "async"
