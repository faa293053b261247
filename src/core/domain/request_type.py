"""Request tag for stream event notifications.

The wire format carries the tag as a lowercase word token under the ``type``
key. Only the two tokens below are accepted; anything else is rejected by
the model instead of falling back to a default.
"""

from __future__ import annotations

from enum import Enum


class RequestType(str, Enum):
    """Outcome of the stream operation being reported."""

    SUCCESS = "success"
    FAILURE = "failure"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "Success" if self is RequestType.SUCCESS else "Failure"
