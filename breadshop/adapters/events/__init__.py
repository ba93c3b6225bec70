"""Event adapters for reporting shop outcomes.

Implementations support multiple output channels:
- Stdout (one human-readable line per event)
- Logging (one log record per event)
"""

from .log import LoggingEventsAdapter
from .stdout import StdoutEventsAdapter

__all__ = ["LoggingEventsAdapter", "StdoutEventsAdapter"]
