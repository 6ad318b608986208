"""Exception types surfaced by the editor runtime.

Only fatal conditions are modelled as exceptions. Recoverable problems
(save failures, aborted prompts) are reported through the status message.
"""

from __future__ import annotations


class SimpadError(Exception):
    """Base class for fatal editor errors."""


class FileLoadError(SimpadError):
    """An explicitly requested file could not be read."""


class TerminalError(SimpadError):
    """The terminal could not be queried or configured."""
