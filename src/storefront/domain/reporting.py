"""Abstract sink for workflow status lines.

Defined in the domain layer so the workflow never depends on a concrete
output channel. The console implementation lives in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StatusReporter(ABC):

    @abstractmethod
    def report(self, message: str) -> None:
        """Emit one status line."""
