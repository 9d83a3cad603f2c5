from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class FuzzySelectorProtocol(Protocol):
    """Protocol defining the interface for interactive selectors.

    Any class that implements these methods satisfies the protocol, so the
    session can be driven by fzf in a terminal or by a scripted fake in tests.
    """

    def ensure_available(self) -> None:
        """Check the selector can run.

        Raises:
            DependencyMissing: If the backing tool is not installed
        """
        ...

    def choose(self, prompt: str, options: Sequence[str]) -> str | None:
        """Let the operator pick one entry from ``options``.

        Args:
            prompt: Prompt text shown next to the filter input
            options: Entries to choose from, shown in the given order

        Returns:
            The chosen entry, or None when the operator cancelled
        """
        ...
