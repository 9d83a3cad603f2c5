import logging
import shutil
import subprocess
from collections.abc import Sequence

from ..errors import DependencyMissing, IamActionsError

logger = logging.getLogger(__name__)

# fzf exits with 1 when nothing matched and 130 when interrupted (ESC / CTRL-C).
_NO_SELECTION_EXIT_CODES = {1, 130}


class FzfSelector:
    def __init__(self, command: str = "fzf") -> None:
        self.command = command

    def ensure_available(self) -> None:
        if shutil.which(self.command) is None:
            raise DependencyMissing(f"Required command '{self.command}' is not installed.")

    def choose(self, prompt: str, options: Sequence[str]) -> str | None:
        if not options:
            return None

        logger.debug("Prompting with %d options: %s", len(options), prompt)
        try:
            completed = subprocess.run(
                [self.command, f"--prompt={prompt}"],
                input="\n".join(options),
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise DependencyMissing(f"Required command '{self.command}' is not installed.") from exc

        if completed.returncode in _NO_SELECTION_EXIT_CODES:
            return None
        if completed.returncode != 0:
            raise IamActionsError(f"{self.command} exited with status {completed.returncode}")

        selected = completed.stdout.strip("\n")
        return selected or None
