"""Temp ledger of deployments awaiting synchronization."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from .exceptions import LedgerError
from .types import Deployment

_logger = logging.getLogger(__name__)


class TempLedger:
    """
    JSON object mapping deployment name -> address for the current run.

    Survives process restarts within a run; deleted once the run's
    deployments have been synchronized into artifacts.
    """

    def __init__(self, path: Union[Path, str]):
        self.path = Path(path)
        self.ensure()

    def ensure(self) -> None:
        """
        Create an empty ledger if none exists.

        Raises:
            LedgerError: If the ledger file cannot be created
        """
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({}, f)
        except OSError as e:
            raise LedgerError(f"Cannot initialize temp ledger at {self.path}: {e}") from e

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LedgerError(f"Cannot read temp ledger at {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise LedgerError(f"Temp ledger at {self.path} is not a JSON object")
        return data

    def append(self, name: str, address: str) -> None:
        """Record a deployment, replacing any previous address for the name."""
        entries = self._load()
        entries[name] = address
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(entries, f, indent=2)
        except OSError as e:
            raise LedgerError(f"Cannot write temp ledger at {self.path}: {e}") from e

    def read_all(self) -> List[Deployment]:
        """All recorded deployments, in the order they were first appended."""
        return [Deployment(name=name, address=address) for name, address in self._load().items()]

    def clear(self) -> None:
        """Delete the ledger."""
        _logger.info("Deleting temp ledger %s", self.path)
        self.path.unlink(missing_ok=True)
