"""Per-contract deployment artifact files."""

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import ArtifactNotFoundError
from .parsers import parse_artifact
from .types import Artifact

_logger = logging.getLogger(__name__)


class ArtifactStore:
    """
    Reads and writes deployments/<context>/<name>.json.

    One file per contract name. Redeploying a name overwrites its file;
    history is kept only as the numDeployments counter.
    """

    def __init__(self, deployments_dir: Union[Path, str]):
        self.deployments_dir = Path(deployments_dir)

    def path_for(self, name: str) -> Path:
        return self.deployments_dir / f"{name}.json"

    def _load(self, name: str) -> Optional[Dict[str, Any]]:
        path = self.path_for(name)
        if not path.exists():
            return None

        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            _logger.warning("Ignoring %s: not a JSON object", path)
            return None
        return data

    def read(self, name: str) -> Artifact:
        """
        Read the artifact for a contract name.

        Raises:
            ArtifactNotFoundError: If no artifact exists for the name
        """
        artifact = self.read_if_exists(name)
        if artifact is None:
            raise ArtifactNotFoundError(
                f"Artifact for '{name}' not found in {self.deployments_dir}"
            )
        return artifact

    def read_if_exists(self, name: str) -> Optional[Artifact]:
        """Read the artifact for a contract name, or None if absent."""
        path = self.path_for(name)
        if not path.exists():
            return None
        return parse_artifact(path)

    def read_address(self, name: str) -> Optional[str]:
        """
        Read only the address of a persisted deployment.

        Returns:
            Address string, or None if no artifact exists or it has no address
        """
        data = self._load(name)
        if data is None:
            return None
        return data.get("address") or None

    def num_deployments(self, name: str) -> int:
        """Counter of the existing artifact, 0 if there is none."""
        data = self._load(name)
        if data is None:
            return 0
        return int(data.get("numDeployments", 0))

    def write(self, name: str, artifact: Artifact) -> Artifact:
        """
        Overwrite the artifact for a contract name.

        The written numDeployments is always the previous counter plus one,
        whatever the passed artifact carries.

        Args:
            name: Deployment name (file stem)
            artifact: Artifact to persist

        Returns:
            The artifact as written, with its counter stamped
        """
        stamped = dataclasses.replace(
            artifact, num_deployments=self.num_deployments(name) + 1
        )

        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(stamped.to_json(), f, indent=2)

        _logger.debug("Wrote %s (numDeployments=%d)", path, stamped.num_deployments)
        return stamped

    def names(self) -> List[str]:
        """Sorted names of all stored artifacts."""
        if not self.deployments_dir.is_dir():
            return []
        return sorted(
            p.stem for p in self.deployments_dir.glob("*.json") if not p.name.startswith(".")
        )
