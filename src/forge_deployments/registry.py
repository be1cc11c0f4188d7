"""Name -> address bookkeeping for a deployment run."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from .artifacts import ArtifactStore
from .constants import ZERO_ADDRESS
from .exceptions import DeploymentDoesNotExistError, InvalidDeploymentError
from .ledger import TempLedger
from .names import well_known_address
from .types import Deployment, InvalidDeploymentReason

_logger = logging.getLogger(__name__)


class DeploymentRegistry:
    """
    Deployments made during the current run, backed by persisted artifacts.

    Names resolve in this order:
    1. deployments saved during this run
    2. artifacts persisted by earlier runs
    3. well-known predeploy addresses
    """

    def __init__(self, artifacts: ArtifactStore, ledger: TempLedger):
        self._artifacts = artifacts
        self._ledger = ledger
        self._deployments: Dict[str, Deployment] = {}

    def save(self, name: str, address: str) -> Deployment:
        """
        Record a deployment made during this run.

        Args:
            name: Deployment name, unique within the run
            address: Deployed contract address

        Returns:
            The recorded Deployment

        Raises:
            InvalidDeploymentError: If the name is empty or already saved this run
        """
        if not name:
            raise InvalidDeploymentError(InvalidDeploymentReason.EMPTY_NAME, name)
        if name in self._deployments:
            raise InvalidDeploymentError(InvalidDeploymentReason.ALREADY_EXISTS, name)

        deployment = Deployment(name=name, address=address)
        self._deployments[name] = deployment
        self._ledger.append(name, address)

        _logger.info("Saving %s: %s", name, address)
        return deployment

    def load_addresses(self, path: Union[Path, str]) -> List[Deployment]:
        """
        Seed the registry from a JSON object of name -> address.

        Each entry is saved as if deployed this run, in document order.
        """
        _logger.info("Loading addresses from %s", path)
        with open(path) as f:
            addresses: Dict[str, str] = json.load(f)

        return [self.save(name, address) for name, address in addresses.items()]

    def new_deployments(self) -> List[Deployment]:
        """Deployments saved during this run, in save order."""
        return list(self._deployments.values())

    def get_address(self, name: str) -> str:
        """
        Resolve a name to an address.

        Returns:
            Address, or ZERO_ADDRESS if the name does not resolve
        """
        if name in self._deployments:
            return self._deployments[name].address

        persisted = self._artifacts.read_address(name) if name else None
        if persisted is not None:
            return persisted

        return well_known_address(name)

    def must_get_address(self, name: str) -> str:
        """
        Resolve a name to an address.

        Raises:
            DeploymentDoesNotExistError: If the name does not resolve
        """
        address = self.get_address(name)
        if address == ZERO_ADDRESS:
            raise DeploymentDoesNotExistError(name)
        return address

    def has(self, name: str) -> bool:
        return self.get_address(name) != ZERO_ADDRESS

    def get(self, name: str) -> Deployment:
        """
        Resolve a name to a Deployment.

        Uses the same precedence as get_address(), address book included,
        so get(name).address == get_address(name) for every name.

        Returns:
            Deployment, or Deployment("", ZERO_ADDRESS) if the name does not resolve
        """
        address = self.get_address(name)
        if address == ZERO_ADDRESS:
            return Deployment(name="", address=ZERO_ADDRESS)
        return Deployment(name=name, address=address)
