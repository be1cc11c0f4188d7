"""Shared pytest fixtures for forge-deployments tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Dict

import pytest

from forge_deployments.artifacts import ArtifactStore
from forge_deployments.broadcast import TransactionLog
from forge_deployments.compiled import CompiledOutputStore
from forge_deployments.config import DeployConfig
from forge_deployments.ledger import TempLedger
from forge_deployments.registry import DeploymentRegistry

HARDHAT_CHAIN_ID = 31337


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def broadcast_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample broadcast run-latest.json fixture."""
    with open(fixtures_dir / "broadcast" / "Deploy.s.sol" / "31337" / "run-latest.json") as f:
        return json.load(f)


@pytest.fixture
def project_root(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Create a Foundry project checkout with build output and a broadcast log."""
    root = tmp_path / "project"
    root.mkdir()
    shutil.copytree(fixtures_dir / "forge-artifacts", root / "forge-artifacts")
    shutil.copytree(fixtures_dir / "broadcast", root / "broadcast")
    return root


@pytest.fixture
def deploy_config(project_root: Path) -> DeployConfig:
    """Configuration for a local hardhat-context run."""
    return DeployConfig(chain_id=HARDHAT_CHAIN_ID, context="hardhat", root=project_root)


@pytest.fixture
def deployments_dir(project_root: Path) -> Path:
    """Create the deployments/hardhat directory."""
    path = project_root / "deployments" / "hardhat"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def ledger(deployments_dir: Path) -> TempLedger:
    return TempLedger(deployments_dir / ".deploy")


@pytest.fixture
def artifact_store(deployments_dir: Path) -> ArtifactStore:
    return ArtifactStore(deployments_dir)


@pytest.fixture
def compiled_store(project_root: Path) -> CompiledOutputStore:
    return CompiledOutputStore(project_root / "forge-artifacts")


@pytest.fixture
def transaction_log(broadcast_json: Dict[str, Any]) -> TransactionLog:
    return TransactionLog(broadcast_json)


@pytest.fixture
def registry(artifact_store: ArtifactStore, ledger: TempLedger) -> DeploymentRegistry:
    return DeploymentRegistry(artifact_store, ledger)


@pytest.fixture
def write_artifact(deployments_dir: Path):
    """Write a persisted artifact file as an earlier run would have."""

    def _write(name: str, address: str, num_deployments: int = 1) -> Path:
        path = deployments_dir / f"{name}.json"
        data = {
            "address": address,
            "abi": [],
            "args": [],
            "bytecode": "0x",
            "deployedBytecode": "0x",
            "numDeployments": num_deployments,
        }
        path.write_text(json.dumps(data))
        return path

    return _write
