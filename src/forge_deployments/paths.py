"""Path management utilities for forge-deployments library."""

from pathlib import Path
from typing import Optional, Union

from .constants import CHAIN_ID_FILENAME, LEDGER_FILENAME


def get_default_root() -> Path:
    """
    Get default project root (current working directory).

    Returns:
        Absolute path of the working directory
    """
    return Path.cwd()


def _resolve_root(root: Optional[Union[Path, str]]) -> Path:
    if root is None:
        return get_default_root()
    return Path(root).absolute()


def get_context_paths(
    context: str, root: Optional[Union[Path, str]] = None
) -> tuple[Path, Path, Path]:
    """
    Get the files belonging to a deployment context.

    Args:
        context: Deployment context name, e.g., "mainnet"
        root: Project root (defaults to the working directory)

    Returns:
        Tuple of (deployments_dir, ledger_path, chain_id_path)
    """
    deployments_dir = _resolve_root(root) / "deployments" / context

    ledger_path = deployments_dir / LEDGER_FILENAME
    chain_id_path = deployments_dir / CHAIN_ID_FILENAME

    return (deployments_dir, ledger_path, chain_id_path)


def get_broadcast_path(
    script: str, chain_id: int, root: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the Foundry broadcast log written for a deploy script run.

    Args:
        script: Script name, with or without the ".s.sol" suffix
        chain_id: Chain the script was broadcast to
        root: Project root (defaults to the working directory)

    Returns:
        Path to broadcast/<script>.s.sol/<chain_id>/run-latest.json
    """
    if not script.endswith(".s.sol"):
        script = f"{script}.s.sol"
    return _resolve_root(root) / "broadcast" / script / str(chain_id) / "run-latest.json"


def get_forge_artifacts_dir(
    out: str, root: Optional[Union[Path, str]] = None
) -> Path:
    """Get the Forge build output directory."""
    return _resolve_root(root) / out
