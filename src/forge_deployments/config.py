"""Environment-driven configuration for forge-deployments library."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .constants import (
    CHAIN_CONTEXTS,
    DEFAULT_CONTEXT,
    DEFAULT_DEPLOY_SCRIPT,
    DEFAULT_FORGE_ARTIFACTS_DIR,
)
from .paths import get_default_root

_FALSE_VALUES = {"0", "false", "no", "off"}


def context_for_chain(chain_id: int) -> str:
    """Deployment context conventionally used for a chain id."""
    return CHAIN_CONTEXTS.get(chain_id, DEFAULT_CONTEXT)


@dataclass
class DeployConfig:
    """Settings for one deployment run."""

    chain_id: int
    context: str
    root: Path
    strict: bool = True
    contract_addresses_path: Optional[Path] = None
    deploy_script: str = DEFAULT_DEPLOY_SCRIPT
    forge_artifacts_dir: str = DEFAULT_FORGE_ARTIFACTS_DIR
    rpc_url: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DeployConfig":
        """
        Build configuration from environment variables.

        Variables:
            CHAIN_ID (required), DEPLOYMENT_CONTEXT, CONTRACT_ADDRESSES_PATH,
            STRICT_DEPLOYMENT, DEPLOY_SCRIPT, FORGE_ARTIFACTS_DIR,
            DEPLOYMENTS_ROOT, ETH_RPC_URL

        Raises:
            ValueError: If CHAIN_ID is missing or not an integer
        """
        if environ is None:
            environ = os.environ

        raw_chain_id = environ.get("CHAIN_ID")
        if not raw_chain_id:
            raise ValueError("Chain id required: set $CHAIN_ID environment variable")
        try:
            chain_id = int(raw_chain_id, 0)
        except ValueError as e:
            raise ValueError(f"Invalid CHAIN_ID: {raw_chain_id!r}") from e

        context = environ.get("DEPLOYMENT_CONTEXT") or context_for_chain(chain_id)

        root_env = environ.get("DEPLOYMENTS_ROOT")
        root = Path(root_env).absolute() if root_env else get_default_root()

        addresses_env = environ.get("CONTRACT_ADDRESSES_PATH")
        strict_env = environ.get("STRICT_DEPLOYMENT", "true")

        return cls(
            chain_id=chain_id,
            context=context,
            root=root,
            strict=strict_env.strip().lower() not in _FALSE_VALUES,
            contract_addresses_path=Path(addresses_env) if addresses_env else None,
            deploy_script=environ.get("DEPLOY_SCRIPT") or DEFAULT_DEPLOY_SCRIPT,
            forge_artifacts_dir=environ.get("FORGE_ARTIFACTS_DIR") or DEFAULT_FORGE_ARTIFACTS_DIR,
            rpc_url=environ.get("ETH_RPC_URL"),
        )
