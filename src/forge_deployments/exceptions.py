"""Custom exception classes for forge-deployments library."""

from .types import InvalidDeploymentReason


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class InvalidDeploymentError(DeploymentError, ValueError):
    """Raised when a deployment cannot be saved under the requested name."""

    def __init__(self, reason: InvalidDeploymentReason, name: str = ""):
        self.reason = reason
        self.name = name
        super().__init__(f"InvalidDeployment: {reason.value} ({name!r})")


class DeploymentDoesNotExistError(DeploymentError, LookupError):
    """Raised when a name does not resolve to any deployment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"DeploymentDoesNotExist: {name}")


class ChainMismatchError(DeploymentError, ValueError):
    """Raised when a deployment context was created for a different chain."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Misconfigured networks: deployments recorded for chain {expected}, "
            f"current chain is {actual}"
        )


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a deployment artifact file is not found."""

    pass


class CompiledOutputNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when compiler output for a contract is not found."""

    pass


class TransactionLogNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when the broadcast transaction log is not found."""

    pass


class StorageSlotNotFoundError(DeploymentError, ValueError):
    """Raised when a storage layout has no matching slot."""

    pass


class LedgerError(DeploymentError, OSError):
    """Raised when the temp deployment ledger cannot be read or written."""

    pass
