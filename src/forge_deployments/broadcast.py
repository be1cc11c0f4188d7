"""Read access to a Foundry broadcast transaction log."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import TransactionLogNotFoundError
from .names import same_address
from .parsers import parse_creation_transaction
from .types import CreationTransaction


class TransactionLog:
    """Transactions and receipts recorded by one deploy script run."""

    def __init__(self, data: Dict[str, Any]):
        self._transactions: List[Dict[str, Any]] = data.get("transactions") or []
        self._receipts: List[Dict[str, Any]] = data.get("receipts") or []

    @classmethod
    def from_file(cls, path: Union[Path, str]) -> "TransactionLog":
        """
        Load a broadcast log (run-latest.json).

        Raises:
            TransactionLogNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise TransactionLogNotFoundError(f"Transaction log not found at {path}")

        with open(path) as f:
            return cls(json.load(f))

    def creation_transactions(self) -> List[CreationTransaction]:
        """All contract-creating transactions, in log order."""
        result = []
        for tx in self._transactions:
            creation = parse_creation_transaction(tx)
            if creation is not None:
                result.append(creation)
        return result

    def find_creation(self, address: str) -> Optional[CreationTransaction]:
        """
        Find the transaction that created the contract at an address.

        The first matching record wins if the log holds several.
        """
        for creation in self.creation_transactions():
            if same_address(creation.contract_address, address):
                return creation
        return None

    def receipt_for(self, address: str) -> Dict[str, Any]:
        """Receipt whose contractAddress matches, or an empty dict."""
        for receipt in self._receipts:
            contract_address = receipt.get("contractAddress")
            if contract_address and same_address(contract_address, address):
                return receipt
        return {}
