"""Lookup of compiler output in a Forge artifacts directory."""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .exceptions import CompiledOutputNotFoundError
from .names import contract_basename, strip_version_suffix
from .parsers import parse_compiled_contract
from .types import CompiledContract

_logger = logging.getLogger(__name__)


class CompiledOutputStore:
    """Compiled contracts laid out as <out>/<File>.sol/<Name>.json."""

    def __init__(self, out_dir: Union[Path, str]):
        self.out_dir = Path(out_dir)
        self._cache: Dict[str, CompiledContract] = {}

    def find_path(self, name: str) -> Optional[Path]:
        """
        Locate the artifact file for a contract name.

        Accepts "Name", versioned "Name.0.8.15" and qualified
        "src/File.sol:Name" forms. Resolution order:
        1. <File>.sol/<name>.json in the source directory
        2. the first versioned <name>.X.Y.Z.json in that directory,
           lexicographically
        3. the first <out>/*/<name>.json, lexicographically

        Returns:
            Path to the artifact, or None if nothing matches
        """
        base = contract_basename(name)
        if ":" in name:
            source_dir = self.out_dir / Path(name.rsplit(":", 1)[0]).name
        else:
            source_dir = self.out_dir / f"{strip_version_suffix(base)}.sol"

        exact = source_dir / f"{base}.json"
        if exact.exists():
            return exact

        if source_dir.is_dir():
            wanted = strip_version_suffix(base)
            candidates = sorted(
                p for p in source_dir.glob("*.json") if strip_version_suffix(p.stem) == wanted
            )
            if candidates:
                if len(candidates) > 1:
                    _logger.debug(
                        "Multiple artifacts for %s in %s, using %s",
                        name, source_dir, candidates[0].name,
                    )
                return candidates[0]

        matches = sorted(self.out_dir.glob(f"*/{base}.json"))
        if matches:
            return matches[0]

        return None

    def get(self, name: str) -> CompiledContract:
        """
        Get compiler output for a contract.

        Raises:
            CompiledOutputNotFoundError: If no artifact exists for the name
        """
        if name in self._cache:
            return self._cache[name]

        path = self.find_path(name)
        if path is None:
            raise CompiledOutputNotFoundError(
                f"No compiled output for '{name}' under {self.out_dir}"
            )

        compiled = parse_compiled_contract(path, name)
        self._cache[name] = compiled
        return compiled
