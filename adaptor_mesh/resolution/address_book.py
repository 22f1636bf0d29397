"""Deployment address book."""

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ..errors import ConfigNotFound, ConfigurationError


logger = logging.getLogger(__name__)


class AddressBook:
    """
    Deployed addresses by network and deployment name.

    Loaded from a generated address book file
    (``{network: {deployment_name: address}}``) or from a hardhat-deploy
    ``deployments/`` directory.
    """

    def __init__(self, entries: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._entries: Dict[str, Dict[str, str]] = {
            network: dict(deployments) for network, deployments in (entries or {}).items()
        }

    def lookup(self, network: str, name: str) -> str:
        """
        Get the address of a deployment.

        Raises:
            ConfigNotFound: if the deployment is not known on the network
        """
        address = self._entries.get(network, {}).get(name)
        if address is None:
            raise ConfigNotFound(f"No deployment named {name} on network {network}")
        return address

    def register(self, network: str, name: str, address: str):
        """Record a deployment address."""
        self._entries.setdefault(network, {})[name] = address

    def networks(self):
        return list(self._entries.keys())

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {network: dict(deployments) for network, deployments in self._entries.items()}

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "AddressBook":
        """
        Load an address book file.

        Raises:
            ConfigurationError: if the file is missing or malformed
        """
        path = Path(path)
        try:
            with open(path, 'r') as f:
                payload = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Address book not found: {path}") from None
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Address book {path} is not valid JSON: {e}") from e

        if not isinstance(payload, dict) or not all(isinstance(v, dict) for v in payload.values()):
            raise ConfigurationError(f"Address book {path} must map network -> name -> address")

        return cls(payload)

    @classmethod
    def from_deployments_dir(cls, path: Union[str, Path]) -> "AddressBook":
        """
        Load every ``<network>/<Name>.json`` deployment artifact under a directory.

        Artifacts without an ``address`` field are ignored.
        """
        root = Path(path)
        if not root.is_dir():
            raise ConfigurationError(f"Deployments directory not found: {root}")

        book = cls()
        for network_dir in sorted(p for p in root.iterdir() if p.is_dir()):
            for artifact in sorted(network_dir.glob('*.json')):
                try:
                    with open(artifact, 'r') as f:
                        data = json.load(f)
                except json.JSONDecodeError:
                    logger.warning(f"Skipping unreadable deployment artifact {artifact}")
                    continue
                if isinstance(data, dict) and data.get('address'):
                    book.register(network_dir.name, artifact.stem, data['address'])

        logger.debug(f"Loaded deployments for {len(book.networks())} networks from {root}")
        return book
