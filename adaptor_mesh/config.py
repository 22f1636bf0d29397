"""
Runtime settings from environment variables.

    ADAPTOR_MESH_CATALOG             JSON catalog document (built-in tables if unset)
    ADAPTOR_MESH_ADDRESS_BOOK        JSON address book {network: {name: address}}
    ADAPTOR_MESH_DEPLOYMENTS_DIR     hardhat-deploy deployments directory
    ADAPTOR_MESH_AUDIT_LOG           audit log file (no audit log if unset)
    ADAPTOR_MESH_PRIVATE_KEY         operator key used by `sync`
    ADAPTOR_MESH_RPC_URL__<NET>      RPC endpoint of network NET, e.g. ADAPTOR_MESH_RPC_URL__BSC_MAINNET
    FORK_NETWORK                     network forked by the local dev node
"""

from pathlib import Path
from typing import Dict, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .catalog import MeshCatalog, load_catalog
from .resolution import AddressBook, AddressResolver


ENV_PREFIX = "ADAPTOR_MESH_"


class Settings(BaseSettings):
    """Settings of one CLI invocation."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    catalog: Optional[Path] = Field(default=None, description="JSON catalog document")
    address_book: Optional[Path] = Field(default=None, description="JSON address book")
    deployments_dir: Optional[Path] = Field(default=None, description="hardhat-deploy deployments directory")
    audit_log: Optional[Path] = Field(default=None, description="Audit log file")
    private_key: Optional[SecretStr] = Field(default=None, description="Operator private key")
    rpc_url: Dict[str, str] = Field(default_factory=dict, description="RPC endpoint per network")
    fork_network: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("FORK_NETWORK", "ADAPTOR_MESH_FORK_NETWORK"),
        description="Network the dev networks mirror"
    )

    def rpc_url_for(self, network: str) -> str:
        """
        Get the RPC endpoint of a network.

        Raises:
            ConfigurationError: if no endpoint is configured
        """
        urls = {name.lower(): url for name, url in self.rpc_url.items()}
        url = urls.get(network.lower())
        if not url:
            raise ConfigurationError(
                f"No RPC endpoint for {network}: set {ENV_PREFIX}RPC_URL__{network.upper()}"
            )
        return url

    def load_catalog(self) -> MeshCatalog:
        return load_catalog(self.catalog, fork_network=self.fork_network)

    def load_address_book(self) -> AddressBook:
        """Merge the deployments directory and the JSON address book; the latter wins."""
        book = AddressBook()
        if self.deployments_dir is not None:
            book = AddressBook.from_deployments_dir(self.deployments_dir)
        if self.address_book is not None:
            for network, names in AddressBook.from_json(self.address_book).to_dict().items():
                for name, address in names.items():
                    book.register(network, name, address)
        return book

    def address_resolver(self) -> AddressResolver:
        return AddressResolver(self.load_address_book())
