"""Adaptor deployment models."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .network import MessengerType


class AddressRef(BaseModel):
    """
    Configuration-level address.

    Either a literal address or a symbolic reference to a named deployment.
    A deployment reference without a network is looked up on the network
    the reference is resolved for.
    """
    model_config = ConfigDict(frozen=True)

    address: Optional[str] = Field(None, description="Literal on-chain address")
    deployment: Optional[str] = Field(None, description="Deployment name in the address book")
    network: Optional[str] = Field(None, description="Network the deployment lives on")

    @model_validator(mode="after")
    def _exactly_one_target(self) -> "AddressRef":
        if (self.address is None) == (self.deployment is None):
            raise ValueError("AddressRef needs exactly one of 'address' or 'deployment'")
        return self

    @classmethod
    def literal(cls, address: str) -> "AddressRef":
        """Reference a fixed address."""
        return cls(address=address)

    @classmethod
    def of_deployment(cls, name: str, network: Optional[str] = None) -> "AddressRef":
        """Reference the current deployment named `name`."""
        return cls(deployment=name, network=network)

    @property
    def is_deployment(self) -> bool:
        return self.deployment is not None

    def __str__(self) -> str:
        if self.address is not None:
            return self.address
        if self.network:
            return f"deployment:{self.network}/{self.deployment}"
        return f"deployment:{self.deployment}"


class AdaptorConfig(BaseModel):
    """Deployment descriptor of one adaptor on one network for one pool type."""
    model_config = ConfigDict(frozen=True)

    address: AddressRef = Field(..., description="Adaptor contract address or deployment reference")
    tokens: List[str] = Field(
        default_factory=list,
        description="Bridgeable token identifiers, in approval order"
    )
    messenger_type: MessengerType = Field(..., description="Backend this adaptor receives through")

    @model_validator(mode="after")
    def _unique_tokens(self) -> "AdaptorConfig":
        if len(set(self.tokens)) != len(self.tokens):
            raise ValueError(f"Duplicate token in adaptor config: {self.tokens}")
        return self


class PeerTuple(BaseModel):
    """Identity of one adaptor deployment."""
    model_config = ConfigDict(frozen=True)

    pool_type: str = Field(..., description="Pool type of the deployment")
    network: str = Field(..., description="Network the deployment lives on")

    def __str__(self) -> str:
        return f"{self.pool_type}@{self.network}"
