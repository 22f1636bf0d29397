"""Reconciliation actions and sync reports."""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from .adaptor import PeerTuple
from .network import MessengerType


class ContractInput(BaseModel):
    """ABI input of a contract method."""
    name: str = Field(..., description="Parameter name")
    type: str = Field(..., description="Solidity type")


class ContractCall(BaseModel):
    """A fully specified state-mutating contract call."""
    to: str = Field(..., description="Target contract address")
    method: str = Field(..., description="Contract method name")
    inputs: List[ContractInput] = Field(default_factory=list, description="Method ABI inputs")
    args: List[Any] = Field(default_factory=list, description="Argument values, in input order")


class SetTrustedPeer(BaseModel):
    """Record `peer_adaptor` as the trusted adaptor for `chain_id`."""
    kind: Literal["set_trusted_peer"] = "set_trusted_peer"
    peer: PeerTuple
    messenger_type: MessengerType
    chain_id: int
    local_adaptor: str
    peer_adaptor: str

    def describe(self) -> str:
        return f"Add adaptor: {self.peer_adaptor} - {self.peer.network} (chain {self.chain_id})"


class ApproveToken(BaseModel):
    """Allow `token` from `chain_id` to be bridged into the local adaptor."""
    kind: Literal["approve_token"] = "approve_token"
    peer: PeerTuple
    messenger_type: MessengerType
    chain_id: int
    local_adaptor: str
    token: str
    token_address: str

    def describe(self) -> str:
        return (
            f"Approve token: {self.token} at {self.token_address} - "
            f"{self.peer.network} (chain {self.chain_id})"
        )


SyncAction = Union[SetTrustedPeer, ApproveToken]


class PeerStatus(str, Enum):
    """Outcome of reconciling one peer."""
    SKIPPED = "skipped"
    IN_SYNC = "in_sync"
    RECONCILED = "reconciled"


class SkipReason(str, Enum):
    """Why a peer was not reconciled."""
    MISSING_CHAIN_ID = "missing_chain_id"


class PeerPlan(BaseModel):
    """Actions needed to bring one peer corridor in line with configuration."""
    peer: PeerTuple
    messenger_type: MessengerType
    chain_id: Optional[int] = None
    peer_adaptor: Optional[str] = None
    token_addresses: Dict[str, str] = Field(
        default_factory=dict,
        description="Resolved address of each peer token, in approval order"
    )
    skip_reason: Optional[SkipReason] = None
    actions: List[SyncAction] = Field(default_factory=list)
    approved_tokens: List[str] = Field(
        default_factory=list,
        description="Tokens already approved before this run"
    )

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None

    @property
    def status(self) -> PeerStatus:
        if self.skipped:
            return PeerStatus.SKIPPED
        if self.actions:
            return PeerStatus.RECONCILED
        return PeerStatus.IN_SYNC


class SyncReport(BaseModel):
    """Result of planning or synchronizing one (pool type, network)."""
    pool_type: str
    network: str
    local_adaptor: str
    dry_run: bool = False
    peers: List[PeerPlan] = Field(default_factory=list)

    @property
    def actions(self) -> List[SyncAction]:
        return [action for plan in self.peers for action in plan.actions]

    @property
    def skipped(self) -> List[PeerTuple]:
        return [plan.peer for plan in self.peers if plan.skipped]

    @property
    def in_sync(self) -> bool:
        """True when no mutation was needed for any reachable peer."""
        return not self.actions
