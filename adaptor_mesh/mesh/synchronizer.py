"""Mesh synchronization of adaptor trust and token approvals."""

import logging
from typing import Dict, Iterable, Iterator, Optional

from ..audit import AuditLogger, EventType
from ..catalog import MeshCatalog
from ..errors import AdaptorMeshError, AdaptorMismatch
from ..messenger.base import MessengerAdapter
from ..messenger.client import ContractClient
from ..messenger.factory import messenger_for
from ..models.actions import (
    ApproveToken,
    PeerPlan,
    SetTrustedPeer,
    SkipReason,
    SyncAction,
    SyncReport,
)
from ..models.adaptor import PeerTuple
from ..models.network import MessengerType
from ..resolution import AddressResolver, is_same_address
from .executor import ActionExecutor, TransactionExecutor
from .resolver import PeerResolver


logger = logging.getLogger(__name__)


class MeshSynchronizer:
    """
    Brings one network's adaptor in line with the configured mesh.

    For every peer in the trust domain the synchronizer reads the local
    adaptor's trusted slot for the peer's chain, trusts the peer when the slot
    is unset, halts on a slot that holds a different address, then approves
    every configured token of the peer that is not approved yet.

    Peers are processed strictly one after another, and every action is
    confirmed on-chain before the next read. A halt leaves earlier
    confirmed actions in place; running again after fixing the cause is safe
    because slots that are already correct produce no actions.
    """

    def __init__(
        self,
        catalog: MeshCatalog,
        client: ContractClient,
        address_resolver: Optional[AddressResolver] = None,
        executor: Optional[ActionExecutor] = None,
        audit_logger: Optional[AuditLogger] = None
    ):
        """
        Initialize synchronizer.

        Args:
            catalog: Static mesh configuration
            client: Contract client connected to the local network
            address_resolver: Resolves deployment references (literal addresses only if None)
            executor: Applies actions (sends transactions if None)
            audit_logger: Records every decision (optional)
        """
        self.catalog = catalog
        self.client = client
        self.address_resolver = address_resolver or AddressResolver()
        self.executor = executor or TransactionExecutor()
        self.audit_logger = audit_logger
        self.peer_resolver = PeerResolver(catalog)

        self._adapters: Dict[MessengerType, MessengerAdapter] = {}

    def adapter(self, messenger_type: MessengerType) -> MessengerAdapter:
        """Get the adapter of a backend, created once per synchronizer."""
        messenger_type = MessengerType(messenger_type)
        if messenger_type not in self._adapters:
            self._adapters[messenger_type] = messenger_for(messenger_type, self.client)
        return self._adapters[messenger_type]

    def local_adaptor_address(self, pool_type: str, network: str) -> str:
        """
        Resolve the address of the adaptor being synchronized.

        Raises:
            ConfigNotFound: if no adaptor is configured for the pair
        """
        config = self.catalog.adaptors.require(pool_type, network)
        return self.address_resolver.resolve(config.address, network)

    def open_peer(self, peer: PeerTuple) -> PeerPlan:
        """
        Start the plan of one peer corridor.

        Resolves the peer's backend, chain id, adaptor and token addresses
        before any state is read, so configuration errors surface ahead of
        the corridor's first write. A peer whose network has no chain id for
        its backend is returned skipped.

        Raises:
            ConfigNotFound: if the peer's adaptor or one of its tokens has no address
        """
        peer_config = self.catalog.adaptors.require(peer.pool_type, peer.network)
        messenger_type = peer_config.messenger_type

        chain_id = self.catalog.networks.chain_id(messenger_type, peer.network)
        if chain_id is None:
            logger.warning(
                f"Skipping peer {peer}: no {messenger_type.value} chain id for {peer.network}"
            )
            return PeerPlan(
                peer=peer,
                messenger_type=messenger_type,
                skip_reason=SkipReason.MISSING_CHAIN_ID,
            )

        token_addresses = {}
        for token in peer_config.tokens:
            token_ref = self.catalog.tokens.reference(token, peer.network)
            token_addresses[token] = self.address_resolver.resolve(token_ref, peer.network)

        return PeerPlan(
            peer=peer,
            messenger_type=messenger_type,
            chain_id=chain_id,
            peer_adaptor=self.address_resolver.resolve(peer_config.address, peer.network),
            token_addresses=token_addresses,
        )

    def peer_actions(self, local_adaptor: str, plan: PeerPlan) -> Iterator[SyncAction]:
        """
        Yield the actions a peer corridor needs, trust first.

        State is read lazily: each read happens only once the consumer asks
        for the next action, so a caller applying every action before resuming
        always reads state that reflects earlier writes. Yielded actions and
        already approved tokens are recorded on `plan`.

        Args:
            local_adaptor: Address of the local adaptor
            plan: Open, not skipped plan of the peer

        Raises:
            AdaptorMismatch: if the trusted slot holds another address
        """
        peer = plan.peer
        adapter = self.adapter(plan.messenger_type)

        current = adapter.get_trusted_peer_address(local_adaptor, plan.chain_id)
        if current is None:
            action = SetTrustedPeer(
                peer=peer,
                messenger_type=plan.messenger_type,
                chain_id=plan.chain_id,
                local_adaptor=local_adaptor,
                peer_adaptor=plan.peer_adaptor,
            )
            plan.actions.append(action)
            yield action
        elif not is_same_address(current, plan.peer_adaptor):
            logger.error(
                f"Adaptor {plan.peer_adaptor} does not match with contract {local_adaptor}'s state "
                f"for {plan.chain_id}: found {current}"
            )
            raise AdaptorMismatch(peer, expected=plan.peer_adaptor, found=current, local_adaptor=local_adaptor)

        for token, token_address in plan.token_addresses.items():
            if adapter.is_token_approved(local_adaptor, plan.chain_id, token_address):
                plan.approved_tokens.append(token)
                continue
            action = ApproveToken(
                peer=peer,
                messenger_type=plan.messenger_type,
                chain_id=plan.chain_id,
                local_adaptor=local_adaptor,
                token=token,
                token_address=token_address,
            )
            plan.actions.append(action)
            yield action

    def plan_peer(self, local_adaptor: str, peer: PeerTuple) -> PeerPlan:
        """
        Work out the actions one peer corridor needs. Reads state only.

        Returns:
            PeerPlan; trust action first, then token approvals

        Raises:
            AdaptorMismatch: if the trusted slot holds another address
        """
        plan = self.open_peer(peer)
        if not plan.skipped:
            for _ in self.peer_actions(local_adaptor, plan):
                pass
        return plan

    def plan(
        self,
        pool_type: str,
        network: str,
        only_networks: Optional[Iterable[str]] = None
    ) -> SyncReport:
        """
        Dry run: plan every peer without changing anything.

        Raises:
            ConfigNotFound: if the local adaptor is not configured
            AdaptorMismatch: on the first drifted peer
        """
        local_adaptor = self.local_adaptor_address(pool_type, network)
        report = SyncReport(pool_type=pool_type, network=network, local_adaptor=local_adaptor, dry_run=True)
        for peer in self.peer_resolver.resolve_peers(pool_type, network, only_networks):
            report.peers.append(self.plan_peer(local_adaptor, peer))
        return report

    def synchronize(
        self,
        pool_type: str,
        network: str,
        only_networks: Optional[Iterable[str]] = None
    ) -> SyncReport:
        """
        Reconcile the adaptor of (pool_type, network) with every peer.

        Args:
            pool_type: Pool type to synchronize
            network: Local network
            only_networks: Restrict peers to these networks

        Returns:
            SyncReport of every peer and applied action

        Raises:
            ConfigNotFound: if the local adaptor or a peer's token is not configured
            AdaptorMismatch: on the first drifted peer; remaining peers are not processed
            ContractCallReverted: if a read or transaction reverts

        A peer-level error is audited as `sync_failed` before it propagates.
        """
        local_adaptor = self.local_adaptor_address(pool_type, network)
        peers = self.peer_resolver.resolve_peers(pool_type, network, only_networks)
        report = SyncReport(
            pool_type=pool_type,
            network=network,
            local_adaptor=local_adaptor,
            dry_run=not self.executor.sends_transactions,
        )
        result = "success" if self.executor.sends_transactions else "planned"

        logger.info(f"Synchronizing {pool_type} adaptor {local_adaptor} on {network} with {len(peers)} peers")
        self._audit(
            EventType.SYNC_STARTED, report, "Synchronization started", "success",
            target=local_adaptor, details={"peers": [str(p) for p in peers]},
        )

        for peer in peers:
            try:
                self._synchronize_peer(local_adaptor, peer, report, result)
            except AdaptorMismatch as e:
                self._audit(
                    EventType.ADAPTOR_MISMATCH, report, "Trusted adaptor mismatch", "failure",
                    target=str(peer), details={"expected": e.expected, "found": e.found},
                )
                self._audit_failure(report, peer, e)
                raise
            except AdaptorMeshError as e:
                self._audit_failure(report, peer, e)
                raise

        self._audit(
            EventType.SYNC_COMPLETED, report, "Synchronization completed", "success",
            target=local_adaptor,
            details={"actions": len(report.actions), "skipped": [str(p) for p in report.skipped]},
        )
        logger.info(
            f"{pool_type} on {network}: {len(report.actions)} actions, "
            f"{len(report.skipped)} peers skipped"
        )
        return report

    def _synchronize_peer(self, local_adaptor: str, peer: PeerTuple, report: SyncReport, result: str):
        plan = self.open_peer(peer)
        report.peers.append(plan)

        if plan.skipped:
            self._audit(
                EventType.PEER_SKIPPED, report, f"Peer skipped: {plan.skip_reason.value}", "skipped",
                target=str(peer),
            )
            return

        adapter = self.adapter(plan.messenger_type)
        for action in self.peer_actions(local_adaptor, plan):
            self.executor.execute(action, adapter)
            if isinstance(action, SetTrustedPeer):
                self._audit(
                    EventType.TRUST_SET, report, action.describe(), result,
                    target=str(peer), details={"adaptor": action.peer_adaptor, "chain_id": action.chain_id},
                )
            else:
                self._audit(
                    EventType.TOKEN_APPROVED, report, action.describe(), result,
                    target=str(peer), details={"token": action.token, "address": action.token_address},
                )

        if not any(isinstance(a, SetTrustedPeer) for a in plan.actions):
            self._audit(
                EventType.TRUST_CONFIRMED, report, "Trusted adaptor already set", "success",
                target=str(peer), details={"adaptor": plan.peer_adaptor},
            )
        for token in plan.approved_tokens:
            self._audit(
                EventType.TOKEN_CONFIRMED, report, f"Token {token} already approved", "success",
                target=str(peer),
            )

    def _audit_failure(self, report: SyncReport, peer: PeerTuple, error: Exception):
        logger.error(f"Synchronization of {report.pool_type} on {report.network} halted at {peer}: {error}")
        self._audit(
            EventType.SYNC_FAILED, report, "Synchronization halted", "failure",
            target=str(peer),
            details={"error": type(error).__name__, "message": str(error)},
        )

    def _audit(self, event_type, report, action, result, target=None, details=None):
        if self.audit_logger is None:
            return
        self.audit_logger.log_event(
            event_type,
            network=report.network,
            pool_type=report.pool_type,
            action=action,
            result=result,
            target=target,
            details=details,
        )
