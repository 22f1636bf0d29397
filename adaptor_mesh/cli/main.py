"""Main CLI application for Adaptor Mesh."""

import functools
import logging
import sys

import click

from ..audit import AuditLogger, EventType, verify_audit_file
from ..config import Settings
from ..errors import AdaptorMeshError
from ..mesh import MeshSynchronizer, PeerResolver, RecordingExecutor, TransactionExecutor
from ..messenger import Web3ContractClient
from ..multisig import SafeBatchExecutor, write_batch_file

logger = logging.getLogger(__name__)


def handle_errors(f):
    """Report mesh errors on stderr and exit non-zero."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except AdaptorMeshError as e:
            click.echo(f"✗ {e}", err=True)
            sys.exit(1)
    return wrapper


def make_client(settings: Settings, network: str, rpc_url=None, sign: bool = False) -> Web3ContractClient:
    """Connect to a network, with the operator key when `sign` is set."""
    private_key = None
    if sign:
        if settings.private_key is None:
            raise click.UsageError("ADAPTOR_MESH_PRIVATE_KEY is required to send transactions")
        private_key = settings.private_key.get_secret_value()
    url = rpc_url or settings.rpc_url_for(network)
    return Web3ContractClient.from_rpc_url(url, private_key)


def make_synchronizer(settings: Settings, client, executor) -> MeshSynchronizer:
    audit_logger = AuditLogger(settings.audit_log) if settings.audit_log else None
    return MeshSynchronizer(
        settings.load_catalog(),
        client,
        address_resolver=settings.address_resolver(),
        executor=executor,
        audit_logger=audit_logger,
    )


def print_report(report):
    """Print the per-peer outcome of a run."""
    mode = "dry run" if report.dry_run else "applied"
    click.echo(f"=== {report.pool_type} on {report.network} ({mode}) ===")
    click.echo(f"Local adaptor: {report.local_adaptor}\n")
    for plan in report.peers:
        click.echo(f"{plan.peer}: {plan.status.value}")
        if plan.skipped:
            click.echo(f"  skipped: {plan.skip_reason.value}")
        for action in plan.actions:
            click.echo(f"  - {action.describe()}")
    click.echo(f"\n{len(report.actions)} actions, {len(report.skipped)} peers skipped")


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--catalog', type=click.Path(exists=True, dir_okay=False), help='JSON catalog document')
@click.option('--fork-network', help='Network forked by the local dev node')
@click.pass_context
def cli(ctx, debug, catalog, fork_network):
    """Adaptor Mesh CLI - keep cross-chain adaptors trusting each other."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    settings = Settings()
    overrides = {}
    if catalog:
        overrides['catalog'] = catalog
    if fork_network:
        overrides['fork_network'] = fork_network
    ctx.obj = settings.model_copy(update=overrides)


@cli.command('networks')
@click.pass_obj
@handle_errors
def networks(settings):
    """List networks, their groups and chain ids."""
    catalog = settings.load_catalog()
    for network in catalog.networks.networks():
        chain_ids = ", ".join(
            f"{messenger_type.value}={chain_id}"
            for messenger_type, chain_id in catalog.networks.chain_ids_of(network).items()
        )
        pools = ", ".join(catalog.adaptors.pool_types(network)) or "-"
        click.echo(f"{network:<18} {catalog.networks.group_of(network).value:<8} {chain_ids or '-'}  pools: {pools}")


@cli.command('peers')
@click.argument('pool_type')
@click.argument('network')
@click.option('--only', multiple=True, help='Restrict peers to this network (repeatable)')
@click.pass_obj
@handle_errors
def peers(settings, pool_type, network, only):
    """Print the peers of a deployment."""
    resolver = PeerResolver(settings.load_catalog())
    resolved = resolver.resolve_peers(pool_type, network, only or None)
    click.echo(f"Peers of {pool_type} on {network} ({len(resolved)}):")
    for peer in resolved:
        click.echo(f"  - {peer}")


@cli.command('plan')
@click.argument('pool_type')
@click.argument('network')
@click.option('--only', multiple=True, help='Restrict peers to this network (repeatable)')
@click.option('--rpc-url', help='RPC endpoint (ADAPTOR_MESH_RPC_URL__<NETWORK> if omitted)')
@click.pass_obj
@handle_errors
def plan(settings, pool_type, network, only, rpc_url):
    """Show the actions a sync would take, without sending anything."""
    client = make_client(settings, network, rpc_url)
    synchronizer = make_synchronizer(settings, client, RecordingExecutor())
    print_report(synchronizer.plan(pool_type, network, only or None))


@cli.command('sync')
@click.argument('targets', nargs=-1, required=True, metavar='[POOL_TYPE] NETWORK')
@click.option('--only', multiple=True, help='Restrict peers to this network (repeatable)')
@click.option('--all-pools', is_flag=True, help='Synchronize every pool type configured on the network')
@click.option('--rpc-url', help='RPC endpoint (ADAPTOR_MESH_RPC_URL__<NETWORK> if omitted)')
@click.pass_obj
@handle_errors
def sync(settings, targets, only, all_pools, rpc_url):
    """Trust every peer adaptor and approve its tokens on-chain."""
    if all_pools and len(targets) == 1:
        network = targets[0]
        pool_types = settings.load_catalog().adaptors.pool_types(network)
    elif not all_pools and len(targets) == 2:
        pool_type, network = targets
        pool_types = [pool_type]
    else:
        raise click.UsageError("Pass POOL_TYPE NETWORK, or NETWORK with --all-pools")

    client = make_client(settings, network, rpc_url, sign=True)
    synchronizer = make_synchronizer(settings, client, TransactionExecutor())
    for current in pool_types:
        report = synchronizer.synchronize(current, network, only or None)
        print_report(report)
        click.echo(f"✓ {current} on {network} is in sync\n")


@cli.command('export-batch')
@click.argument('pool_type')
@click.argument('network')
@click.option('--safe', 'safe_address', help='Safe proposing the batch')
@click.option('--output', required=True, type=click.Path(dir_okay=False), help='Batch file path')
@click.option('--only', multiple=True, help='Restrict peers to this network (repeatable)')
@click.option('--chain-id', type=int, help='EVM chain id (read from the node if omitted)')
@click.option('--rpc-url', help='RPC endpoint (ADAPTOR_MESH_RPC_URL__<NETWORK> if omitted)')
@click.pass_obj
@handle_errors
def export_batch(settings, pool_type, network, safe_address, output, only, chain_id, rpc_url):
    """Write the sync actions as a Safe Transaction Builder batch."""
    client = make_client(settings, network, rpc_url)
    if chain_id is None:
        chain_id = client.web3.eth.chain_id

    executor = SafeBatchExecutor(chain_id, safe_address)
    synchronizer = make_synchronizer(settings, client, executor)
    report = synchronizer.synchronize(pool_type, network, only or None)
    print_report(report)

    batch = executor.build_batch(
        name=f"Sync_{pool_type}_{network}",
        description=f"Trust peer adaptors and approve tokens for {pool_type} on {network}",
    )
    path = write_batch_file(batch, output)
    if synchronizer.audit_logger is not None:
        synchronizer.audit_logger.log_event(
            EventType.BATCH_EXPORTED,
            network=network,
            pool_type=pool_type,
            action=f"Exported {len(batch.transactions)} transactions",
            result="success",
            target=str(path),
            details={"chain_id": batch.chain_id, "safe": safe_address},
        )
    click.echo(f"✓ Batch of {len(batch.transactions)} transactions saved to {path}")


@cli.group()
def audit():
    """Inspect audit logs."""
    pass


@audit.command('verify')
@click.argument('log_file', type=click.Path(exists=True, dir_okay=False))
def audit_verify(log_file):
    """Verify the hash chain of an audit log."""
    if verify_audit_file(log_file):
        click.echo(f"✓ Audit chain intact: {log_file}")
    else:
        click.echo(f"✗ Audit chain broken: {log_file}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
