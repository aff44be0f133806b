import click
from pydantic import TypeAdapter
from web3 import Web3
from web3.types import BlockIdentifier

from transfersim.cli import cli
from transfersim.cli.utils import get_web3_from_config, get_web3_from_url, parse_block_identifier
from transfersim.config import CONFIG_FILE, settings
from transfersim.constants import RATIO_SCALE
from transfersim.exceptions import TransferSimValueError
from transfersim.simulation import fee_amount, received_ratio, simulate_transfer


def _block_callback(
    ctx: click.Context,  # noqa: ARG001
    param: click.Parameter,  # noqa: ARG001
    value: str,
) -> BlockIdentifier:
    try:
        return parse_block_identifier(value)
    except ValueError:
        msg = f"{value!r} is not a block number or tag"
        raise click.BadParameter(msg) from None


def _format_fee_percent(ratio: int) -> str:
    """
    Format the fee implied by a 1e18-scaled received ratio as a percentage with two decimals,
    truncated.
    """

    fee_bps = (RATIO_SCALE - ratio) * 10_000 // RATIO_SCALE
    return f"{fee_bps // 100}.{fee_bps % 100:02d}%"


def _get_web3(rpc_url: str | None, chain_id: int | None) -> Web3:
    if rpc_url is not None:
        return get_web3_from_url(rpc_url)

    chain_id = chain_id if chain_id is not None else settings.default_chain_id
    if chain_id is None:
        msg = f"Provide --rpc or --chain-id, or set default_chain_id in {CONFIG_FILE}"
        raise click.UsageError(msg)

    try:
        return get_web3_from_config(chain_id=chain_id)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from None


@cli.command("simulate")
@click.argument("token")
@click.argument("source")
@click.argument("destination")
@click.argument("amount", type=int)
@click.option("--rpc", "rpc_url", help="RPC endpoint (HTTP, WebSocket, or IPC path)")
@click.option("--chain-id", type=int, help="Use the RPC endpoint configured for this chain")
@click.option(
    "--block",
    "block_identifier",
    default="latest",
    show_default=True,
    callback=_block_callback,
    help="Block number or tag to simulate against",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def simulate(
    token: str,
    source: str,
    destination: str,
    amount: int,
    rpc_url: str | None,
    chain_id: int | None,
    block_identifier: BlockIdentifier,
    *,
    as_json: bool,
) -> None:
    """
    Simulate TOKEN.transferFrom(SOURCE, DESTINATION, AMOUNT) and report the amount DESTINATION
    receives. SOURCE must have approved DESTINATION to spend AMOUNT (a zero amount needs no
    approval).

    Exits with status 1 if the simulation failed.
    """

    w3 = _get_web3(rpc_url=rpc_url, chain_id=chain_id)

    try:
        received, error = simulate_transfer(
            token=token,
            source=source,
            destination=destination,
            amount=amount,
            w3=w3,
            block_identifier=block_identifier,
        )
    except TransferSimValueError as exc:
        raise click.BadParameter(str(exc)) from None

    ratio = received_ratio(amount=amount, received=received)

    if as_json:
        click.echo(
            TypeAdapter(dict).dump_json(
                {
                    "amount": str(amount),
                    "received": str(received),
                    "fee": str(fee_amount(amount=amount, received=received)),
                    "ratio": str(ratio),
                    "error": None if error is None else str(error),
                },
                indent=2,
            )
        )
    else:
        click.echo(f"amount   : {amount}")
        click.echo(f"received : {received}")
        click.echo(f"error    : {'null' if error is None else error}")
        if error is None:
            if ratio == RATIO_SCALE:
                click.echo("No fee on transfer detected")
            elif ratio < RATIO_SCALE:
                click.echo(f"Fee on transfer detected: {_format_fee_percent(ratio)}")
            else:
                click.echo("Received more than the requested amount (rebasing or reflection token?)")

    if error is not None:
        raise click.exceptions.Exit(1)
