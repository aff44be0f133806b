from typing import Literal

import click
import tomlkit
from pydantic import TypeAdapter

from transfersim.cli import cli
from transfersim.config import CONFIG_FILE, Settings, save_config_to_file, settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: Literal["json", "toml"]) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(mode="json"),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(mode="json", exclude_none=True),
                ),
            )


@config.command("init")
@click.option(
    "--rpc",
    "rpc_url",
    help="RPC endpoint to register for the chain given by --chain-id",
)
@click.option(
    "--chain-id",
    type=int,
    default=1,
    show_default=True,
    help="Chain ID of the RPC endpoint, also set as the default chain",
)
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def config_init(rpc_url: str | None, chain_id: int, *, force: bool) -> None:
    """
    Write a new configuration file.
    """

    if CONFIG_FILE.exists() and not force:
        click.echo(f"A configuration file already exists at {CONFIG_FILE}. Use --force to replace.")
        raise click.exceptions.Exit(1)

    new_settings = Settings.model_validate(
        {
            "default_chain_id": chain_id,
            "rpc": {chain_id: rpc_url} if rpc_url is not None else {},
        }
    )
    save_config_to_file(new_settings, CONFIG_FILE)
    click.echo(f"Created a configuration file at {CONFIG_FILE}.")
