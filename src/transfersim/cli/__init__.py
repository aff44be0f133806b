import click

from transfersim.version import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


from . import config, simulate  # noqa: F401, E402
