import click

from oracle_deployment.constants import COMMAND_NOT_FOUND_EXIT_CODE
from oracle_deployment.deployer import Deployer
from oracle_deployment.options import (
    DEFAULT_PARAMETERS,
    confirm_option,
    parameter_options,
    wasm_file_option,
)


@click.command(name="deploy-oracle")
@parameter_options()
@wasm_file_option
@confirm_option
@click.pass_context
def cli(ctx, wasm_file, confirm, **overrides):
    """Deploy and initialize the Flux oracle contract with near-cli."""

    parameters = DEFAULT_PARAMETERS.with_overrides(overrides)
    try:
        deployer = Deployer(parameters=parameters, wasm_file=wasm_file, autoconfirm=not confirm)
    except EnvironmentError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(COMMAND_NOT_FOUND_EXIT_CODE)

    exit_code = deployer.deploy()
    if exit_code != 0:
        click.echo(f"near-cli exited with status {exit_code}", err=True)
    ctx.exit(exit_code)
