import click

from oracle_deployment.constants import DEFAULT_WASM_FILE, SUPPORTED_NETWORKS
from oracle_deployment.params import INTEGER_PARAMETERS, PARAMETER_FLAGS, load_default_parameters

DEFAULT_PARAMETERS = load_default_parameters()

PARAMETER_HELP = {
    "network": "NEAR network to deploy to, exported to near-cli as NEAR_ENV.",
    "account_id": "Account the oracle contract is deployed to.",
    "gov": "Governance account of the oracle.",
    "final_arbitrator": "Account that settles escalated disputes.",
    "stake_token": "Fungible token used for staking on outcomes.",
    "payment_token": "Fungible token used to pay resolution fees.",
    "validity_bond": "Bond a requester posts for a data request.",
    "max_outcomes": "Maximum number of outcomes of a data request.",
    "default_challenge_window_duration": "Default challenge window, in nanoseconds.",
    "min_initial_challenge_window_duration": "Minimum initial challenge window, in nanoseconds.",
    "final_arbitrator_invoke_amount": "Bond size at which the final arbitrator is invoked.",
    "flux_market_cap": "Flux market cap used by the fee calculation.",
    "total_value_staked": "Total value staked used by the fee calculation.",
    "resolution_fee_percentage": "Resolution fee percentage (100 = 0.1%).",
    "min_resolution_bond": "Minimum bond for a resolution.",
}


def _parameter_option(name: str):
    flag = PARAMETER_FLAGS[name]
    return click.option(
        f"--{flag}",
        name,
        help=PARAMETER_HELP[name],
        type=int if name in INTEGER_PARAMETERS else str,
        default=None,
        show_default=str(getattr(DEFAULT_PARAMETERS, name)),
    )


def parameter_options(exclude=()):
    """Adds one option per oracle parameter; omitted options are passed as None."""

    def decorator(func):
        for name in reversed(PARAMETER_FLAGS):
            if name not in exclude:
                func = _parameter_option(name)(func)
        return func

    return decorator


wasm_file_option = click.option(
    "--wasmFile",
    "wasm_file",
    help="Compiled oracle contract to deploy.",
    type=click.Path(dir_okay=False),
    default=DEFAULT_WASM_FILE,
    show_default=True,
)

confirm_option = click.option(
    "--confirm",
    help="Review and confirm the init arguments before deploying.",
    is_flag=True,
)

rpc_network_option = click.option(
    "--network",
    "network",
    help=(
        "NEAR network the oracle is deployed on; "
        f"without --rpcUrl one of: {', '.join(SUPPORTED_NETWORKS)}."
    ),
    type=str,
    default=DEFAULT_PARAMETERS.network,
    show_default=True,
)

rpc_url_option = click.option(
    "--rpcUrl",
    "rpc_url",
    help="NEAR RPC endpoint; defaults to the public endpoint of the network.",
    type=str,
)
