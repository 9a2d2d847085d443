from typing import Any, Dict, List, Tuple

import click

from oracle_deployment.constants import GET_CONFIG_METHOD, SUPPORTED_NETWORKS
from oracle_deployment.options import (
    DEFAULT_PARAMETERS,
    parameter_options,
    rpc_network_option,
    rpc_url_option,
)
from oracle_deployment.params import build_init_args
from oracle_deployment.utils import get_rpc_endpoint, view_function


def diff_config(
    expected: Dict[str, Any], actual: Dict[str, Any], prefix: str = ""
) -> Tuple[List[Tuple[str, Any, Any]], List[str]]:
    """
    Compares an expected oracle config with the one reported by the contract.
    Returns the mismatching (key, expected, actual) entries and the expected keys
    that the contract does not report.
    """
    mismatches, unreported = list(), list()
    for name, expected_value in expected.items():
        key = f"{prefix}{name}"
        if name not in actual:
            unreported.append(key)
            continue
        actual_value = actual[name]
        if isinstance(expected_value, dict) and isinstance(actual_value, dict):
            nested_mismatches, nested_unreported = diff_config(
                expected_value, actual_value, prefix=f"{key}."
            )
            mismatches.extend(nested_mismatches)
            unreported.extend(nested_unreported)
        elif expected_value != actual_value:
            mismatches.append((key, expected_value, actual_value))
    return mismatches, unreported


@click.command(name="check-oracle-deployment")
@rpc_network_option
@rpc_url_option
@parameter_options(exclude=("network",))
@click.pass_context
def cli(ctx, network, rpc_url, **overrides):
    """Check the config of a deployed oracle against the expected init arguments."""

    if not rpc_url and network not in SUPPORTED_NETWORKS:
        raise click.BadOptionUsage(
            option_name="--network",
            message=f"Unknown network '{network}'; specify --rpcUrl to use a custom endpoint.",
        )

    parameters = DEFAULT_PARAMETERS.with_overrides(dict(overrides, network=network))
    expected_config = build_init_args(parameters)["config"]

    rpc_endpoint = rpc_url or get_rpc_endpoint(network)
    click.echo(f"Using oracle deployed at {parameters.account_id} on {network} ({rpc_endpoint})")
    actual_config = view_function(
        rpc_endpoint=rpc_endpoint,
        account_id=parameters.account_id,
        method_name=GET_CONFIG_METHOD,
    )

    mismatches, unreported = diff_config(expected_config, actual_config)
    for key in unreported:
        click.echo(f"(i) {key} is not reported by {GET_CONFIG_METHOD}, skipping")
    for key, expected_value, actual_value in mismatches:
        click.echo(f"[mismatch] {key}: expected {expected_value!r}, got {actual_value!r}")

    if mismatches:
        ctx.exit(1)
    click.echo("[ok] Oracle is configured correctly")
