from collections import OrderedDict

import click


def _confirm_deployment(account_id: str, network: str) -> None:
    """Asks the user to confirm the deployment of the oracle contract."""
    click.confirm(f"Deploy oracle to {account_id} on {network}?", abort=True)


def _print_config(config: OrderedDict, indent: int = 1) -> None:
    for name, value in config.items():
        if isinstance(value, dict):
            print("\t" * indent + f"{name}:")
            _print_config(value, indent=indent + 1)
        else:
            print("\t" * indent + f"{name}={value}")


def _confirm_resolution(init_args: OrderedDict, account_id: str, network: str) -> None:
    """Asks the user to confirm the resolved init arguments of the oracle contract."""
    print(f"\nInit arguments for {account_id}")
    _print_config(init_args)
    _confirm_deployment(account_id, network)
