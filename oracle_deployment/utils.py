import base64
import json
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

import requests
import yaml

from oracle_deployment.constants import NEAR_CLI, NEAR_RPC_ENDPOINTS


class ViewFunctionError(ValueError):
    """Raised when the NEAR RPC node rejects a view function call."""


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def check_near_cli() -> str:
    """Checks that near-cli is installed and returns the path of the executable."""
    executable = shutil.which(NEAR_CLI)
    if not executable:
        raise EnvironmentError(
            f"'{NEAR_CLI}' executable not found; please install near-cli to use this script."
        )
    return executable


def get_rpc_endpoint(network: str) -> str:
    rpc_endpoint = NEAR_RPC_ENDPOINTS.get(network)
    if not rpc_endpoint:
        raise ValueError(f"RPC endpoint not found for network '{network}'")
    return rpc_endpoint


def view_function(
    rpc_endpoint: str,
    account_id: str,
    method_name: str,
    args: Optional[Dict[str, Any]] = None,
) -> Any:
    """Calls a view method of a contract and returns its JSON decoded result."""
    encoded_args = json.dumps(args or {}).encode()
    payload = {
        "jsonrpc": "2.0",
        "id": "dontcare",
        "method": "query",
        "params": {
            "request_type": "call_function",
            "finality": "final",
            "account_id": account_id,
            "method_name": method_name,
            "args_base64": base64.b64encode(encoded_args).decode(),
        },
    }
    response = requests.post(rpc_endpoint, json=payload)
    response.raise_for_status()

    data = response.json()
    if "error" in data:
        raise ViewFunctionError(f"{method_name} on {account_id} failed: {data['error']}")

    result = data["result"]
    if "error" in result:
        # contract panics are reported inside the query result
        raise ViewFunctionError(f"{method_name} on {account_id} failed: {result['error']}")

    return json.loads(bytes(result["result"]).decode())
