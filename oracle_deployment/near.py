import os
import subprocess
import typing
from typing import Dict, List, Mapping, Optional

from oracle_deployment.constants import NEAR_CLI, NEAR_ENV_VAR


class NearDeployment(typing.NamedTuple):
    """A single `near deploy` invocation."""

    network: str
    account_id: str
    wasm_file: str
    init_function: str
    init_args: str

    def command(self) -> List[str]:
        return [
            NEAR_CLI,
            "deploy",
            "--accountId",
            self.account_id,
            "--wasmFile",
            self.wasm_file,
            "--initFunction",
            self.init_function,
            "--initArgs",
            self.init_args,
        ]

    def environment(self, base: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """near-cli reads the target network from NEAR_ENV, everything else is inherited."""
        env = dict(os.environ if base is None else base)
        env[NEAR_ENV_VAR] = self.network
        return env


def run_deployment(deployment: NearDeployment) -> int:
    """Runs near-cli to completion and returns its exit status as a shell would report it."""
    result = subprocess.run(deployment.command(), env=deployment.environment())
    if result.returncode < 0:
        # killed by signal N, reported as 128 + N
        return 128 - result.returncode
    return result.returncode
