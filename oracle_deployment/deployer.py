from oracle_deployment.confirm import _confirm_resolution
from oracle_deployment.constants import DEFAULT_WASM_FILE, INIT_FUNCTION
from oracle_deployment.near import NearDeployment, run_deployment
from oracle_deployment.params import OracleParameters, build_init_args, encode_init_args
from oracle_deployment.utils import check_near_cli


class Deployer:
    """
    Represents the resolved parameters of an oracle deployment
    plus confirmed execution through near-cli.
    """

    def __init__(
        self,
        parameters: OracleParameters,
        wasm_file: str = DEFAULT_WASM_FILE,
        init_function: str = INIT_FUNCTION,
        autoconfirm: bool = True,
    ):
        self.near_cli = check_near_cli()
        self.parameters = parameters
        self.init_args = build_init_args(parameters)
        self.deployment = NearDeployment(
            network=parameters.network,
            account_id=parameters.account_id,
            wasm_file=str(wasm_file),
            init_function=init_function,
            init_args=encode_init_args(self.init_args),
        )
        self._autoconfirm = autoconfirm
        self._print_deployment_info()

    def deploy(self) -> int:
        """Deploys and initializes the oracle, returning the exit code of near-cli."""
        if not self._autoconfirm:
            _confirm_resolution(
                self.init_args,
                account_id=self.deployment.account_id,
                network=self.deployment.network,
            )
        return run_deployment(self.deployment)

    def _print_deployment_info(self):
        print(
            f"Account: {self.deployment.account_id}",
            f"Network: {self.deployment.network}",
            f"Wasm: {self.deployment.wasm_file}",
            f"Init function: {self.deployment.init_function}",
            f"Init args: {self.deployment.init_args}",
            f"near-cli: {self.near_cli}",
            sep="\n",
        )
