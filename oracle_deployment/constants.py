from pathlib import Path

import oracle_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(oracle_deployment.__file__).parent
INIT_PARAMS_DIR = DEPLOYMENT_DIR / "init_params"
DEFAULT_INIT_PARAMS_FILEPATH = INIT_PARAMS_DIR / "mainnet.yml"

#
# Networks
#

MAINNET = "mainnet"
TESTNET = "testnet"
BETANET = "betanet"

SUPPORTED_NETWORKS = [MAINNET, TESTNET, BETANET]

NEAR_RPC_ENDPOINTS = {
    MAINNET: "https://rpc.mainnet.near.org",
    TESTNET: "https://rpc.testnet.near.org",
    BETANET: "https://rpc.betanet.near.org",
}

#
# near-cli
#

NEAR_CLI = "near"
NEAR_ENV_VAR = "NEAR_ENV"

#
# Oracle contract
#

DEFAULT_WASM_FILE = "./res/oracle.wasm"
INIT_FUNCTION = "new"
GET_CONFIG_METHOD = "get_config"

# near-cli passes --initArgs through verbatim, keep it on one line
INIT_ARGS_JSON_FORMAT = {"separators": (",", ":")}

# shell exit status of a command that could not be found
COMMAND_NOT_FOUND_EXIT_CODE = 127
