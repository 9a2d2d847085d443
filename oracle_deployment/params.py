import json
import typing
from collections import OrderedDict
from pathlib import Path
from typing import Any, Dict

from oracle_deployment.constants import DEFAULT_INIT_PARAMS_FILEPATH, INIT_ARGS_JSON_FORMAT
from oracle_deployment.utils import _load_yaml


class ParameterError(ValueError):
    """Raised when a parameter table or an override does not match the known parameters."""


# field name -> command line flag / init params key
PARAMETER_FLAGS = OrderedDict(
    [
        ("network", "network"),
        ("account_id", "accountId"),
        ("gov", "gov"),
        ("final_arbitrator", "finalArbitrator"),
        ("stake_token", "stakeToken"),
        ("payment_token", "paymentToken"),
        ("validity_bond", "validityBond"),
        ("max_outcomes", "maxOutcomes"),
        ("default_challenge_window_duration", "defaultChallengeWindowDuration"),
        ("min_initial_challenge_window_duration", "minInitialChallengeWindowDuration"),
        ("final_arbitrator_invoke_amount", "finalArbitratorInvokeAmount"),
        ("flux_market_cap", "fluxMarketCap"),
        ("total_value_staked", "totalValueStaked"),
        ("resolution_fee_percentage", "resolutionFeePercentage"),
        ("min_resolution_bond", "minResolutionBond"),
    ]
)

# bare JSON numbers in the init args, every other parameter is passed as a string
INTEGER_PARAMETERS = ["max_outcomes", "resolution_fee_percentage"]


class OracleParameters(typing.NamedTuple):
    """
    The resolved deployment and initialization values of a single oracle deployment.

    Large amounts and durations are kept as decimal strings since the contract
    takes them as U128/U64 JSON strings; only small counters are integers.
    """

    network: str
    account_id: str
    gov: str
    final_arbitrator: str
    stake_token: str
    payment_token: str
    validity_bond: str
    max_outcomes: int
    default_challenge_window_duration: str
    min_initial_challenge_window_duration: str
    final_arbitrator_invoke_amount: str
    flux_market_cap: str
    total_value_staked: str
    resolution_fee_percentage: int
    min_resolution_bond: str

    @classmethod
    def _coerce(cls, name: str, value: Any) -> Any:
        field_type = int if name in INTEGER_PARAMETERS else str
        try:
            return field_type(value)
        except (TypeError, ValueError):
            raise ParameterError(
                f"Parameter '{PARAMETER_FLAGS[name]}' has a value '{value}' "
                f"that is not a valid {field_type.__name__}"
            )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "OracleParameters":
        """Builds the parameters from a mapping keyed by flag name."""
        flag_names = list(PARAMETER_FLAGS.values())
        unknown = [key for key in config if key not in flag_names]
        if unknown:
            raise ParameterError(f"Unknown parameter(s) in init params: {', '.join(unknown)}")
        missing = [flag for flag in flag_names if config.get(flag) is None]
        if missing:
            raise ParameterError(f"Missing parameter(s) in init params: {', '.join(missing)}")

        values = {
            name: cls._coerce(name, config[flag]) for name, flag in PARAMETER_FLAGS.items()
        }
        return cls(**values)

    @classmethod
    def from_yaml(cls, filepath: Path) -> "OracleParameters":
        config = _load_yaml(filepath)
        if not isinstance(config, dict):
            raise ParameterError(f"Malformed init params file {filepath}.")
        return cls.from_config(config)

    def with_overrides(self, overrides: Dict[str, Any]) -> "OracleParameters":
        """
        Returns a copy where every override that is not None replaces the current value.
        Overrides are keyed by field name.
        """
        replacements = dict()
        for name, value in overrides.items():
            if name not in PARAMETER_FLAGS:
                raise ParameterError(f"Unknown parameter '{name}'")
            if value is None:
                continue
            replacements[name] = self._coerce(name, value)
        return self._replace(**replacements)

    def to_flags(self) -> "OrderedDict[str, Any]":
        return OrderedDict((flag, getattr(self, name)) for name, flag in PARAMETER_FLAGS.items())


def load_default_parameters(filepath: Path = DEFAULT_INIT_PARAMS_FILEPATH) -> OracleParameters:
    return OracleParameters.from_yaml(filepath)


def build_init_args(parameters: OracleParameters) -> OrderedDict:
    """Builds the arguments of the oracle's `new` init function."""
    fee = OrderedDict(
        [
            ("flux_market_cap", parameters.flux_market_cap),
            ("total_value_staked", parameters.total_value_staked),
            ("resolution_fee_percentage", parameters.resolution_fee_percentage),
        ]
    )
    config = OrderedDict(
        [
            ("gov", parameters.gov),
            ("final_arbitrator", parameters.final_arbitrator),
            ("stake_token", parameters.stake_token),
            ("payment_token", parameters.payment_token),
            ("validity_bond", parameters.validity_bond),
            ("max_outcomes", parameters.max_outcomes),
            ("default_challenge_window_duration", parameters.default_challenge_window_duration),
            (
                "min_initial_challenge_window_duration",
                parameters.min_initial_challenge_window_duration,
            ),
            ("final_arbitrator_invoke_amount", parameters.final_arbitrator_invoke_amount),
            ("resolution_fee_percentage", parameters.resolution_fee_percentage),
            ("min_resolution_bond", parameters.min_resolution_bond),
            ("fee", fee),
        ]
    )
    return OrderedDict([("initial_whitelist", []), ("config", config)])


def encode_init_args(init_args: Dict[str, Any]) -> str:
    return json.dumps(init_args, **INIT_ARGS_JSON_FORMAT)
