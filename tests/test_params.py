import json

import pytest

from oracle_deployment.constants import DEFAULT_INIT_PARAMS_FILEPATH
from oracle_deployment.params import (
    PARAMETER_FLAGS,
    OracleParameters,
    ParameterError,
    build_init_args,
    encode_init_args,
)
from oracle_deployment.utils import _load_yaml

STRING_CONFIG_FIELDS = [
    "gov",
    "final_arbitrator",
    "stake_token",
    "payment_token",
    "validity_bond",
    "default_challenge_window_duration",
    "min_initial_challenge_window_duration",
    "final_arbitrator_invoke_amount",
    "min_resolution_bond",
]


def test_default_parameters(default_parameters):
    assert default_parameters.network == "mainnet"
    assert default_parameters.account_id == "v1.fluxoracle.near"
    assert default_parameters.gov == "flux.sputnik-dao.near"
    assert default_parameters.final_arbitrator == "flux.sputnik-dao.near"
    assert (
        default_parameters.stake_token
        == "0x3Ea8ea4237344C9931214796d9417Af1A1180770.factory.bridge.near"
    )
    assert (
        default_parameters.payment_token
        == "a0b86991c6218b36c1d19d4a2e9eb0ce3606eb48.factory.bridge.near"
    )
    assert default_parameters.validity_bond == "1"
    assert default_parameters.max_outcomes == 8
    assert default_parameters.default_challenge_window_duration == "43200000000000"
    assert default_parameters.min_initial_challenge_window_duration == "180000000000"
    assert default_parameters.final_arbitrator_invoke_amount == "100000000000000000000000"
    assert default_parameters.flux_market_cap == "10000000000000"
    assert default_parameters.total_value_staked == "0"
    assert default_parameters.resolution_fee_percentage == 100
    assert default_parameters.min_resolution_bond == "100000000000000000000"


def test_default_table_covers_every_flag():
    config = _load_yaml(DEFAULT_INIT_PARAMS_FILEPATH)
    assert sorted(config) == sorted(PARAMETER_FLAGS.values())


def test_from_config_coerces_field_types(default_parameters):
    config = default_parameters.to_flags()
    config["validityBond"] = 5
    config["maxOutcomes"] = "3"
    parameters = OracleParameters.from_config(config)
    assert parameters.validity_bond == "5"
    assert parameters.max_outcomes == 3


def test_from_config_rejects_missing_parameter(default_parameters):
    config = default_parameters.to_flags()
    del config["minResolutionBond"]
    with pytest.raises(ParameterError, match="minResolutionBond"):
        OracleParameters.from_config(config)


def test_from_config_rejects_unknown_parameter(default_parameters):
    config = default_parameters.to_flags()
    config["min_resolution_bond"] = "1"
    with pytest.raises(ParameterError, match="min_resolution_bond"):
        OracleParameters.from_config(config)


def test_from_yaml_rejects_malformed_file(tmp_path):
    filepath = tmp_path / "params.yml"
    filepath.write_text("- just\n- a list\n")
    with pytest.raises(ParameterError, match="Malformed"):
        OracleParameters.from_yaml(filepath)


@pytest.mark.parametrize("name", list(PARAMETER_FLAGS))
def test_override_replaces_default(default_parameters, name):
    value = 42 if name in ("max_outcomes", "resolution_fee_percentage") else "overridden"
    parameters = default_parameters.with_overrides({name: value})
    assert getattr(parameters, name) == value
    for other in PARAMETER_FLAGS:
        if other != name:
            assert getattr(parameters, other) == getattr(default_parameters, other)


def test_override_with_none_keeps_default(default_parameters):
    overrides = {name: None for name in PARAMETER_FLAGS}
    assert default_parameters.with_overrides(overrides) == default_parameters


def test_override_does_not_mutate_defaults(default_parameters):
    default_parameters.with_overrides({"gov": "gov.near"})
    assert default_parameters.gov == "flux.sputnik-dao.near"


def test_override_rejects_unknown_parameter(default_parameters):
    with pytest.raises(ParameterError, match="fooBar"):
        default_parameters.with_overrides({"fooBar": "1"})


def test_override_rejects_non_integer(default_parameters):
    with pytest.raises(ParameterError, match="maxOutcomes"):
        default_parameters.with_overrides({"max_outcomes": "eight"})


def test_init_args_at_defaults(default_parameters):
    init_args = build_init_args(default_parameters)
    config = init_args["config"]

    assert init_args["initial_whitelist"] == []
    assert config["max_outcomes"] == 8
    assert config["resolution_fee_percentage"] == 100
    assert config["fee"]["resolution_fee_percentage"] == config["resolution_fee_percentage"]
    assert config["gov"] == default_parameters.gov
    assert config["fee"]["flux_market_cap"] == "10000000000000"
    assert config["fee"]["total_value_staked"] == "0"


def test_init_args_layout(default_parameters):
    init_args = build_init_args(default_parameters)
    assert list(init_args) == ["initial_whitelist", "config"]
    assert list(init_args["config"]) == [
        "gov",
        "final_arbitrator",
        "stake_token",
        "payment_token",
        "validity_bond",
        "max_outcomes",
        "default_challenge_window_duration",
        "min_initial_challenge_window_duration",
        "final_arbitrator_invoke_amount",
        "resolution_fee_percentage",
        "min_resolution_bond",
        "fee",
    ]
    assert list(init_args["config"]["fee"]) == [
        "flux_market_cap",
        "total_value_staked",
        "resolution_fee_percentage",
    ]


def test_init_args_field_types(default_parameters):
    parameters = default_parameters.with_overrides(
        {"max_outcomes": "12", "resolution_fee_percentage": "5000"}
    )
    decoded = json.loads(encode_init_args(build_init_args(parameters)))
    config = decoded["config"]

    for field in STRING_CONFIG_FIELDS:
        assert isinstance(config[field], str), field
    assert config["max_outcomes"] == 12
    assert config["resolution_fee_percentage"] == 5000
    assert isinstance(config["fee"]["flux_market_cap"], str)
    assert isinstance(config["fee"]["total_value_staked"], str)
    assert config["fee"]["resolution_fee_percentage"] == 5000


def test_encoded_init_args_survive_awkward_values(default_parameters):
    parameters = default_parameters.with_overrides(
        {"gov": 'gov"quoted\\.near', "final_arbitrator": "arbiter. \"fee\": {}"}
    )
    init_args = build_init_args(parameters)
    encoded = encode_init_args(init_args)

    assert "\n" not in encoded
    assert json.loads(encoded) == init_args
    assert json.loads(encoded)["config"]["gov"] == 'gov"quoted\\.near'
