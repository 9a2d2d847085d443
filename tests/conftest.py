import json
import subprocess

import pytest
from click.testing import CliRunner

from oracle_deployment.params import build_init_args, load_default_parameters


class FakeNearCli:
    """Records near-cli invocations instead of running them."""

    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def run(self, command, env=None, **kwargs):
        self.calls.append((command, env))
        return subprocess.CompletedProcess(command, self.returncode)


def flag_value(command, flag):
    return command[command.index(flag) + 1]


def init_args_from_command(command):
    return json.loads(flag_value(command, "--initArgs"))


@pytest.fixture(scope="session")
def default_parameters():
    return load_default_parameters()


@pytest.fixture(scope="session")
def default_init_args(default_parameters):
    return build_init_args(default_parameters)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def near_cli(monkeypatch):
    fake = FakeNearCli()
    monkeypatch.setattr("oracle_deployment.utils.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("oracle_deployment.near.subprocess.run", fake.run)
    return fake
