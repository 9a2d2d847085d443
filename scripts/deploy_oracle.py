#!/usr/bin/python3

from oracle_deployment.cli.deploy import cli

if __name__ == "__main__":
    cli()
