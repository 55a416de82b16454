# src/resource_quota_check/cli.py
"""Command line entry point for the resource quota check."""

import asyncio
import sys

import click

from resource_quota_check.core.utils import setup_logging
from resource_quota_check.runner import CheckRunner


@click.command()
@click.option('--debug', is_flag=True, help='Enable debug logging (overrides DEBUG)')
def main(debug):
    """
    Check resource quotas across all namespaces and report to Kuberhealthy.

    Configure with environment variables:
        BLACKLIST=kube-system,kube-public   namespaces to skip
        WHITELIST=app-a,app-b               only namespaces to inspect
        THRESHOLD=0.9                       usage fraction that alerts
        DEBUG=false                         debug logging
        KUBECONFIG=~/.kube/config           used outside the cluster

    Kuberhealthy supplies KH_REPORTING_URL, KH_RUN_UUID and
    KH_CHECK_RUN_DEADLINE when it schedules the check.
    """
    setup_logging(log_level="DEBUG" if debug else "INFO")

    overrides = {"debug": True} if debug else {}
    runner = CheckRunner(overrides=overrides)
    exit_code = asyncio.run(runner.run())
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
