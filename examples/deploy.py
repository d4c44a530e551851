"""Bind deploy arguments onto a dataclass and print them."""
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from argbind import ArgumentBinder, argument, option
from argbind.console import console
from argbind.utils import setup_logging


class Env(Enum):
    """Deployment environments."""

    DEV = 1
    STAGING = 2
    PROD = 3


@dataclass
class DeployArgs:
    env: Env = argument(0)
    services: list[str] = argument(1, optional=True, default_factory=list)
    config: Path | None = option("Configuration file to deploy with.", default=None)
    retries: int = option("How many times a failed service is retried.", default=0)
    tags: list[str] = option(
        "Labels attached to the release. Takes every following token up to the "
        "next option.",
        default_factory=list,
    )
    verbose: bool = option("Print more output.", default=False)
    version: bool = option("Show the version and exit.", autonomous=True, default=False)
    help: bool = option("Show this message and exit.", autonomous=True, default=False)


def main() -> None:
    setup_logging(mode="cli", log_filename="deploy.log", console_log_level=logging.WARNING)
    binder = ArgumentBinder(DeployArgs, app_name="deploy.py")
    args = binder.parse_or_exit()

    if args.help:
        binder.print_usage(console)
        return
    if args.version:
        console.print("deploy 0.1.0")
        return

    services = ", ".join(args.services) or "all services"
    console.print(f"Deploying [bold]{services}[/bold] to {args.env.name.lower()}")
    if args.verbose:
        console.print(args)


if __name__ == "__main__":
    main()
