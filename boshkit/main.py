"""
boshkit CLI

Main entry point for the command-line interface.
"""

import sys
from typing import Optional

import click
from rich.console import Console

from .bosh.vars_store import CredhubGetter, SSHKeyGetter
from .commands.print_env import PrintEnv
from .core.azure_client import AzureClient
from .core.exceptions import AzureClientError, BoshkitError
from .core.logging import ConsoleLogger, get_logger, setup_logging
from .fileio import FileIO
from .leftovers.cleaner import LeftoversCleaner
from .leftovers.groups import Groups
from .reporters.cli_reporter import CLIReporter
from .storage.state import StateStore, StateValidator
from .terraform.outputs import OutputManager


console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


@click.group()
@click.version_option(version="0.1.0", prog_name="boshkit")
@click.option(
    "--log-level",
    envvar="BOSHKIT_LOG_LEVEL",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Diagnostic log level, written to stderr (default: WARNING)",
)
@click.option(
    "--log-file",
    default=None,
    help="Also write diagnostic logs to this file",
)
def cli(log_level: str, log_file: Optional[str]):
    """
    boshkit: tooling for BOSH environments on Azure

    Prints shell environments for the bosh and credhub CLIs and cleans
    up resource groups left behind by torn-down environments.
    """
    setup_logging(level=log_level, log_file=log_file, console=err_console)


@cli.command("leftovers")
@click.option(
    "--subscription-id",
    envvar="AZURE_SUBSCRIPTION_ID",
    required=True,
    help="Azure subscription to clean (env: AZURE_SUBSCRIPTION_ID)",
)
@click.option(
    "--filter",
    "name_filter",
    default="",
    help="Only consider resource groups whose name contains this string",
)
@click.option(
    "--no-confirm",
    "-n",
    is_flag=True,
    default=False,
    help="Skip the per-resource confirmation prompt (dangerous!)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview what would be deleted without actually deleting",
)
def leftovers(subscription_id: str, name_filter: str, no_confirm: bool, dry_run: bool):
    """
    Delete Azure resource groups whose names match a filter.

    Every matching group is confirmed one at a time before it is
    selected for deletion.

    Examples:

        # Preview what would be deleted
        boshkit leftovers --filter bbl-env --dry-run

        # Delete with a prompt per resource group
        boshkit leftovers --filter bbl-env

        # Delete every match without prompting (dangerous!)
        boshkit leftovers --filter bbl-env --no-confirm
    """
    reporter = CLIReporter(console)

    try:
        with AzureClient(subscription_id=subscription_id) as client:
            try:
                client.validate_credentials()
            except AzureClientError as e:
                console.print(f"\n[red bold]Authentication Error:[/red bold] {str(e)}")
                sys.exit(1)

            reporter.print_mode(dry_run, no_confirm)

            prompter = ConsoleLogger(console, no_confirm=no_confirm)
            groups = Groups(client.get_resource_groups_client(), prompter)
            resources = groups.list(name_filter)

            reporter.print_resources(resources)
            if not resources:
                return

            console.print(
                f"\n[bold]{'Simulating deletion' if dry_run else 'Deleting'}...[/bold]\n"
            )
            summary = LeftoversCleaner().delete_batch(
                resources,
                dry_run=dry_run,
                progress_callback=reporter.print_result,
            )
            reporter.print_delete_summary(summary, dry_run)

    except BoshkitError as e:
        console.print(f"\n[red bold]Error:[/red bold] {str(e)}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user.[/yellow]")
        sys.exit(130)


@cli.command("print-env")
@click.option(
    "--state-dir",
    "-s",
    envvar="BBL_STATE_DIR",
    default=".",
    type=click.Path(file_okay=False),
    help="Directory holding bbl-state.json (env: BBL_STATE_DIR)",
)
@click.option(
    "--terraform-binary",
    envvar="BBL_TERRAFORM_BINARY",
    default="terraform",
    help="Terraform executable used to read outputs",
)
def print_env(state_dir: str, terraform_binary: str):
    """
    Print export statements for the bosh and credhub CLIs.

    Examples:

        eval "$(boshkit print-env --state-dir ./my-env)"
    """
    stdout_logger = ConsoleLogger(console)
    stderr_logger = ConsoleLogger(err_console)

    command = PrintEnv(
        stdout_logger,
        stderr_logger,
        StateValidator(state_dir),
        SSHKeyGetter(state_dir),
        CredhubGetter(state_dir),
        OutputManager(f"{state_dir}/terraform", binary=terraform_binary),
        FileIO(),
    )

    try:
        state = StateStore(state_dir).get()
        command.check_fast_fails([], state)
        command.execute([], state)
    except (BoshkitError, OSError) as e:
        logger.debug("print-env failed", exc_info=True)
        err_console.print(f"[red bold]Error:[/red bold] {str(e)}")
        sys.exit(1)


@cli.command("validate")
@click.option(
    "--subscription-id",
    envvar="AZURE_SUBSCRIPTION_ID",
    required=True,
    help="Azure subscription to validate against (env: AZURE_SUBSCRIPTION_ID)",
)
def validate_credentials(subscription_id: str):
    """Validate Azure credentials for a subscription."""
    try:
        with AzureClient(subscription_id=subscription_id) as client:
            client.validate_credentials()

        console.print("\n[green bold]Azure credentials are valid![/green bold]")
        console.print(f"\n  Subscription: {subscription_id}")
        console.print()

    except AzureClientError as e:
        console.print(f"\n[red bold]Validation Failed:[/red bold] {str(e)}")
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
