import click

from m365kit.command import global_options, run_command
from m365kit.spo.sitescript_set import SiteScriptSetCommand


@click.group("spo", context_settings=dict(help_option_names=["-h", "--help"]))
def spo_cli():
    """SharePoint Online commands."""
    pass


@spo_cli.group("sitescript")
def sitescript_cli():
    """Manage site scripts."""
    pass


@sitescript_cli.command("set")
@click.option("-i", "--id", "id", required=True, help="Site script ID.")
@click.option("-t", "--title", "title", help="New title for the site script.")
@click.option("-d", "--description", "description", help="New description for the site script.")
@click.option("-v", "--version", "version", help="New version number for the site script.")
@click.option("-c", "--content", "content", help="New JSON script for the site script.")
@global_options
@click.pass_context
def sitescript_set_cmd(ctx, **options):
    """Updates existing site script."""
    run_command(ctx, SiteScriptSetCommand(), options)
