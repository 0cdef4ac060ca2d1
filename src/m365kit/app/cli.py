import click

from m365kit.app.app_open import AppOpenCommand
from m365kit.command import global_options, run_command


@click.group("app", context_settings=dict(help_option_names=["-h", "--help"]))
def app_cli():
    """Azure AD app commands for the current project."""
    pass


@app_cli.command("open")
@click.option("--appId", "appId", help="Application (client) ID of the Azure AD application registration to open.")
@click.option("--preview", is_flag=True, help="Use the Azure portal preview site.")
@global_options
@click.pass_context
def app_open_cmd(ctx, **options):
    """Returns deep link of the current AD app to open the Azure portal on the Azure AD app page."""
    run_command(ctx, AppOpenCommand(), options)
