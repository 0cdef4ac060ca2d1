import click

from m365kit.app.cli import app_cli
from m365kit.auth import DEFAULT_CLIENT_ID, Session, Settings
from m365kit.command import Logger
from m365kit.planner.cli import planner_cli
from m365kit.spo.cli import spo_cli


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("--debug", is_flag=True, envvar="DEBUG", help="Enable debug mode.")
@click.option("--verbose", is_flag=True, help="Verbose output.")
@click.option(
    "-o",
    "--output",
    type=click.Choice(["json", "text"]),
    envvar="M365_OUTPUT",
    default="json",
    show_default=True,
    help="Output format. Env: M365_OUTPUT",
)
@click.option(
    "--tenant",
    envvar="M365_TENANT",
    default="common",
    show_default=True,
    help="Azure AD tenant ID or domain. Env: M365_TENANT",
)
@click.option(
    "--client-id",
    envvar="M365_CLIENT_ID",
    default=DEFAULT_CLIENT_ID,
    show_default=True,
    help="App registration client ID. Env: M365_CLIENT_ID",
)
@click.option(
    "--client-secret",
    envvar="M365_CLIENT_SECRET",
    help="App registration client secret; device code login is used when omitted. Env: M365_CLIENT_SECRET",
)
@click.option(
    "--access-token",
    envvar="M365_ACCESS_TOKEN",
    help="Microsoft Graph access token to use instead of signing in; other resources still sign in. Env: M365_ACCESS_TOKEN",
)
@click.option(
    "--spo-url",
    envvar="M365_SPO_URL",
    help="SharePoint Online root URL, e.g. https://contoso.sharepoint.com. Env: M365_SPO_URL",
)
@click.option(
    "--auto-open-in-browser",
    is_flag=True,
    envvar="M365_AUTO_OPEN_IN_BROWSER",
    help="Open links in the default browser. Env: M365_AUTO_OPEN_IN_BROWSER",
)
@click.option(
    "--retry-max",
    type=int,
    envvar="M365_RETRY_MAX",
    default=5,
    show_default=True,
    help="Max attempts for retryable HTTP errors. Env: M365_RETRY_MAX",
)
@click.option(
    "--retry-backoff",
    type=float,
    envvar="M365_RETRY_BACKOFF",
    default=2.0,
    show_default=True,
    help="Exponential backoff base for retries. Env: M365_RETRY_BACKOFF",
)
@click.pass_context
def cli(ctx, debug, verbose, output, **connection):
    """Manage Microsoft 365 from the command line."""
    ctx.ensure_object(dict)
    settings = Settings(output=output, verbose=verbose, debug=debug, **connection)
    logger = Logger(output=output, verbose=settings.verbose, debug=debug)
    ctx.obj["DEBUG"] = debug
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger
    ctx.obj["session"] = Session(settings, logger, http=ctx.obj.get("http_session"))


cli.add_command(app_cli)
cli.add_command(planner_cli)
cli.add_command(spo_cli)
