"""Resolution of the Azure AD app a command works on.

Projects created with the CLI keep the apps they registered in a
``.m365rc.json`` file in the project folder, so ``--appId`` may be omitted
when running from there.
"""

import json
import os

import click

from m365kit.command import Command
from m365kit.errors import CommandError
from m365kit.validation import IsGuid

M365RC_JSON_PATH = ".m365rc.json"


def read_m365rc(path: str = M365RC_JSON_PATH):
    if not os.path.exists(path):
        return None
    with open(path, encoding="utf-8") as fh:
        contents = fh.read()
    if not contents.strip():
        raise CommandError(f"File {path} is empty")
    try:
        return json.loads(contents)
    except ValueError:
        raise CommandError(f"Could not parse file: {path}")


def choose_app(apps: list) -> str:
    click.echo("Multiple Azure AD apps found in .m365rc.json.", err=True)
    for i, app in enumerate(apps, start=1):
        click.echo(f"  {i}. {app.get('name')} ({app['appId']})", err=True)
    index = click.prompt(
        "Which app would you like to use?",
        type=click.IntRange(1, len(apps)),
        err=True,
    )
    return apps[index - 1]["appId"]


class AppCommand(Command):
    rules = (IsGuid("appId"),)

    def __init__(self, m365rc_path: str = M365RC_JSON_PATH):
        self.m365rc_path = m365rc_path
        self.app_id = None

    def resolve_app_id(self, options: dict) -> str:
        m365rc = read_m365rc(self.m365rc_path)
        apps = (m365rc or {}).get("apps") or []
        app_id = options.get("appId")

        if not apps:
            if not app_id:
                raise CommandError("Specify the Azure AD app to open using the --appId option")
            return app_id
        if app_id:
            if not any(app.get("appId") == app_id for app in apps):
                raise CommandError(f"App {app_id} not found in {self.m365rc_path}")
            return app_id
        if len(apps) == 1:
            return apps[0]["appId"]
        return choose_app(apps)

    def action(self, logger, session, options):
        self.app_id = self.resolve_app_id(options)
        super().action(logger, session, options)
