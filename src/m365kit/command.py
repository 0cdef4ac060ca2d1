import json

import click
import requests

from m365kit.errors import RequestError, to_command_error
from m365kit.validation import validate_options


def format_output(obj, output: str = "json") -> str:
    if isinstance(obj, str):
        return obj
    if output == "json":
        return json.dumps(obj, indent=2, ensure_ascii=False)

    if isinstance(obj, dict):
        width = max((len(k) for k in obj), default=0)
        return "\n".join(f"{k.ljust(width)}: {_scalar(v)}" for k, v in obj.items())
    if isinstance(obj, list) and obj and isinstance(obj[0], dict):
        columns = [k for k, v in obj[0].items() if not isinstance(v, (dict, list))]
        rows = [[_scalar(item.get(c)) for c in columns] for item in obj]
        widths = [max(len(c), *(len(r[i]) for r in rows)) for i, c in enumerate(columns)]
        lines = [
            "  ".join(c.ljust(w) for c, w in zip(columns, widths)),
            "  ".join("-" * w for w in widths),
        ]
        lines += ["  ".join(v.ljust(w) for v, w in zip(row, widths)) for row in rows]
        return "\n".join(lines)
    if isinstance(obj, list):
        return "\n".join(_scalar(v) for v in obj)
    return _scalar(obj)


def _scalar(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


class Logger:
    """Writes command results to stdout and diagnostics to stderr."""

    def __init__(self, output: str = "json", verbose: bool = False, debug: bool = False):
        self.output = output
        self.is_verbose = verbose or debug
        self.is_debug = debug

    def log(self, obj):
        click.echo(format_output(obj, self.output))

    def log_to_stderr(self, message: str):
        click.echo(message, err=True)

    def verbose(self, message: str):
        if self.is_verbose:
            self.log_to_stderr(message)

    def debug(self, message: str):
        if self.is_debug:
            self.log_to_stderr(message)


class Command:
    """Base for a single CLI command.

    Subclasses declare ``option_sets`` and ``rules`` and implement
    ``command_action``. Upstream failures raised from ``command_action`` are
    turned into a CommandError by ``action``.
    """

    name = ""
    description = ""
    aliases = ()
    option_sets = ()
    rules = ()

    def validate(self, options: dict):
        return validate_options(options, self.option_sets, self.rules)

    def action(self, logger: Logger, session, options: dict):
        try:
            self.command_action(logger, session, options)
        except (RequestError, requests.RequestException) as e:
            raise to_command_error(e) from e

    def command_action(self, logger: Logger, session, options: dict):
        raise NotImplementedError


def global_options(f):
    """Accept --debug/--verbose on the command itself as well as on the root group."""
    f = click.option("--verbose", is_flag=True, help="Verbose output.")(f)
    f = click.option("--debug", is_flag=True, help="Enable debug mode.")(f)
    return f


def run_command(ctx: click.Context, command: Command, options: dict):
    """Validate, then execute ``command`` with the session built by the root group."""
    debug = options.pop("debug", False)
    verbose = options.pop("verbose", False)
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]
    if debug:
        logger.is_debug = settings.debug = True
    if debug or verbose:
        logger.is_verbose = settings.verbose = True

    result = command.validate(options)
    if result is not True:
        raise click.UsageError(result, ctx=ctx)
    command.action(logger, ctx.obj["session"], options)
