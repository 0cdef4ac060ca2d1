import json

import click

ITEM_NOT_FOUND = "The requested item is not found."


class CommandError(click.ClickException):
    """Uniform failure surfaced by every command. Carries only a message."""

    def __init__(self, message: str):
        super().__init__(message)


class RequestError(Exception):
    """Non-2xx response returned by Graph or SharePoint."""

    def __init__(self, status_code: int, payload, text: str = ""):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        super().__init__(f"{status_code} {text}".strip())


def _message_from_payload(payload):
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            return payload or None
    if not isinstance(payload, dict):
        return None

    odata_error = payload.get("odata.error")
    if isinstance(odata_error, dict):
        message = odata_error.get("message")
        if isinstance(message, dict) and message.get("value"):
            return message["value"]

    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return error["message"]

    for key in ("message", "error_description"):
        if payload.get(key):
            return payload[key]
    return None


def to_command_error(err) -> CommandError:
    """Flatten any upstream failure shape into a CommandError."""
    if isinstance(err, CommandError):
        return err
    if isinstance(err, RequestError):
        message = _message_from_payload(err.payload)
        if message is None and err.status_code == 404:
            return CommandError(ITEM_NOT_FOUND)
        return CommandError(message or err.text or str(err))
    return CommandError(str(err))
