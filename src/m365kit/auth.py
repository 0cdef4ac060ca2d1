import base64
import json

from msal import ConfidentialClientApplication, PublicClientApplication

from m365kit.errors import CommandError
from m365kit.request import Request

GRAPH_RESOURCE = "https://graph.microsoft.com"
# PnP Management Shell, multi-tenant app registration with delegated permissions
DEFAULT_CLIENT_ID = "31359c7f-bd7e-475c-86db-fdb8c937548e"


class Settings:
    def __init__(
        self,
        tenant: str = "common",
        client_id: str = DEFAULT_CLIENT_ID,
        client_secret: str | None = None,
        access_token: str | None = None,
        spo_url: str | None = None,
        auto_open_in_browser: bool = False,
        retry_max: int = 5,
        retry_backoff: float = 2.0,
        output: str = "json",
        verbose: bool = False,
        debug: bool = False,
    ):
        self.tenant = tenant
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token = access_token
        self.spo_url = spo_url.rstrip("/") if spo_url else None
        self.auto_open_in_browser = auto_open_in_browser
        self.retry_max = retry_max
        self.retry_backoff = retry_backoff
        self.output = output
        self.debug = debug
        self.verbose = verbose or debug


def decode_access_token(token: str) -> dict:
    chunks = token.split(".")
    if len(chunks) != 3:
        return {}
    payload = chunks[1] + "=" * (-len(chunks[1]) % 4)
    try:
        return json.loads(base64.urlsafe_b64decode(payload))
    except ValueError:
        return {}


def is_app_only_access_token(token: str) -> bool:
    return decode_access_token(token).get("idtyp") == "app"


class Session:
    """Authenticated connection state for a single CLI invocation.

    Tokens are acquired lazily, one per resource, and kept for the lifetime of
    the process only.
    """

    def __init__(self, settings: Settings, logger, http=None):
        self.settings = settings
        self.logger = logger
        self.request = Request(self, logger, http)
        self.spo_url = settings.spo_url
        self._tokens = {}
        self._app = None

    def get_access_token(self, resource: str = GRAPH_RESOURCE) -> str:
        if self.settings.access_token and resource == GRAPH_RESOURCE:
            return self.settings.access_token
        if resource not in self._tokens:
            self._tokens[resource] = self._acquire_token(resource)
        return self._tokens[resource]

    def _client_app(self):
        if self._app is None:
            authority = f"https://login.microsoftonline.com/{self.settings.tenant}"
            if self.settings.client_secret:
                self._app = ConfidentialClientApplication(
                    self.settings.client_id,
                    authority=authority,
                    client_credential=self.settings.client_secret,
                )
            else:
                self._app = PublicClientApplication(self.settings.client_id, authority=authority)
        return self._app

    def _acquire_token(self, resource: str) -> str:
        app = self._client_app()
        scopes = [f"{resource}/.default"]
        if self.settings.client_secret:
            result = app.acquire_token_for_client(scopes=scopes)
        else:
            result = None
            accounts = app.get_accounts()
            if accounts:
                result = app.acquire_token_silent(scopes, account=accounts[0])
            if not result:
                flow = app.initiate_device_flow(scopes=scopes)
                if "user_code" not in flow:
                    raise CommandError(
                        f"Auth failed: {flow.get('error_description') or flow.get('error')}"
                    )
                self.logger.log_to_stderr(flow["message"])
                result = app.acquire_token_by_device_flow(flow)
        if "access_token" not in result:
            raise CommandError(f"Auth failed: {result.get('error_description') or result}")
        self.logger.verbose(f"[auth] acquired access token for {resource}")
        return result["access_token"]

    def is_app_only(self) -> bool:
        return is_app_only_access_token(self.get_access_token(GRAPH_RESOURCE))
