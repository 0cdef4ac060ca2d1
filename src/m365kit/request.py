import time
from urllib.parse import quote, urlparse

import requests

from m365kit.errors import RequestError

GRAPH = "https://graph.microsoft.com/v1.0"
RETRYABLE_STATUS = (429, 500, 502, 503, 504)


def encode(value: str) -> str:
    """Percent-encode a path or query component, keeping !'()* as is."""
    return quote(str(value), safe="!'()*")


def resource_for_url(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


class Request:
    """Thin requests wrapper: bearer auth per resource, retries, error raising."""

    def __init__(self, session, logger, http=None):
        self.session = session
        self.logger = logger
        self.http = http or requests.Session()

    def get(self, url: str, accept: str = "application/json;odata.metadata=none", **kwargs):
        return self.execute("GET", url, headers={"accept": accept}, **kwargs)

    def post(self, url: str, headers=None, **kwargs):
        return self.execute("POST", url, headers=headers, **kwargs)

    def get_all_items(self, url: str) -> list:
        """GET a collection and follow @odata.nextLink until exhausted."""
        items = []
        next_url = url
        while next_url:
            res = self.get(next_url)
            items.extend(res.get("value", []))
            next_url = res.get("@odata.nextLink")
        return items

    def execute(self, method: str, url: str, headers=None, **kwargs):
        token = self.session.get_access_token(resource_for_url(url))
        all_headers = {"Authorization": f"Bearer {token}", "accept": "application/json"}
        all_headers.update(headers or {})

        self.logger.debug(f"[http] {method} {url}")
        resp = self._request_with_retry(method, url, headers=all_headers, **kwargs)
        self.logger.debug(f"[http] {method} {url} -> {resp.status_code}")

        if not resp.ok:
            try:
                payload = resp.json()
            except ValueError:
                payload = resp.text
            raise RequestError(resp.status_code, payload, resp.text)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def _request_with_retry(self, method, url, headers=None, **kwargs):
        rm = max(self.session.settings.retry_max, 1)
        rb = self.session.settings.retry_backoff

        for attempt in range(1, rm + 1):
            resp = self.http.request(method, url, headers=headers, **kwargs)
            if resp.status_code in RETRYABLE_STATUS and attempt < rm:
                retry_after = resp.headers.get("Retry-After")
                wait = float(retry_after) if retry_after and retry_after.isdigit() else rb ** attempt
                self.logger.verbose(
                    f"[http] {method} {url} -> {resp.status_code}, retrying in {wait:.1f}s"
                )
                time.sleep(wait)
                continue
            return resp
        return resp  # last attempt
