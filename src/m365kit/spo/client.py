from m365kit.errors import CommandError
from m365kit.request import GRAPH

ODATA_NOMETADATA = "application/json;odata=nometadata"


def get_spo_url(session) -> str:
    """Return the tenant's SharePoint root URL, asking Graph when not configured."""
    if session.spo_url:
        return session.spo_url

    session.logger.debug("SharePoint Online root site URL unknown. Retrieving...")
    res = session.request.get(f"{GRAPH}/sites/root?$select=webUrl")
    web_url = (res or {}).get("webUrl")
    if not web_url:
        raise CommandError("Could not determine the SharePoint Online root site URL")
    session.spo_url = web_url.rstrip("/")
    session.logger.debug(f"Retrieved SharePoint Online root site URL {session.spo_url}")
    return session.spo_url


def get_request_digest(session, spo_url: str) -> str:
    res = session.request.post(
        f"{spo_url}/_api/contextinfo",
        headers={"accept": ODATA_NOMETADATA},
    )
    return res["FormDigestValue"]
