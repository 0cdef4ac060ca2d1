from m365kit.command import Command
from m365kit.spo.client import ODATA_NOMETADATA, get_request_digest, get_spo_url
from m365kit.validation import IsGuid, IsInteger, IsJson, parse_int

UPDATE_SITE_SCRIPT = (
    "_api/Microsoft.Sharepoint.Utilities.WebTemplateExtensions.SiteScriptUtility.UpdateSiteScript"
)


class SiteScriptSetCommand(Command):
    name = "spo sitescript set"
    description = "Updates existing site script"
    rules = (
        IsGuid("id", required=True),
        IsInteger("version"),
        IsJson("content"),
    )

    def command_action(self, logger, session, options):
        spo_url = get_spo_url(session)
        digest = get_request_digest(session, spo_url)

        update_info = {"Id": options["id"]}
        if options.get("title"):
            update_info["Title"] = options["title"]
        if options.get("description"):
            update_info["Description"] = options["description"]
        if options.get("version"):
            update_info["Version"] = parse_int(options["version"])
        if options.get("content"):
            update_info["Content"] = options["content"]

        res = session.request.post(
            f"{spo_url}/{UPDATE_SITE_SCRIPT}",
            headers={
                "X-RequestDigest": digest,
                "content-type": "application/json;charset=utf-8",
                "accept": ODATA_NOMETADATA,
            },
            json={"updateInfo": update_info},
        )
        logger.log(res)
