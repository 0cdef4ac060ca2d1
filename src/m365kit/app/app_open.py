import webbrowser

from m365kit.app.project import M365RC_JSON_PATH, AppCommand
from m365kit.errors import CommandError

PORTAL_URL = (
    "https://{prefix}portal.azure.com/#blade/Microsoft_AAD_RegisteredApps/"
    "ApplicationMenuBlade/Overview/appId/{app_id}/isMSAApp/"
)


class AppOpenCommand(AppCommand):
    name = "app open"
    description = "Returns deep link of the current AD app to open the Azure portal on the Azure AD app page"

    def __init__(self, m365rc_path=M365RC_JSON_PATH, open_browser=None):
        super().__init__(m365rc_path)
        self._open = open_browser or webbrowser.open

    def command_action(self, logger, session, options):
        url = PORTAL_URL.format(
            prefix="preview." if options.get("preview") else "",
            app_id=self.app_id,
        )
        if not session.settings.auto_open_in_browser:
            logger.log(f"Use a web browser to open the page {url}")
            return

        logger.log(f"Opening the following page in your browser: {url}")
        if not self._open(url):
            raise CommandError(f"Could not open {url} in the browser")
