from m365kit.command import Command
from m365kit.errors import CommandError
from m365kit.lookup import get_group_id_by_display_name
from m365kit.planner import client
from m365kit.validation import IsGuid, NotBoth, RequireOneOf

APP_ONLY_NOT_SUPPORTED = "This command does not support application permissions."


class TaskGetCommand(Command):
    name = "planner task get"
    description = "Retrieve the specified planner task"
    aliases = ("planner task details get",)
    option_sets = (("id", "title"),)
    rules = (
        RequireOneOf("title", ("bucketId", "bucketName")),
        NotBoth("title", ("bucketId", "bucketName")),
        RequireOneOf("bucketName", ("planId", "planName")),
        NotBoth("bucketName", ("planId", "planName")),
        RequireOneOf("planName", ("ownerGroupId", "ownerGroupName")),
        NotBoth("planName", ("ownerGroupId", "ownerGroupName")),
        IsGuid("ownerGroupId"),
    )

    def command_action(self, logger, session, options):
        if session.is_app_only():
            raise CommandError(APP_ONLY_NOT_SUPPORTED)

        request = session.request
        task_id = self.get_task_id(request, options)
        task = client.get_task(request, task_id)
        details = client.get_task_details(request, task_id)
        logger.log({**task, **details})

    def get_task_id(self, request, options) -> str:
        if options.get("id"):
            return options["id"]
        bucket_id = self.get_bucket_id(request, options)
        return client.get_task_id_by_title(request, bucket_id, options["title"])

    def get_bucket_id(self, request, options) -> str:
        if options.get("bucketId"):
            return options["bucketId"]
        plan_id = self.get_plan_id(request, options)
        return client.get_bucket_id_by_name(request, plan_id, options["bucketName"])

    def get_plan_id(self, request, options) -> str:
        if options.get("planId"):
            return options["planId"]
        group_id = self.get_group_id(request, options)
        return client.get_plan_id_by_title(request, group_id, options["planName"])

    def get_group_id(self, request, options) -> str:
        if options.get("ownerGroupId"):
            return options["ownerGroupId"]
        return get_group_id_by_display_name(request, options["ownerGroupName"])
