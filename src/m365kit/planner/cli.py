import click

from m365kit.command import global_options, run_command
from m365kit.planner.task_get import TaskGetCommand


@click.group("planner", context_settings=dict(help_option_names=["-h", "--help"]))
def planner_cli():
    """Microsoft Planner commands."""
    pass


@planner_cli.group("task")
def task_cli():
    """Manage planner tasks."""
    pass


@task_cli.command("get")
@click.option("-i", "--id", "id", help="ID of the task. Specify either id or title but not both.")
@click.option("-t", "--title", "title", help="Title of the task. Specify either id or title but not both.")
@click.option("--bucketId", "bucketId", help="ID of the bucket to which the task belongs.")
@click.option("--bucketName", "bucketName", help="Name of the bucket to which the task belongs.")
@click.option("--planId", "planId", help="ID of the plan to which the bucket belongs.")
@click.option("--planName", "planName", help="Name of the plan to which the bucket belongs.")
@click.option("--ownerGroupId", "ownerGroupId", help="ID of the group to which the plan belongs.")
@click.option("--ownerGroupName", "ownerGroupName", help="Name of the group to which the plan belongs.")
@global_options
@click.pass_context
def task_get_cmd(ctx, **options):
    """Retrieve the specified planner task."""
    run_command(ctx, TaskGetCommand(), options)


@task_cli.group("details")
def task_details_cli():
    """Planner task details (deprecated, use 'planner task get')."""
    pass


@task_details_cli.command("get")
@click.option("-i", "--taskId", "taskId", required=True, help="ID of the task.")
@global_options
@click.pass_context
def task_details_get_cmd(ctx, taskId, **options):
    """Retrieve the details of the specified planner task (deprecated)."""
    ctx.obj["logger"].log_to_stderr(
        "Command 'planner task details get' is deprecated. Please use 'planner task get' instead."
    )
    run_command(ctx, TaskGetCommand(), {"id": taskId, **options})
