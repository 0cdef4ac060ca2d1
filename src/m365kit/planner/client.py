from m365kit.lookup import match_by, single_match
from m365kit.request import GRAPH, encode


def get_plan_id_by_title(request, group_id: str, title: str) -> str:
    plans = request.get_all_items(f"{GRAPH}/groups/{group_id}/planner/plans")
    return single_match(match_by(plans, "title", title), "plan", title)


def get_bucket_id_by_name(request, plan_id: str, name: str) -> str:
    buckets = request.get_all_items(f"{GRAPH}/planner/plans/{plan_id}/buckets?$select=id,name")
    return single_match(match_by(buckets, "name", name), "bucket", name)


def get_task_id_by_title(request, bucket_id: str, title: str) -> str:
    tasks = request.get_all_items(f"{GRAPH}/planner/buckets/{bucket_id}/tasks?$select=id,title")
    return single_match(match_by(tasks, "title", title), "task", title, attribute="title")


def get_task(request, task_id: str) -> dict:
    return request.get(f"{GRAPH}/planner/tasks/{encode(task_id)}")


def get_task_details(request, task_id: str) -> dict:
    return request.get(f"{GRAPH}/planner/tasks/{encode(task_id)}/details")
