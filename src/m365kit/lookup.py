"""Name to ID resolution shared by commands that accept display names."""

from m365kit.errors import CommandError
from m365kit.request import GRAPH, encode


def single_match(items: list, entity: str, name: str, attribute: str = "name") -> str:
    """Return the ID of the only item in ``items``.

    Fails with a CommandError when nothing matched or when the name is ambiguous;
    the ambiguity message lists every candidate ID in response order.
    """
    if not items:
        raise CommandError(f"The specified {entity} {name} does not exist")
    if len(items) > 1:
        ids = ",".join(str(item.get("id")) for item in items)
        raise CommandError(f"Multiple {entity}s with {attribute} {name} found: {ids}")
    return items[0]["id"]


def match_by(items: list, attribute: str, value: str) -> list:
    return [item for item in items if item.get(attribute) == value]


def get_group_id_by_display_name(request, display_name: str) -> str:
    url = f"{GRAPH}/groups?$filter=displayName eq '{encode(display_name)}'"
    groups = request.get_all_items(url)
    return single_match(groups, "group", display_name)
