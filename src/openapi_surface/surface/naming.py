"""Method names for operations.

An operation's own ``operationId`` wins when it has one; otherwise a name
is synthesized from the HTTP verb and the path.

Examples:
  operationId "getPet"           -> getPet
  operationId "pets.list"        -> pets_list
  GET  /pets/{petId}             -> get_pets_petId
  POST /store/order              -> post_store_order
"""

import re


def sanitize_operation_name(operation_id: str) -> str:
    """Turn an operationId into a legal identifier ("" stays "")."""
    name = re.sub(r"[^0-9A-Za-z_]", "_", operation_id)
    if name[:1].isdigit():
        name = "_" + name
    return name


def generate_operation_name(method: str, path: str) -> str:
    """Build a name from the lower-cased verb and the path segments."""
    parts = [method.lower()]
    for segment in path.split("/"):
        segment = segment.replace("{", "").replace("}", "")
        if segment:
            parts.append(re.sub(r"[^0-9A-Za-z_]", "_", segment))
    return "_".join(parts)
