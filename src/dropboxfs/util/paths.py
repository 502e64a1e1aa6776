from __future__ import annotations

ROOT_PATH: str = ""


def normalize_list_path(path: str) -> str:
    """
    Map "/" to the service's name for the account root.

    Only listing uses this; every other path is sent as given.
    """
    if path == "/":
        return ROOT_PATH
    return path
