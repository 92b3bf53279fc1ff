# cli/path_utils.py

import os


def get_data_dir(user_input: str | None) -> str:
    """
    Resolves the directory holding the rosters, preferences, config, and log file.

    Args:
        user_input (str | None): An optional user-specified directory path. If None or blank, the default path is used.

    Returns:
        A resolved absolute path string. Defaults to `~/Documents/TeachStack`.
    """
    if user_input is not None and user_input.strip():
        return os.path.abspath(os.path.expanduser(user_input.strip()))
    else:
        documents = os.path.join(os.path.expanduser("~"), "Documents")
        return os.path.join(documents, "TeachStack")


def resolve_data_dir(user_input: str | None) -> str:
    """
    Produces and ensures a valid data directory.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
    """
    data_dir = get_data_dir(user_input)

    os.makedirs(data_dir, exist_ok=True)

    return data_dir


def resolve_in_dir(data_dir: str, path: str) -> str:
    """
    Anchors a relative path (as stored in config or preferences) to the data directory; absolute paths pass through.
    """
    path = os.path.expanduser(path)

    if os.path.isabs(path):
        return path

    return os.path.join(data_dir, path)
