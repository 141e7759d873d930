import json
from pathlib import Path

FIXTURE_PATH = Path(__file__).resolve().parent / "data" / "posts.json"


def load_json(path):
    """
    Purpose:  Reads and parses a single JSON file from disk.

    No error handling inside; FileNotFoundError and JSONDecodeError reach the
    caller so a broken fixture fails the suite at import time.
    """
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)


def load_posts(path=FIXTURE_PATH):
    """
    Purpose:  Loads the post fixture served by the local replica of /posts.

    Returns: list of post dicts (userId, id, title, body), ordered by id

    Raises: FileNotFoundError, JSONDecodeError if the file is missing or malformed
    """
    posts = load_json(path)
    return sorted(posts, key=lambda post: post["id"])
