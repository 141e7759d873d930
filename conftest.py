import os

import httpx
import pytest

# POSTS_LIVE=1 sends every request to the real fixture host instead of the local replica
LIVE = os.getenv("POSTS_LIVE", "").lower() in ("1", "true", "yes")


@pytest.fixture
def client():
    """
    A fresh client per test case.

    Live runs talk to the real fixture host; otherwise requests are served
    in-process by the Flask replica in app.py.
    """
    if LIVE:
        http_client = httpx.Client()
    else:
        from app import app
        http_client = httpx.Client(transport=httpx.WSGITransport(app=app))
    with http_client:
        yield http_client
