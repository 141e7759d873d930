import json
import os
import sys
from typing import Any, List, Mapping, Optional, Union

import httpx
from hamcrest import assert_that, equal_to

from errors import DecodeError, MalformedTargetError
from logging_helper import log_request, log_response, log_status_check
from models import Post

base_url = os.getenv("POSTS_BASE_URL", "https://jsonplaceholder.typicode.com")

DEFAULT_ENCODING = "utf-8"

Decoded = Union[Post, List[Post], None]


# -----------------------------
# Request building
# -----------------------------
def _parse_target(target: str) -> httpx.URL:
    try:
        url = httpx.URL(target)
    except httpx.InvalidURL as e:
        raise MalformedTargetError(target, str(e)) from e
    if url.scheme not in ("http", "https"):
        raise MalformedTargetError(target, "scheme must be http or https")
    if not url.host:
        raise MalformedTargetError(target, "missing host")
    return url


def build_target(path: str, params: Optional[Mapping[str, Any]] = None, base: Optional[str] = None) -> str:
    """
    Joins the fixture host and an endpoint path into a request target.

    Without params this is plain concatenation. With params, each value is
    stringified and percent-encoded, and the pairs are appended as
    key=value joined by '&' in the mapping's iteration order, so building the
    same target twice gives the same string.
    A query already present in `path` is kept and the new pairs follow it.

    Raises MalformedTargetError when the result is not an absolute http(s) URI.
    """
    base = (base if base is not None else base_url).rstrip("/")
    if not path.startswith("/"):
        raise MalformedTargetError(path, "path must start with '/'")

    target = f"{base}{path}"
    url = _parse_target(target)
    if not params:
        return target

    query = [(key, str(value)) for key, value in params.items()]
    # params already in the path are kept; new ones are appended after them
    return str(url.copy_merge_params(query))


def build_get_request(target: str) -> httpx.Request:
    return httpx.Request("GET", _parse_target(target))


# -----------------------------
# Response decoding / rendering
# -----------------------------
def decode_body(response: httpx.Response, is_one_element: bool) -> Decoded:
    """
    Reads the body and decodes it into a Post (single mode) or a list of Posts.

    The charset comes from the Content-Type header, falling back to utf-8.
    Returns None when the response has no body.
    """
    content = response.read()
    if not content:
        return None

    url = str(response.request.url)
    charset = response.charset_encoding or DEFAULT_ENCODING
    try:
        text = content.decode(charset)
    except (LookupError, UnicodeDecodeError) as e:
        raise DecodeError(f"Could not decode response body as {charset}: {e}", url=url) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}", url=url) from e

    try:
        if is_one_element:
            return Post.from_json(data)
        return Post.list_from_json(data)
    except DecodeError as e:
        raise DecodeError(str(e), url=url) from e


def render(decoded: Decoded, is_one_element: bool, stream=None) -> None:
    stream = stream if stream is not None else sys.stdout
    if decoded is None:
        print("Response got no entity.", file=stream)
    elif is_one_element:
        print("The body is:", file=stream)
        print(json.dumps(decoded.to_json(), indent=2), file=stream)
    elif not decoded:
        print("Response body is an empty list.", file=stream)
    else:
        print("The first part of body is:", file=stream)
        print(json.dumps(decoded[0].to_json(), indent=2), file=stream)


def assert_status(response: httpx.Response, expected_status: int) -> None:
    log_status_check(response, expected_status)
    request = response.request
    assert_that(
        response.status_code,
        equal_to(expected_status),
        f"Unexpected status code for {request.method} {request.url}",
    )


# -----------------------------
# Verification
# -----------------------------
def verify_response(request: httpx.Request, expected_status: int, is_one_element: bool,
                    client: Optional[httpx.Client] = None, stream=None) -> Decoded:
    """
    Purpose:  Executes one request, decodes and prints its body, then checks the status code.

    How it works:
    - Sends the request on `client` (a fresh httpx.Client when none is given)
      with the body streamed, so reading it is an explicit step
    - Decodes the body into Post / list[Post] and prints it to `stream`
    - Closes the response on every path, including decode and read failures;
      a client created here is closed too, a caller's client is left open
    - Asserts the status only after the response has been released

    Returns: the decoded body (Post, list[Post], or None for an empty body)

    Raises: httpx.TransportError on network failure, DecodeError on a bad body,
            AssertionError on a status mismatch
    """
    owns_client = client is None
    if owns_client:
        client = httpx.Client()
    try:
        log_request(request)
        response = client.send(request, stream=True)
        try:
            log_response(response)
            decoded = decode_body(response, is_one_element)
            render(decoded, is_one_element, stream)
        finally:
            response.close()
    finally:
        if owns_client:
            client.close()

    assert_status(response, expected_status)
    return decoded


def verify_status(request: httpx.Request, expected_status: int,
                  client: Optional[httpx.Client] = None) -> httpx.Response:
    """Like verify_response, but only checks the status; the body is never decoded."""
    owns_client = client is None
    if owns_client:
        client = httpx.Client()
    try:
        log_request(request)
        response = client.send(request, stream=True)
        try:
            log_response(response)
        finally:
            response.close()
    finally:
        if owns_client:
            client.close()

    assert_status(response, expected_status)
    return response


def get_posts(path: str, expected_status: int, is_one_element: bool, params: Optional[Mapping[str, Any]] = None,
              client: Optional[httpx.Client] = None, stream=None) -> Decoded:
    target = build_target(path, params)
    return verify_response(build_get_request(target), expected_status, is_one_element, client=client, stream=stream)
