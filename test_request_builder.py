import httpx
import pytest
from hamcrest import assert_that, contains_string, equal_to, is_

import api_helpers
from errors import MalformedTargetError

BASE = "https://jsonplaceholder.typicode.com"


def test_target_without_params_is_plain_concatenation():
    target = api_helpers.build_target("/posts/1", base=BASE)
    assert_that(target, equal_to("https://jsonplaceholder.typicode.com/posts/1"))


def test_target_defaults_to_configured_base_url():
    target = api_helpers.build_target("/posts")
    assert target == f"{api_helpers.base_url.rstrip('/')}/posts"


def test_trailing_slash_on_base_is_not_doubled():
    target = api_helpers.build_target("/posts", base=f"{BASE}/")
    assert target == f"{BASE}/posts"


def test_target_with_params_appends_query_in_order():
    target = api_helpers.build_target("/posts", {"userId": "1"}, base=BASE)
    assert_that(target, equal_to(f"{BASE}/posts?userId=1"))


def test_title_param_is_percent_encoded():
    target = api_helpers.build_target("/posts", {"userId": "1", "title": "qui est esse"}, base=BASE)

    assert " " not in target
    assert target.startswith(f"{BASE}/posts?userId=1&title=")
    encoded_title = target.split("title=", 1)[1]
    assert encoded_title in ("qui%20est%20esse", "qui+est+esse"), f"Unexpected encoding: {target}"


def test_reserved_characters_in_values_are_escaped():
    target = api_helpers.build_target("/posts", {"title": "a&b=c"}, base=BASE)
    assert_that(target, contains_string("title=a%26b%3Dc"))


def test_integer_values_are_stringified():
    target = api_helpers.build_target("/posts", {"userId": 1}, base=BASE)
    assert target == f"{BASE}/posts?userId=1"


def test_building_twice_is_byte_identical():
    params = {"userId": "1", "title": "qui est esse"}
    first = api_helpers.build_target("/posts", params, base=BASE)
    second = api_helpers.build_target("/posts", params, base=BASE)
    assert_that(first.encode(), equal_to(second.encode()))


def test_empty_params_behave_like_no_params():
    assert api_helpers.build_target("/posts", {}, base=BASE) == f"{BASE}/posts"


def test_get_request_wraps_target():
    target = api_helpers.build_target("/posts", {"userId": "1"}, base=BASE)
    request = api_helpers.build_get_request(target)

    assert isinstance(request, httpx.Request)
    assert_that(request.method, is_("GET"))
    assert_that(request.url.host, equal_to("jsonplaceholder.typicode.com"))
    assert_that(request.url.path, equal_to("/posts"))
    assert_that(request.url.params["userId"], equal_to("1"))


@pytest.mark.parametrize("base", [
    "jsonplaceholder.typicode.com",
    "ftp://jsonplaceholder.typicode.com",
    "https://",
])
def test_malformed_base_raises(base):
    with pytest.raises(MalformedTargetError):
        api_helpers.build_target("/posts", base=base)


def test_non_http_scheme_reports_reason():
    with pytest.raises(MalformedTargetError) as exc_info:
        api_helpers.build_target("/posts", base="ftp://jsonplaceholder.typicode.com")
    assert_that(exc_info.value.reason, contains_string("scheme"))


def test_path_without_leading_slash_raises():
    with pytest.raises(MalformedTargetError):
        api_helpers.build_target("posts", base=BASE)


def test_malformed_target_is_a_value_error():
    with pytest.raises(ValueError):
        api_helpers.build_get_request("not a uri")


def test_query_already_in_path_is_kept_when_params_are_added():
    target = api_helpers.build_target("/posts?userId=1", {"title": "qui est esse"}, base=BASE)

    assert target.startswith(f"{BASE}/posts?userId=1&title=")
    request = api_helpers.build_get_request(target)
    assert_that(request.url.params["userId"], equal_to("1"))
    assert_that(request.url.params["title"], equal_to("qui est esse"))
