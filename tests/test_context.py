import re
from datetime import UTC, datetime

import pytest

from wsapi_client import Context, clear_context, get_cookie
from wsapi_client.session import SessionRecord


def authenticated_context() -> Context:
    return Context(
        cookie_jar={"sid": "xyz"},
        session=SessionRecord(csrf_token="abc123"),
        session_started_at=datetime.now(UTC),
    )


def test_new_context_is_empty() -> None:
    context = Context()
    assert context.cookie_jar is None
    assert context.session is None
    assert context.session_started_at is None
    assert context.csrf_token is None


def test_clear_context() -> None:
    context = authenticated_context()
    assert context.csrf_token == "abc123"

    clear_context(context)
    assert (context.cookie_jar, context.session, context.session_started_at) == (None, None, None)

    clear_context(context)
    assert context.cookie_jar is None
    assert context.session is None


def test_clear_context__none() -> None:
    clear_context(None)


def test_clear_method() -> None:
    context = authenticated_context()
    context.clear()
    assert context.cookie_jar is None
    assert context.session is None
    assert context.session_started_at is None


def test_contexts_are_independent() -> None:
    first, second = Context(), Context()
    first.cookie_jar = {"sid": "1"}
    assert second.cookie_jar is None
    assert first != second


def test_get_cookie__exact() -> None:
    context = Context(cookie_jar={"foo": "bar", "foobar": "baz"})
    assert get_cookie(context, "foo") == "bar"
    assert get_cookie(context, "foobar") == "baz"
    assert get_cookie(context, "fo") is None
    assert get_cookie(context, "fo.") is None


def test_get_cookie__pattern() -> None:
    context = Context(cookie_jar={"lang": "en", "browserid_state": "s1", "browserid_state_x": "s2"})
    assert get_cookie(context, re.compile(r"^browserid_state")) == "s1"
    assert get_cookie(context, re.compile(r"_x$")) == "s2"
    assert get_cookie(context, re.compile(r"^missing$")) is None


@pytest.mark.parametrize("jar", [None, {}, {"other": "1"}])
def test_get_cookie__not_found(jar: dict[str, str] | None) -> None:
    assert get_cookie(Context(cookie_jar=jar), "foo") is None
    assert get_cookie(Context(cookie_jar=jar), re.compile("foo")) is None


def test_get_cookie__bad_selector() -> None:
    with pytest.raises(TypeError, match="selector must be str or re.Pattern"):
        get_cookie(Context(cookie_jar={"foo": "bar"}), 1)  # type: ignore[arg-type]
