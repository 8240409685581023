import pytest

from mcptoolkit.call import ToolCallError, parse_args, render_call_result, to_text


def test_parse_args_key_value_and_bare_key():
    assert parse_args(["query=Docker", "verbose"]) == {"query": "Docker", "verbose": None}


def test_parse_args_splits_on_first_equals_only():
    assert parse_args(["expr=a=b"]) == {"expr": "a=b"}


def test_parse_args_repeated_key_collects_values():
    assert parse_args(["k=1", "k=2", "k=3"]) == {"k": ["1", "2", "3"]}


def test_parse_args_repeated_bare_key():
    assert parse_args(["flag", "flag=x"]) == {"flag": [None, "x"]}


def test_parse_args_empty():
    assert parse_args([]) == {}


def test_to_text_joins_text_contents():
    contents = [{"type": "text", "text": "first"}, {"type": "text", "text": "second"}]
    assert to_text(contents) == "first\nsecond"


def test_to_text_non_text_content_is_stringified():
    image = {"type": "image", "data": "abc"}
    text = to_text([image])
    assert "image" in text
    assert "abc" in text


def test_render_call_result_success():
    result = {"content": [{"type": "text", "text": "Found 10 search results"}]}
    assert render_call_result("search", result) == "Found 10 search results"


def test_render_call_result_error_raises():
    result = {"content": [{"type": "text", "text": "boom"}], "isError": True}
    with pytest.raises(ToolCallError, match="error calling tool search: boom"):
        render_call_result("search", result)


def test_render_call_result_without_content():
    assert render_call_result("search", {}) == ""