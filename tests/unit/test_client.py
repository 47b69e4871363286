import json
from unittest.mock import MagicMock

import pytest

from echobench.load.client import post_static, post_timestamp
from echobench.load.payloads import STATIC_BODY


def test_post_static_sends_one_request():
    client = MagicMock()
    post_static(client)
    client.post.assert_called_once_with(
        "/endpoint",
        data=STATIC_BODY,
        headers={"Content-Type": "application/json"},
    )


def test_post_static_uses_given_path():
    client = MagicMock()
    post_static(client, "/other")
    assert client.post.call_args.args == ("/other",)


def test_post_timestamp_stamps_each_invocation():
    client = MagicMock()
    ticks = iter([1000, 2000])
    post_timestamp(client, clock=lambda: next(ticks))
    post_timestamp(client, clock=lambda: next(ticks))

    bodies = [json.loads(call.kwargs["data"]) for call in client.post.call_args_list]
    assert [b["time"] for b in bodies] == ["1000", "2000"]
    assert all(b["resource_type"] == "organization" and b["resource_id"] == "1" for b in bodies)
    for call in client.post.call_args_list:
        assert call.args == ("/endpoint",)
        assert call.kwargs["headers"]["Content-Type"] == "application/json"


def test_response_is_not_inspected():
    client = MagicMock()
    client.post.return_value.status_code = 500
    assert post_static(client) is None


def test_failures_propagate_to_the_runner():
    client = MagicMock()
    client.post.side_effect = ConnectionError("refused")
    with pytest.raises(ConnectionError):
        post_timestamp(client)
