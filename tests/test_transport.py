"""Request building, dispatch and envelope decoding across both protocols."""

import httpx
import pytest

from rongcloud_sdk import (
    ClientOptions,
    ClientValidationError,
    ConversationType,
    ErrorOrigin,
    RemoteAPIError,
    TransportError,
)
from rongcloud_sdk.auth import compute_signature
from rongcloud_sdk.transport.protocol import form_params

from conftest import APP_KEY, APP_SECRET, body, form


@pytest.mark.asyncio
async def test_legacy_mute_request_shape(client, recorder):
    await client.conversation.mute(ConversationType.GROUP, "u1", "g1")

    assert len(recorder.requests) == 1
    request = recorder.last
    assert request.method == "POST"
    assert str(request.url) == "http://example.test/conversation/notification/set.json"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    params = form(request)
    assert params["conversationType"] == ["3"]
    assert params["targetId"] == ["g1"]
    assert params["isMuted"] == ["1"]
    assert params["requestId"] == ["u1"]
    assert "busChannel" not in params


@pytest.mark.asyncio
async def test_legacy_signature_matches_headers(client, recorder):
    await client.conversation.unmute(ConversationType.PRIVATE, "u1", "u2")

    headers = recorder.last.headers
    assert headers["App-Key"] == APP_KEY
    assert headers["Signature"] == compute_signature(APP_SECRET, headers["Nonce"], headers["Timestamp"])
    assert APP_SECRET not in recorder.last.content.decode()
    assert APP_SECRET not in str(dict(headers))


@pytest.mark.asyncio
async def test_optional_param_sent_only_when_set(client, recorder):
    await client.conversation.mute(ConversationType.GROUP, "u1", "g1", bus_channel="")
    assert "busChannel" not in form(recorder.last)

    await client.conversation.mute(ConversationType.GROUP, "u1", "g1", bus_channel="ch1")
    assert form(recorder.last)["busChannel"] == ["ch1"]


@pytest.mark.asyncio
async def test_rest_request_id_matches_header(client, recorder):
    result = await client.ultragroup.create("u1", "ug1", "Lobby")

    request = recorder.last
    assert request.method == "POST"
    assert str(request.url) == "http://example.test/v2/ultragroups"
    assert result.request_id
    assert request.headers["RC-Request-Id"] == result.request_id
    assert request.headers["RC-Signature"] == compute_signature(
        APP_SECRET, request.headers["RC-Nonce"], request.headers["RC-Timestamp"],
    )
    assert body(request) == {"user_id": "u1", "group_id": "ug1", "group_name": "Lobby"}


@pytest.mark.asyncio
async def test_rest_request_ids_differ_per_call(client, recorder):
    first = await client.ultragroup.dismiss("ug1")
    second = await client.ultragroup.dismiss("ug1")
    assert first.request_id != second.request_id


@pytest.mark.asyncio
async def test_rest_paginated_read_uses_query_params(client, recorder):
    recorder.reply({"code": 200, "data": {"groups": []}})
    await client.ultragroup.query_user_groups("u1", page=2, size=50)

    request = recorder.last
    assert request.method == "GET"
    assert request.url.path == "/v2/ultragroups/users/u1/groups"
    assert request.url.params["page"] == "2"
    assert request.url.params["size"] == "50"
    assert request.content == b""


@pytest.mark.asyncio
async def test_remote_error_is_surfaced_verbatim(client, recorder):
    recorder.reply({"code": 404, "errorMessage": "not found"})

    with pytest.raises(RemoteAPIError) as exc_info:
        await client.conversation.mute(ConversationType.GROUP, "u1", "g1")
    assert exc_info.value.code == 404
    assert exc_info.value.message == "not found"
    assert exc_info.value.origin is ErrorOrigin.LEGACY


@pytest.mark.asyncio
async def test_rest_error_body_on_http_error_status_is_decoded(client, recorder):
    recorder.reply({"code": 20005, "msg": "group not exist"}, status=400)

    with pytest.raises(RemoteAPIError) as exc_info:
        await client.ultragroup.dismiss("missing")
    err = exc_info.value
    assert err.code == 20005
    assert err.message == "group not exist"
    assert err.origin is ErrorOrigin.REST
    assert err.request_id == recorder.last.headers["RC-Request-Id"]


@pytest.mark.asyncio
async def test_malformed_json_is_a_transport_error(client, recorder):
    recorder.reply_raw(b"<html>bad gateway</html>", status=502)

    with pytest.raises(TransportError) as exc_info:
        await client.conversation.mute(ConversationType.GROUP, "u1", "g1")
    assert exc_info.value.cause is not None


@pytest.mark.asyncio
async def test_undecodable_content_encoding_is_a_transport_error(client, recorder):
    recorder.reply_raw(b"not-gzip", headers={"Content-Encoding": "gzip"})

    with pytest.raises(TransportError) as exc_info:
        await client.conversation.mute(ConversationType.GROUP, "u1", "g1")
    err = exc_info.value
    assert isinstance(err.cause, httpx.DecodingError)
    assert err.__cause__ is err.cause
    assert err.origin is ErrorOrigin.LEGACY
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_redirect_loop_is_a_transport_error(client, recorder):
    cause = httpx.TooManyRedirects("Exceeded maximum allowed redirects.")
    recorder.fail(cause)

    with pytest.raises(TransportError) as exc_info:
        await client.ultragroup.dismiss("ug1")
    assert exc_info.value.cause is cause
    assert exc_info.value.request_id == recorder.last.headers["RC-Request-Id"]


@pytest.mark.asyncio
async def test_non_object_json_is_a_transport_error(client, recorder):
    recorder.reply([1, 2, 3])

    with pytest.raises(TransportError):
        await client.sensitive.list()


@pytest.mark.asyncio
async def test_missing_code_is_a_remote_error(client, recorder):
    recorder.reply({"words": []})

    with pytest.raises(RemoteAPIError) as exc_info:
        await client.sensitive.list()
    assert exc_info.value.code == 0


@pytest.mark.asyncio
async def test_zero_code_is_a_remote_error(client, recorder):
    recorder.reply({"code": 0, "data": {"users": []}})

    with pytest.raises(RemoteAPIError) as exc_info:
        await client.ultragroup.query_group_users("ug1")
    assert exc_info.value.code == 0
    assert exc_info.value.origin is ErrorOrigin.REST


@pytest.mark.asyncio
async def test_network_failure_is_a_transport_error(client, recorder):
    cause = httpx.ConnectError("connection refused")
    recorder.fail(cause)

    with pytest.raises(TransportError) as exc_info:
        await client.ultragroup.join("u1", "ug1")
    err = exc_info.value
    assert err.cause is cause
    assert err.__cause__ is cause
    assert err.origin is ErrorOrigin.REST
    assert err.request_id
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_timeout_is_a_transport_error(client, recorder):
    recorder.fail(httpx.ReadTimeout("timed out"))

    with pytest.raises(TransportError):
        await client.sensitive.remove(["bad"])
    assert len(recorder.requests) == 1


def test_timeout_applies_to_connect_and_read(make_client):
    rc = make_client(ClientOptions(base_url="http://example.test", timeout=3.5))
    timeout = rc.http._client.timeout
    assert timeout.connect == 3.5
    assert timeout.read == 3.5


@pytest.mark.asyncio
async def test_validation_failure_sends_nothing(client, recorder):
    with pytest.raises(ClientValidationError) as exc_info:
        await client.ultragroup.create("u1", "ug1", "")
    assert exc_info.value.code == 1002
    assert exc_info.value.origin is ErrorOrigin.REST
    assert recorder.requests == []


def test_form_params_encoding():
    assert form_params({
        "a": "x",
        "empty": "",
        "none": None,
        "nothing": [],
        "n": 0,
        "flag": True,
        "many": ["u1", "u2"],
    }) == {"a": "x", "n": "0", "flag": "true", "many": ["u1", "u2"]}
    assert form_params(None) == {}


@pytest.mark.asyncio
async def test_list_params_are_repeated_keys(client, recorder):
    await client.sensitive.remove(["w1", "w2"])
    assert form(recorder.last)["words"] == ["w1", "w2"]
    assert str(recorder.last.url) == "http://example.test/sensitiveword/batch/delete.json"
