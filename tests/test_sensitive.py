"""Sensitive word operations."""

import pytest

from rongcloud_sdk import ClientValidationError, RemoteAPIError, SensitiveType

from conftest import form


@pytest.mark.asyncio
async def test_add_replace_word(client, recorder):
    await client.sensitive.add("bad", "***")
    request = recorder.last
    assert str(request.url) == "http://example.test/sensitiveword/add.json"
    assert form(request) == {"word": ["bad"], "replaceWord": ["***"]}


@pytest.mark.asyncio
async def test_add_block_word_sends_no_replacement(client, recorder):
    await client.sensitive.add("bad", sensitive_type=SensitiveType.BLOCK)
    assert form(recorder.last) == {"word": ["bad"]}


@pytest.mark.asyncio
async def test_add_replace_requires_replacement(client, recorder):
    with pytest.raises(ClientValidationError):
        await client.sensitive.add("bad", "", SensitiveType.REPLACE)
    with pytest.raises(ClientValidationError):
        await client.sensitive.add("", "***")
    with pytest.raises(ClientValidationError):
        await client.sensitive.add("bad", "***", 7)
    with pytest.raises(ClientValidationError):
        await client.sensitive.add("x" * 33, "***")
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_list_decodes_words(client, recorder):
    recorder.reply({"code": 200, "words": [
        {"type": "0", "word": "bad", "replaceWord": "***"},
        {"type": 1, "word": "worse"},
    ]})
    words = await client.sensitive.list()
    assert [(w.word, w.type, w.replace_word) for w in words] == [("bad", "0", "***"), ("worse", "1", "")]


@pytest.mark.asyncio
async def test_list_type_filter(client, recorder):
    recorder.reply({"code": 200, "words": []})
    assert await client.sensitive.list(SensitiveType.BLOCK) == []
    assert form(recorder.last) == {"type": ["1"]}


@pytest.mark.asyncio
async def test_remove_accepts_exactly_fifty(client, recorder):
    await client.sensitive.remove([f"w{i}" for i in range(50)])
    assert len(form(recorder.last)["words"]) == 50


@pytest.mark.asyncio
async def test_remove_rejects_fifty_one(client, recorder):
    with pytest.raises(ClientValidationError) as exc_info:
        await client.sensitive.remove([f"w{i}" for i in range(51)])
    assert exc_info.value.code == 1002
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_remove_rejects_empty(client, recorder):
    with pytest.raises(ClientValidationError):
        await client.sensitive.remove([])
    with pytest.raises(ClientValidationError):
        await client.sensitive.remove(["ok", ""])
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_remove_remote_error(client, recorder):
    recorder.reply({"code": 1008, "errorMessage": "invalid words"})
    with pytest.raises(RemoteAPIError) as exc_info:
        await client.sensitive.remove(["w"])
    assert exc_info.value.message == "invalid words"
