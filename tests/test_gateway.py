import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from fmcg_studio.app.utils.exceptions import GatewayError, GatewayTimeoutError
from fmcg_studio.llm.gateway import ImageGateway, ModelGateway


def make_llm(response=None, side_effect=None):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=response, side_effect=side_effect)
    return llm


@pytest.mark.asyncio
async def test_invoke_returns_message_content():
    llm = make_llm(AIMessage(content='{"ok": true}'))
    gateway = ModelGateway(llm, timeout=5)

    text = await gateway.invoke("system text", "user text")

    assert text == '{"ok": true}'
    messages = llm.ainvoke.call_args.args[0]
    assert isinstance(messages[0], SystemMessage) and messages[0].content == "system text"
    assert isinstance(messages[1], HumanMessage) and messages[1].content == "user text"
    assert llm.ainvoke.call_args.kwargs["response_format"] == {"type": "json_object"}


@pytest.mark.asyncio
async def test_invoke_empty_content_is_empty_string():
    gateway = ModelGateway(make_llm(AIMessage(content="")), timeout=5)
    assert await gateway.invoke("s", "u") == ""


@pytest.mark.asyncio
async def test_invoke_missing_content_is_empty_string():
    gateway = ModelGateway(make_llm(SimpleNamespace()), timeout=5)
    assert await gateway.invoke("s", "u") == ""


@pytest.mark.asyncio
async def test_invoke_sends_every_call():
    llm = make_llm(AIMessage(content="{}"))
    gateway = ModelGateway(llm, timeout=5)

    await gateway.invoke("s", "u")
    await gateway.invoke("s", "u")

    assert llm.ainvoke.await_count == 2


@pytest.mark.asyncio
async def test_invoke_wraps_provider_errors():
    gateway = ModelGateway(make_llm(side_effect=ConnectionError("unreachable")), timeout=5)

    with pytest.raises(GatewayError) as exc_info:
        await gateway.invoke("s", "u")

    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_invoke_times_out():
    async def hang(*args, **kwargs):
        await asyncio.sleep(10)

    llm = MagicMock()
    llm.ainvoke = hang
    gateway = ModelGateway(llm, timeout=0.01)

    with pytest.raises(GatewayTimeoutError) as exc_info:
        await gateway.invoke("s", "u")

    assert exc_info.value.status_code == 504


@pytest.mark.asyncio
async def test_image_generate_returns_first_url():
    client = MagicMock()
    client.images.generate = AsyncMock(
        return_value=SimpleNamespace(data=[SimpleNamespace(url="https://img/1.png")])
    )
    gateway = ImageGateway(client, model="dall-e-3", size="1024x1024", timeout=5)

    url = await gateway.generate("a can of soda")

    assert url == "https://img/1.png"
    client.images.generate.assert_awaited_once_with(
        model="dall-e-3", prompt="a can of soda", size="1024x1024"
    )


@pytest.mark.asyncio
async def test_image_generate_without_url_fails():
    client = MagicMock()
    client.images.generate = AsyncMock(return_value=SimpleNamespace(data=[]))
    gateway = ImageGateway(client, timeout=5)

    with pytest.raises(GatewayError, match="No image URL"):
        await gateway.generate("prompt")
