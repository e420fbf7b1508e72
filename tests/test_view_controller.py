import asyncio

import pytest

from fmcg_studio.app.services.dashboard_service import DashboardController
from fmcg_studio.app.services.ideation_service import ProductIdeationController
from fmcg_studio.app.utils.exceptions import GatewayError


@pytest.mark.asyncio
async def test_starts_idle_and_skips_requests_before_mount(gateway):
    controller = DashboardController(gateway)

    assert controller.state.status == "idle"
    assert await controller.load() is None
    gateway.invoke.assert_not_called()


@pytest.mark.asyncio
async def test_enters_loading_while_request_in_flight(controlled_gateway, wait_calls, dashboard_json):
    controller = DashboardController(controlled_gateway)
    task = asyncio.create_task(controller.mount())
    await wait_calls(controlled_gateway, 1)

    assert controller.state.status == "loading"
    assert controller.state.data is None and controller.state.error is None

    controlled_gateway.calls[0].set_result(dashboard_json)
    await task
    assert controller.state.status == "success"


@pytest.mark.asyncio
async def test_no_update_after_unmount(controlled_gateway, wait_calls, dashboard_json):
    controller = DashboardController(controlled_gateway)
    task = asyncio.create_task(controller.mount())
    await wait_calls(controlled_gateway, 1)

    controller.unmount()
    controlled_gateway.calls[0].set_result(dashboard_json)
    await task

    assert controller.state.status == "loading"
    assert controller.state.data is None


@pytest.mark.asyncio
async def test_failure_after_unmount_is_dropped(controlled_gateway, wait_calls):
    controller = DashboardController(controlled_gateway)
    task = asyncio.create_task(controller.mount())
    await wait_calls(controlled_gateway, 1)

    controller.unmount()
    controlled_gateway.calls[0].set_exception(GatewayError("boom"))
    await task

    assert controller.state.status == "loading"
    assert controller.state.error is None


@pytest.mark.asyncio
async def test_latest_issued_request_wins(controlled_gateway, wait_calls, idea_json):
    controller = ProductIdeationController(controlled_gateway)
    await controller.mount()

    first = asyncio.create_task(controller.submit("first brief"))
    await wait_calls(controlled_gateway, 1)
    second = asyncio.create_task(controller.submit("second brief"))
    await wait_calls(controlled_gateway, 2)

    controlled_gateway.calls[1].set_result(idea_json)
    assert (await second).status == "success"

    # The older request resolves last but must not overwrite the newer result.
    controlled_gateway.calls[0].set_result('{"name": "Stale Idea"}')
    assert await first is None
    assert controller.data.name == "Yuzu Spark"


@pytest.mark.asyncio
async def test_error_state_carries_static_message_only(gateway, caplog):
    gateway.invoke.side_effect = GatewayError("provider exploded: secret detail")
    controller = DashboardController(gateway)

    await controller.mount()

    assert controller.state.status == "error"
    assert controller.state.error == DashboardController.error_message
    assert "secret detail" not in controller.state.error
    assert "dashboard overview request failed" in caplog.text


@pytest.mark.asyncio
async def test_reload_clears_previous_error(gateway, dashboard_json):
    gateway.invoke.side_effect = [GatewayError("down"), dashboard_json]
    controller = DashboardController(gateway)

    await controller.mount()
    assert controller.state.status == "error"

    await controller.load()
    assert controller.state.status == "success"
    assert controller.state.error is None
