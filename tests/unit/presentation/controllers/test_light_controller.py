from __future__ import annotations

import pytest
from fastapi import HTTPException

from src.application.dtos.device_state_dto import (
    CommandBatchRequestDTO,
    DeviceStateDTO,
)
from src.application.use_cases.light_use_cases import (
    DispatchBatchUseCase,
    DispatchCommandUseCase,
)
from src.domain.commands import CommandType
from src.domain.entities.errors import DeviceUnreachableError, NoStagedCommandError
from src.presentation.controllers.light_controller import (
    dispatch_commands,
    get_light_status,
    turn_light_off,
    turn_light_on,
)


class _StubDispatch(DispatchCommandUseCase):
    def __init__(self, error: Exception | None = None):
        self.received: list[CommandType] = []
        self.error = error

    async def execute(self, command_type: CommandType) -> DeviceStateDTO:
        self.received.append(command_type)
        if self.error is not None:
            raise self.error
        return DeviceStateDTO(on=True, status_message=command_type.value)


class _StubBatch(DispatchBatchUseCase):
    def __init__(self, result: DeviceStateDTO | None = None, error: Exception | None = None):
        self.result = result
        self.error = error

    async def execute(self, command_types):
        if self.error is not None:
            raise self.error
        return self.result


@pytest.mark.asyncio
async def test_endpoints_select_their_command() -> None:
    stub = _StubDispatch()

    await turn_light_on(dispatch_command_use_case=stub)
    await turn_light_off(dispatch_command_use_case=stub)
    await get_light_status(dispatch_command_use_case=stub)

    assert stub.received == [
        CommandType.LIGHT_ON,
        CommandType.LIGHT_OFF,
        CommandType.GET_STATUS,
    ]


@pytest.mark.asyncio
async def test_turn_light_on_with_real_use_case(command_registry, invoker) -> None:
    use_case = DispatchCommandUseCase(
        command_registry=command_registry, command_invoker=invoker
    )
    response = await turn_light_on(dispatch_command_use_case=use_case)
    assert response.model_dump(by_alias=True) == {
        "on": True,
        "statusMessage": "Light is ON",
    }


@pytest.mark.asyncio
async def test_device_unreachable_maps_to_503() -> None:
    stub = _StubDispatch(error=DeviceUnreachableError("porch-light"))

    with pytest.raises(HTTPException) as exc:
        await turn_light_on(dispatch_command_use_case=stub)

    assert exc.value.status_code == 503
    assert "porch-light" in exc.value.detail


@pytest.mark.asyncio
async def test_domain_error_maps_to_500() -> None:
    stub = _StubDispatch(error=NoStagedCommandError())

    with pytest.raises(HTTPException) as exc:
        await turn_light_off(dispatch_command_use_case=stub)

    assert exc.value.status_code == 500


@pytest.mark.asyncio
async def test_unexpected_error_maps_to_500() -> None:
    stub = _StubDispatch(error=RuntimeError("failure"))

    with pytest.raises(HTTPException) as exc:
        await get_light_status(dispatch_command_use_case=stub)

    assert exc.value.status_code == 500
    assert exc.value.detail == "Internal server error"


@pytest.mark.asyncio
async def test_batch_returns_last_state() -> None:
    state = DeviceStateDTO(on=False, status_message="Light is currently OFF")
    response = await dispatch_commands(
        batch=CommandBatchRequestDTO(commands=[CommandType.LIGHT_OFF]),
        dispatch_batch_use_case=_StubBatch(result=state),
    )
    assert response is state


@pytest.mark.asyncio
async def test_empty_batch_returns_no_content() -> None:
    response = await dispatch_commands(
        batch=CommandBatchRequestDTO(),
        dispatch_batch_use_case=_StubBatch(result=None),
    )
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_batch_device_error_maps_to_503() -> None:
    with pytest.raises(HTTPException) as exc:
        await dispatch_commands(
            batch=CommandBatchRequestDTO(commands=[CommandType.LIGHT_ON]),
            dispatch_batch_use_case=_StubBatch(error=DeviceUnreachableError("x")),
        )
    assert exc.value.status_code == 503
