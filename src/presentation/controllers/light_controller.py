"""
Light Router - Presentation Layer

This module defines the FastAPI router for the light REST API. Endpoints
only pick a command selector and hand it to a use case; the command
invoker does the rest.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.application.dtos.device_state_dto import (
    CommandBatchRequestDTO,
    DeviceStateDTO,
)
from src.application.use_cases.light_use_cases import (
    DispatchBatchUseCase,
    DispatchCommandUseCase,
)
from src.domain.commands.command_type import CommandType
from src.domain.entities.errors import DeviceUnreachableError, DomainError
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/light", tags=["Light"])


async def _dispatch(
    use_case: DispatchCommandUseCase, command_type: CommandType
) -> DeviceStateDTO:
    try:
        return await use_case.execute(command_type)
    except DeviceUnreachableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )
    except DomainError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        )
    except Exception as e:
        logger.error(
            "light.dispatch_failed",
            command_type=command_type.value,
            error=str(e),
            exc_info=e,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/on", response_model=DeviceStateDTO)
@inject
async def turn_light_on(
    dispatch_command_use_case: DispatchCommandUseCase = Depends(
        Provide["dispatch_command_use_case"]
    ),
) -> DeviceStateDTO:
    """Turn the light on and return the resulting state."""
    return await _dispatch(dispatch_command_use_case, CommandType.LIGHT_ON)


@router.get("/off", response_model=DeviceStateDTO)
@inject
async def turn_light_off(
    dispatch_command_use_case: DispatchCommandUseCase = Depends(
        Provide["dispatch_command_use_case"]
    ),
) -> DeviceStateDTO:
    """Turn the light off and return the resulting state."""
    return await _dispatch(dispatch_command_use_case, CommandType.LIGHT_OFF)


@router.get("/status", response_model=DeviceStateDTO)
@inject
async def get_light_status(
    dispatch_command_use_case: DispatchCommandUseCase = Depends(
        Provide["dispatch_command_use_case"]
    ),
) -> DeviceStateDTO:
    """Return the current state of the light without changing it."""
    return await _dispatch(dispatch_command_use_case, CommandType.GET_STATUS)


@router.post(
    "/commands",
    response_model=DeviceStateDTO,
    responses={204: {"description": "Empty batch, nothing executed"}},
)
@inject
async def dispatch_commands(
    batch: CommandBatchRequestDTO,
    dispatch_batch_use_case: DispatchBatchUseCase = Depends(
        Provide["dispatch_batch_use_case"]
    ),
):
    """
    Queue several commands in order and drain them in one pass.

    The response is the state produced by the last command. Later
    commands see the effect of earlier ones, so LIGHT_OFF followed by
    GET_STATUS reports the light as off.
    """
    logger.info(
        "light.batch_requested",
        commands=[command.value for command in batch.commands],
    )

    try:
        state = await dispatch_batch_use_case.execute(batch.commands)
    except DeviceUnreachableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )
    except Exception as e:
        logger.error("light.batch_failed", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    if state is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return state
