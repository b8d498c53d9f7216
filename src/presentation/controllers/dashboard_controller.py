"""
Dashboard Router - Presentation Layer

Server-rendered dashboard for the light. Each page dispatches one
command through the invoker and renders the returned state.
"""

import os

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.application.dtos.device_state_dto import DeviceStateDTO
from src.application.use_cases.light_use_cases import DispatchCommandUseCase
from src.domain.commands.command_type import CommandType
from src.domain.entities.errors import DeviceUnreachableError
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Dashboard"])

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_dashboard(light_state: DeviceStateDTO) -> str:
    """Render the dashboard page for a device state."""
    template = env.get_template("dashboard.html")
    return template.render(light_state=light_state)


async def _dispatch_and_render(
    use_case: DispatchCommandUseCase, command_type: CommandType
) -> HTMLResponse:
    try:
        light_state = await use_case.execute(command_type)
    except DeviceUnreachableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )
    except Exception as e:
        logger.error(
            "dashboard.dispatch_failed",
            command_type=command_type.value,
            error=str(e),
            exc_info=e,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    return HTMLResponse(content=render_dashboard(light_state))


@router.get("/dashboard", response_class=HTMLResponse)
@inject
async def show_dashboard(
    dispatch_command_use_case: DispatchCommandUseCase = Depends(
        Provide["dispatch_command_use_case"]
    ),
) -> HTMLResponse:
    """Show the dashboard with the current light state."""
    return await _dispatch_and_render(
        dispatch_command_use_case, CommandType.GET_STATUS
    )


@router.get("/light/on", response_class=HTMLResponse)
@inject
async def dashboard_light_on(
    dispatch_command_use_case: DispatchCommandUseCase = Depends(
        Provide["dispatch_command_use_case"]
    ),
) -> HTMLResponse:
    """Turn the light on and show the dashboard."""
    return await _dispatch_and_render(dispatch_command_use_case, CommandType.LIGHT_ON)


@router.get("/light/off", response_class=HTMLResponse)
@inject
async def dashboard_light_off(
    dispatch_command_use_case: DispatchCommandUseCase = Depends(
        Provide["dispatch_command_use_case"]
    ),
) -> HTMLResponse:
    """Turn the light off and show the dashboard."""
    return await _dispatch_and_render(
        dispatch_command_use_case, CommandType.LIGHT_OFF
    )
