"""Session endpoints: role selection, login and logout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request

from accommodation_booking.api.models import LoginRequest, RoleSelection
from accommodation_booking.api.responses import raise_for_failure, user_dict
from accommodation_booking.config import parse_role

if TYPE_CHECKING:
    from accommodation_booking.containers import AppContainer

router = APIRouter(prefix="/session", tags=["session"])


@router.get("")
async def current_session(request: Request) -> dict[str, object]:
    """Return who is logged in and which screen the UI should show."""
    container: AppContainer = request.app.state.container
    snapshot = container.controller.snapshot()
    return {
        "user": user_dict(snapshot.user),
        "selected_role": snapshot.selected_role.value
        if snapshot.selected_role
        else None,
        "show_welcome": snapshot.show_welcome,
    }


@router.post("/role")
async def select_role(payload: RoleSelection, request: Request) -> dict[str, object]:
    """Record the role chosen on the welcome screen."""
    container: AppContainer = request.app.state.container
    role = parse_role(payload.role)
    if role is None:
        raise HTTPException(
            status_code=422,
            detail={
                "kind": "validation",
                "message": "Role must be student or owner.",
                "details": {"role": payload.role},
            },
        )
    await container.controller.select_role(role)
    return {"selected_role": role.value, "show_welcome": False}


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Start a session for the given credentials and role."""
    container: AppContainer = request.app.state.container
    result = await container.controller.login(
        payload.username, payload.password, parse_role(payload.role)
    )
    raise_for_failure(result)
    return {"user": user_dict(result.value)}


@router.post("/logout")
async def logout(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    await container.controller.logout()
    return {"user": None}
