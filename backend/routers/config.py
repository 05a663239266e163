"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.workbench_session import get_session_store

from .diff import reset_generator

router = APIRouter()


class DiffSettings(BaseModel):
    """Diff engine settings"""

    inlineHighlight: bool = True
    cacheSize: int = Field(default=64, ge=0)


class SessionSettings(BaseModel):
    """Session store settings"""

    maxSessions: int = Field(default=256, ge=0)
    eventQueueSize: int = Field(default=64, ge=1)


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: DiffSettings | None = None
    session: SessionSettings | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: DiffSettings
    session: SessionSettings
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config_manager = ConfigManager.get_instance()
    config = config_manager.get_config()

    return ConfigResponse(
        diff=DiffSettings(**config_manager.diff_settings()),
        session=SessionSettings(**config_manager.session_settings()),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.diff:
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff.model_dump(exclude_unset=True)}
    if request.session:
        current_config["session"] = {
            **current_config.get("session", {}),
            **request.session.model_dump(exclude_unset=True),
        }
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    # New sessions and stateless diffs pick up the new settings
    reset_generator()
    store = get_session_store()
    store.generator = DiffGenerator.from_settings(config_manager.diff_settings())
    store.max_sessions = int(config_manager.session_settings()["maxSessions"])

    return {"status": "success", "message": "Configuration updated"}
