# app/api/routes/fortune_routes.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.database import get_db
from app.models.fortune_models import (
    FortuneDrawCreate,
    FortuneSessionCreate,
    FortuneSessionListRequest,
    FortuneTemplateCreate,
    FortuneTemplateListRequest,
    FortuneTemplateUpdate,
)
from app.services import fortune_services
from app.services.auth_services import get_optional_user_id

router = APIRouter(tags=["Fortune"])


@router.get("/templates")
async def list_templates(
    category: Optional[str] = None,
    tone: Optional[str] = None,
    include_inactive: bool = Query(False, alias="includeInactive"),
    include_system: bool = Query(True, alias="includeSystem"),
    include_mine: bool = Query(True, alias="includeMine"),
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List system templates and/or the caller's own templates."""
    request = FortuneTemplateListRequest(
        category=category,
        tone=tone,
        include_inactive=include_inactive,
        include_system=include_system,
        include_mine=include_mine,
    )
    return await fortune_services.list_fortune_templates(db, user_id, request)


@router.post("/templates")
async def create_template(
    request: FortuneTemplateCreate,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await fortune_services.create_fortune_template(db, user_id, request)


@router.patch("/templates/{template_id}")
async def update_template(
    template_id: str,
    request: FortuneTemplateUpdate,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await fortune_services.update_fortune_template(db, user_id, template_id, request)


@router.post("/templates/{template_id}/archive")
async def archive_template(
    template_id: str,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await fortune_services.archive_fortune_template(db, user_id, template_id)


@router.post("/sessions")
async def create_session(
    request: FortuneSessionCreate,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await fortune_services.create_fortune_session(db, user_id, request)


@router.get("/sessions")
async def list_my_sessions(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Page through the caller's own sessions, newest first."""
    request = FortuneSessionListRequest(page=page, page_size=page_size)
    return await fortune_services.list_my_fortune_sessions(db, user_id, request)


@router.get("/sessions/{session_id}")
async def get_session(
    session_id: str,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await fortune_services.get_fortune_session_with_draws(db, user_id, session_id)


@router.post("/sessions/{session_id}/draws")
async def add_draw(
    session_id: str,
    request: FortuneDrawCreate,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await fortune_services.add_fortune_draw(db, user_id, session_id, request)
