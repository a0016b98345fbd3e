# app/services/fortune_services.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database_models.fortune_draw import FortuneDraw
from app.models.database_models.fortune_session import FortuneSession
from app.models.database_models.fortune_template import FortuneTemplate
from app.models.fortune_models import (
    ErrorCode,
    FortuneActionError,
    FortuneDrawCreate,
    FortuneSessionCreate,
    FortuneSessionListRequest,
    FortuneTemplateCreate,
    FortuneTemplateListRequest,
    FortuneTemplateUpdate,
)
from app.services.auth_services import require_user
from app.services.database import fortune_database_services as store
from app.services.database.filters import combine_conditions

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


async def _get_owned_session(db: AsyncSession, session_id: str, user_id: str, action: str) -> FortuneSession:
    session = await store.get_session_by_id(db, session_id)
    if not session:
        raise FortuneActionError(ErrorCode.NOT_FOUND, "Session not found.")
    if session.user_id != user_id:
        logger.warning("User %s denied %s on session %s", user_id, action, session_id)
        raise FortuneActionError(ErrorCode.FORBIDDEN, f"You cannot {action} this session.")
    return session


async def list_fortune_templates(db: AsyncSession, user_id: Optional[str], request: FortuneTemplateListRequest):
    """
    List the templates visible to the caller.

    Anonymous callers only ever see system templates. With both
    include_system and include_mine off (or include_mine without a user)
    there is nothing to show and no query is issued.
    """
    if not request.include_system and (not request.include_mine or not user_id):
        return {"success": True, "data": {"items": [], "total": 0}}

    if request.include_system:
        if user_id and request.include_mine:
            visibility = or_(FortuneTemplate.is_system == True, FortuneTemplate.user_id == user_id)
        else:
            visibility = FortuneTemplate.is_system == True
    else:
        visibility = FortuneTemplate.user_id == user_id

    where = combine_conditions([
        visibility,
        FortuneTemplate.is_active == True if not request.include_inactive else None,
        FortuneTemplate.category == request.category if request.category else None,
        FortuneTemplate.tone == request.tone if request.tone else None,
    ])

    templates = await store.select_templates(db, where)
    items = [template.to_dict() for template in templates]
    return {"success": True, "data": {"items": items, "total": len(items)}}


async def create_fortune_template(db: AsyncSession, user_id: Optional[str], request: FortuneTemplateCreate):
    user_id = require_user(user_id)
    now = _now()

    template = FortuneTemplate(
        id=_new_id(),
        user_id=user_id,
        title=request.title,
        body=request.body,
        category=request.category,
        tone=request.tone,
        is_system=False,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    template = await store.insert_template(db, template)
    logger.info("User %s created fortune template %s", user_id, template.id)

    return {"success": True, "data": {"template": template.to_dict()}}


async def update_fortune_template(
    db: AsyncSession, user_id: Optional[str], template_id: str, request: FortuneTemplateUpdate
):
    user_id = require_user(user_id)

    existing = await store.get_template_by_id(db, template_id)
    if not existing:
        raise FortuneActionError(ErrorCode.NOT_FOUND, "Template not found.")
    if existing.user_id != user_id:
        logger.warning("User %s denied update of template %s", user_id, template_id)
        raise FortuneActionError(ErrorCode.FORBIDDEN, "You cannot modify this template.")
    if existing.is_system:
        raise FortuneActionError(ErrorCode.FORBIDDEN, "System templates cannot be edited.")

    updates = request.changes()
    updates["updated_at"] = _now()
    await store.update_template(db, template_id, updates)

    # Not atomic with the update; templates only have one writer.
    template = await store.get_template_by_id(db, template_id)
    logger.info("User %s updated fortune template %s (%s)", user_id, template_id, ", ".join(sorted(updates)))

    return {"success": True, "data": {"template": template.to_dict()}}


async def archive_fortune_template(db: AsyncSession, user_id: Optional[str], template_id: str):
    """
    Soft-delete a template the caller owns.

    System templates have no owner, so the ownership check alone denies them.
    """
    user_id = require_user(user_id)

    existing = await store.get_template_by_id(db, template_id)
    if not existing:
        raise FortuneActionError(ErrorCode.NOT_FOUND, "Template not found.")
    if existing.user_id != user_id:
        logger.warning("User %s denied archival of template %s", user_id, template_id)
        raise FortuneActionError(ErrorCode.FORBIDDEN, "You cannot archive this template.")

    await store.update_template(db, template_id, {"is_active": False, "updated_at": _now()})
    logger.info("User %s archived fortune template %s", user_id, template_id)

    return {"success": True}


async def create_fortune_session(db: AsyncSession, user_id: Optional[str], request: FortuneSessionCreate):
    user_id = require_user(user_id)

    session = FortuneSession(
        id=_new_id(),
        user_id=user_id,
        question=request.question,
        spread_type=request.spread_type,
        notes=request.notes,
        created_at=_now(),
    )
    session = await store.insert_session(db, session)
    logger.info("User %s opened fortune session %s", user_id, session.id)

    return {"success": True, "data": {"session": session.to_dict()}}


async def list_my_fortune_sessions(db: AsyncSession, user_id: Optional[str], request: FortuneSessionListRequest):
    user_id = require_user(user_id)
    page = max(1, request.page)
    page_size = min(MAX_PAGE_SIZE, max(1, request.page_size))
    offset = (page - 1) * page_size

    sessions = await store.list_sessions_for_user(db, user_id, limit=page_size, offset=offset)
    items = [session.to_dict() for session in sessions]

    # total is the size of this page, not the number of matching sessions
    return {
        "success": True,
        "data": {"items": items, "total": len(items), "page": page, "pageSize": page_size},
    }


async def get_fortune_session_with_draws(db: AsyncSession, user_id: Optional[str], session_id: str):
    user_id = require_user(user_id)
    session = await _get_owned_session(db, session_id, user_id, "view")

    draws = await store.list_draws_for_session(db, session_id)

    return {
        "success": True,
        "data": {"session": session.to_dict(), "draws": [draw.to_dict() for draw in draws]},
    }


async def add_fortune_draw(db: AsyncSession, user_id: Optional[str], session_id: str, request: FortuneDrawCreate):
    user_id = require_user(user_id)
    await _get_owned_session(db, session_id, user_id, "modify")

    if request.fortune_template_id:
        template = await store.get_template_by_id(db, request.fortune_template_id)
        if not template:
            raise FortuneActionError(ErrorCode.NOT_FOUND, "Template not found.")
        if not template.is_system and template.user_id != user_id:
            logger.warning("User %s denied use of template %s", user_id, template.id)
            raise FortuneActionError(ErrorCode.FORBIDDEN, "You cannot use this template.")
        if not template.is_active:
            raise FortuneActionError(ErrorCode.BAD_REQUEST, "Template is inactive.")

    draw = FortuneDraw(
        id=_new_id(),
        session_id=session_id,
        fortune_template_id=request.fortune_template_id or None,
        position_index=request.position_index,
        interpreted_text=request.interpreted_text,
        created_at=_now(),
    )
    draw = await store.insert_draw(db, draw)
    logger.info("User %s added draw %s to session %s", user_id, draw.id, session_id)

    return {"success": True, "data": {"draw": draw.to_dict()}}
