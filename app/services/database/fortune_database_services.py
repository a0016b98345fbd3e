# app/services/database/fortune_database_services.py
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

from app.models.database_models.fortune_draw import FortuneDraw
from app.models.database_models.fortune_session import FortuneSession
from app.models.database_models.fortune_template import FortuneTemplate


async def get_template_by_id(db: AsyncSession, template_id: str) -> Optional[FortuneTemplate]:
    result = await db.execute(
        select(FortuneTemplate)
        .where(FortuneTemplate.id == template_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def select_templates(db: AsyncSession, where: Optional[ColumnElement] = None) -> List[FortuneTemplate]:
    query = select(FortuneTemplate)
    if where is not None:
        query = query.where(where)
    result = await db.execute(query.order_by(FortuneTemplate.created_at))
    return list(result.scalars().all())


async def insert_template(db: AsyncSession, template: FortuneTemplate) -> FortuneTemplate:
    db.add(template)
    await db.commit()
    await db.refresh(template)
    return template


async def update_template(db: AsyncSession, template_id: str, values: dict) -> None:
    await db.execute(
        update(FortuneTemplate).where(FortuneTemplate.id == template_id).values(**values)
    )
    await db.commit()


async def get_session_by_id(db: AsyncSession, session_id: str) -> Optional[FortuneSession]:
    result = await db.execute(select(FortuneSession).where(FortuneSession.id == session_id))
    return result.scalars().first()


def build_session_page_query(user_id: str, limit: int, offset: int) -> Select:
    return (
        select(FortuneSession)
        .where(FortuneSession.user_id == user_id)
        .order_by(FortuneSession.created_at.desc(), FortuneSession.id)
        .limit(limit)
        .offset(offset)
    )


async def list_sessions_for_user(db: AsyncSession, user_id: str, limit: int, offset: int) -> List[FortuneSession]:
    result = await db.execute(build_session_page_query(user_id, limit, offset))
    return list(result.scalars().all())


async def insert_session(db: AsyncSession, session: FortuneSession) -> FortuneSession:
    db.add(session)
    await db.commit()
    await db.refresh(session)
    return session


async def list_draws_for_session(db: AsyncSession, session_id: str) -> List[FortuneDraw]:
    result = await db.execute(
        select(FortuneDraw)
        .where(FortuneDraw.session_id == session_id)
        .order_by(FortuneDraw.position_index, FortuneDraw.created_at)
    )
    return list(result.scalars().all())


async def insert_draw(db: AsyncSession, draw: FortuneDraw) -> FortuneDraw:
    db.add(draw)
    await db.commit()
    await db.refresh(draw)
    return draw
