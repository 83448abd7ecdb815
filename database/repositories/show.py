from typing import Any, List, Optional

from sqlalchemy import select

from database.models import Show, ShowStatus
from database.repositories.base import BaseRepository


class ShowRepository(BaseRepository):
    def get_by_id(self, show_id: Any) -> Optional[Show]:
        stmt = select(Show).where(Show.id == show_id)
        return self.db.execute(stmt).unique().scalar_one_or_none()

    def get_open_show_ids(self) -> List[Any]:
        stmt = (
            select(Show.id)
            .where(Show.status == ShowStatus.OPEN.value)
            .order_by(Show.date)
        )
        return list(self.db.execute(stmt).scalars().all())
