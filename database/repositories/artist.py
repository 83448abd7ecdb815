from typing import List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import ArtistProfile
from database.repositories.base import BaseRepository


class ArtistRepository(BaseRepository):
    def get_all_with_genres(self) -> List[ArtistProfile]:
        stmt = (
            select(ArtistProfile)
            .options(selectinload(ArtistProfile.genres))
            .order_by(ArtistProfile.created_at, ArtistProfile.id)
        )
        return list(self.db.execute(stmt).scalars().all())
