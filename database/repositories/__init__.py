from database.repositories.base import BaseRepository
from database.repositories.show import ShowRepository
from database.repositories.artist import ArtistRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'ShowRepository',
    'ArtistRepository',
    'MatchRepository',
]
