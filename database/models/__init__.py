from .base import Base
from .genre import Genre, artist_genre, show_genre, generate_genre_slug
from .artist import ArtistProfile
from .venue import Venue, Show, ShowStatus
from .match import Match, MatchStatus

__all__ = [
    'Base',
    'Genre',
    'artist_genre',
    'show_genre',
    'generate_genre_slug',
    'ArtistProfile',
    'Venue',
    'Show',
    'ShowStatus',
    'Match',
    'MatchStatus',
]
