#!/usr/bin/env python3
"""
Persistence Operations - Store sweep scores as match records.

A match record's status belongs to the interaction layer, so an existing
record only ever gets its score updated. The update is a conditional
score-only UPDATE rather than a read-modify-write of the whole row, so a
status change committed concurrently by a user is never overwritten.
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError

from database.repository import MatchingRepository

logger = logging.getLogger(__name__)

CREATED = 'created'
UPDATED = 'updated'


def save_match_score(
    repo: MatchingRepository,
    artist_id: Any,
    show_id: Any,
    score: int,
) -> str:
    """
    Upsert the score for an (artist, show) pair.

    Creates a SUGGESTED match if none exists, otherwise updates the score
    only. Does not commit.

    Returns:
        CREATED or UPDATED
    """
    if repo.matches.update_score(artist_id, show_id, score):
        logger.debug(f"Updated match artist={artist_id} show={show_id}: score={score}")
        return UPDATED

    try:
        with repo.db.begin_nested():
            repo.matches.create_match(artist_id, show_id, score)
    except IntegrityError:
        # Inserted concurrently by another sweep of the same show
        logger.info(f"Match artist={artist_id} show={show_id} already exists, updating score")
        repo.matches.update_score(artist_id, show_id, score)
        return UPDATED

    logger.debug(f"Created match artist={artist_id} show={show_id}: score={score}")
    return CREATED
