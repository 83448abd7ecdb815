"""Match generation sweep.

Recomputes artist/show match scores and stores the plausible ones. Used by
main.py (CLI / scheduled runs) and by the web trigger endpoints.
"""

import time
import uuid
import logging
import threading
import contextlib
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, ContextManager, Dict, Optional

from core.scorer import ArtistMatchProfile, ShowMatchContext, ScoringService, MIN_MATCH_SCORE
from core.scorer.persistence import save_match_score, CREATED
from database.models import ArtistProfile, Show, ShowStatus
from database.repository import MatchingRepository
from database.uow import match_uow


logger = logging.getLogger(__name__)

UowFactory = Callable[[], ContextManager[MatchingRepository]]

# One in-process lock per show so overlapping sweeps of the same show skip
# instead of doing the same upserts twice. Entries live only while some
# caller is inside the guard.
_show_locks: Dict[str, "_ShowLock"] = {}
_show_locks_guard = threading.Lock()


@dataclass
class ShowSweepResult:
    """Result of generating matches for a single show."""
    show_id: str
    skipped: bool = False
    skip_reason: Optional[str] = None
    artists_considered: int = 0
    out_of_range: int = 0
    below_threshold: int = 0
    created: int = 0
    updated: int = 0
    failed: int = 0
    execution_time: float = 0.0

    @property
    def saved(self) -> int:
        return self.created + self.updated


def _as_uuid(value: Any) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


@dataclass
class _ShowLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


@contextlib.contextmanager
def _show_sweep_guard(show_key: str):
    with _show_locks_guard:
        entry = _show_locks.setdefault(show_key, _ShowLock())
        entry.holders += 1
    acquired = entry.lock.acquire(blocking=False)
    try:
        yield acquired
    finally:
        if acquired:
            entry.lock.release()
        with _show_locks_guard:
            entry.holders -= 1
            if entry.holders == 0:
                del _show_locks[show_key]


def build_artist_profile(artist: ArtistProfile) -> ArtistMatchProfile:
    return ArtistMatchProfile(
        genres=frozenset(g.slug for g in artist.genres),
        location=artist.location or "",
        latitude=artist.latitude,
        longitude=artist.longitude,
        draw_estimate=artist.draw_estimate,
        availability_preference=artist.availability_preference,
    )


def build_show_context(show: Show) -> ShowMatchContext:
    venue = show.venue
    return ShowMatchContext(
        genres=frozenset(g.slug for g in show.genres),
        venue_city=venue.city or "",
        venue_latitude=venue.latitude,
        venue_longitude=venue.longitude,
        venue_capacity=venue.capacity,
        show_date=show.date,
        compensation_type=show.compensation_type,
    )


def _sweep_show(
    repo: MatchingRepository,
    show_id: uuid.UUID,
    scoring_service: ScoringService,
    result: ShowSweepResult,
) -> None:
    show = repo.shows.get_by_id(show_id)
    if show is None:
        result.skipped, result.skip_reason = True, "not_found"
        logger.info(f"Show {show_id} not found, no matches generated")
        return
    if show.status != ShowStatus.OPEN.value:
        result.skipped, result.skip_reason = True, "not_open"
        logger.info(f"Show {show_id} is {show.status}, no matches generated")
        return

    show_context = build_show_context(show)
    artists = repo.artists.get_all_with_genres()

    for artist in artists:
        result.artists_considered += 1
        artist_id = artist.id
        try:
            with repo.db.begin_nested():
                evaluation = scoring_service.evaluate(build_artist_profile(artist), show_context)

                if not evaluation.within_distance:
                    result.out_of_range += 1
                    continue
                if not evaluation.qualifies:
                    result.below_threshold += 1
                    continue

                outcome = save_match_score(repo, artist_id, show_id, evaluation.score)
                if outcome == CREATED:
                    result.created += 1
                else:
                    result.updated += 1
        except Exception:
            result.failed += 1
            logger.exception(f"Failed to generate match for artist {artist_id} / show {show_id}")


def generate_matches_for_show(
    show_id: Any,
    uow_factory: UowFactory = match_uow,
    min_score: int = MIN_MATCH_SCORE,
) -> ShowSweepResult:
    """Recompute matches between one show and every artist.

    A missing show (or an id that is not a UUID), or one that is not OPEN,
    is a no-op. Pairs beyond the
    match distance or scoring below `min_score` are not stored. Existing
    matches only get their score updated; their status is never touched.
    A failing pair is logged and skipped without affecting the others.

    Args:
        show_id: Show to generate matches for
        uow_factory: Zero-arg callable returning a unit-of-work context
            manager that yields a MatchingRepository
        min_score: Minimum total score for a match to be stored

    Returns:
        ShowSweepResult with per-outcome counts
    """
    start_time = time.time()
    try:
        show_id = _as_uuid(show_id)
    except ValueError:
        logger.info(f"Show {show_id} is not a valid id, no matches generated")
        return ShowSweepResult(show_id=str(show_id), skipped=True, skip_reason="not_found")
    result = ShowSweepResult(show_id=str(show_id))
    scoring_service = ScoringService(min_score=min_score)

    with _show_sweep_guard(str(show_id)) as acquired:
        if not acquired:
            result.skipped, result.skip_reason = True, "already_running"
            logger.warning(f"Sweep already running for show {show_id}, skipping")
            return result

        with uow_factory() as repo:
            _sweep_show(repo, show_id, scoring_service, result)

    result.execution_time = time.time() - start_time
    if not result.skipped:
        logger.info(
            f"Show {show_id}: {result.artists_considered} artists, "
            f"{result.created} created, {result.updated} updated, "
            f"{result.out_of_range} out of range, {result.below_threshold} below threshold, "
            f"{result.failed} failed in {result.execution_time:.2f}s"
        )
    return result


def generate_all_matches(
    uow_factory: UowFactory = match_uow,
    min_score: int = MIN_MATCH_SCORE,
    max_workers: int = 1,
    stop_event: Optional[threading.Event] = None
) -> Dict[str, int]:
    """Run generate_matches_for_show for every OPEN show.

    Shows are independent of each other; with max_workers > 1 they are swept
    on a thread pool, each in its own unit of work. A show that fails is
    logged and the sweep moves on. Setting `stop_event` stops the sweep
    before the next show starts.

    Returns:
        {"processed": number of shows whose sweep was attempted}
    """
    with uow_factory() as repo:
        show_ids = repo.shows.get_open_show_ids()

    logger.info(f"Sweeping {len(show_ids)} open shows (workers={max_workers})")

    def sweep_one(show_id) -> bool:
        if stop_event is not None and stop_event.is_set():
            return False
        try:
            generate_matches_for_show(show_id, uow_factory=uow_factory, min_score=min_score)
        except Exception:
            logger.exception(f"Match generation failed for show {show_id}")
        return True

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="sweep") as executor:
            attempted = list(executor.map(sweep_one, show_ids))
    else:
        attempted = []
        for show_id in show_ids:
            if not sweep_one(show_id):
                break
            attempted.append(True)

    processed = sum(1 for a in attempted if a)
    if processed < len(show_ids):
        logger.info(f"Sweep stopped early: {processed}/{len(show_ids)} shows processed")
    else:
        logger.info(f"Sweep completed: {processed} shows processed")
    return {"processed": processed}
