"""Match generation sweep for gigmatch."""

from .runner import generate_matches_for_show, generate_all_matches, ShowSweepResult

__all__ = ['generate_matches_for_show', 'generate_all_matches', 'ShowSweepResult']
