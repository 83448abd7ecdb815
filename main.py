import time
import logging
import signal
import threading
import argparse

from core.config_loader import load_config
from database.database import configure_database
from database.init_db import init_db
from pipeline.control import PipelineController
from pipeline.runner import generate_all_matches, generate_matches_for_show

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Set on SIGINT/SIGTERM; the sweep stops before its next show
stop_event = threading.Event()


def signal_handler(sig, frame):
    logger.info("Shutdown signal received")
    stop_event.set()


def run_sweep_cycle(config, max_workers=None):
    """Sweep all open shows once, holding the cross-process sweep lock."""
    controller = PipelineController(config.sweep.lock_file)
    if not controller.acquire_lock("cli"):
        logger.warning(f"Another sweep is running: {controller.get_lock_info()}")
        return None

    try:
        cycle_start = time.time()
        result = generate_all_matches(
            min_score=config.sweep.min_score,
            max_workers=max_workers or config.sweep.max_workers,
            stop_event=stop_event,
        )
        logger.info(f"=== Sweep processed {result['processed']} shows in {time.time() - cycle_start:.2f}s ===")
        return result
    finally:
        controller.release_lock()


def main():
    parser = argparse.ArgumentParser(description="gigmatch match generation driver")
    parser.add_argument('--mode', type=str, choices=['sweep', 'show', 'init-db'], default='sweep',
                        help='sweep: all open shows (default), show: a single show, init-db: create tables')
    parser.add_argument('--show-id', type=str, default=None, help='Show to sweep in "show" mode')
    parser.add_argument('--workers', type=int, default=None, help='Shows swept in parallel (overrides config)')
    parser.add_argument('--once', action='store_true', help='Run a single sweep instead of the schedule loop')
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    args = parser.parse_args()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    config = load_config(args.config)
    configure_database(config.database.url)

    # Initialize DB (with retry logic)
    init_db()
    if args.mode == 'init-db':
        return

    if not config.sweep.enabled:
        logger.info("Match sweep disabled in config")
        return

    if args.mode == 'show':
        if not args.show_id:
            parser.error('--show-id is required in "show" mode')
        result = generate_matches_for_show(args.show_id, min_score=config.sweep.min_score)
        logger.info(f"Show {result.show_id}: saved={result.saved}, failed={result.failed}, skipped={result.skip_reason}")
        return

    interval = config.schedule.interval_seconds
    cycle_count = 0
    while not stop_event.is_set():
        cycle_count += 1
        logger.info(f"=== Starting Sweep Cycle #{cycle_count} ===")
        try:
            run_sweep_cycle(config, max_workers=args.workers)
        except Exception as e:
            logger.error(f"Error in sweep cycle: {e}", exc_info=True)

        if args.once:
            break
        logger.info(f"=== Cycle #{cycle_count} done. Sleeping for {interval} seconds... ===")
        stop_event.wait(interval)


if __name__ == "__main__":
    main()
