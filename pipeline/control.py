import os
import fcntl
import json
import time
import logging
from typing import Optional, Dict

logger = logging.getLogger(__name__)

LOCK_FILE_PATH = "sweep.lock"


class PipelineController:
    """
    Manages exclusive access to full match sweeps using a file lock.

    The CLI and the web trigger can both start a sweep of all open shows;
    only one of them may run at a time across processes. `source` records
    who holds the lock ('cron', 'cli', ...).
    """
    def __init__(self, lock_file: str = LOCK_FILE_PATH):
        self.lock_file = lock_file
        self.file_handle = None

    def _open_file(self):
        if not self.file_handle:
            self.file_handle = open(self.lock_file, "a+")

    def acquire_lock(self, source: str, metadata: Optional[Dict] = None) -> bool:
        """
        Attempt to acquire the exclusive sweep lock without blocking.

        Args:
            source: Identifier for the caller starting the sweep
            metadata: Additional info to store alongside the owner

        Returns:
            True if lock acquired, False if another sweep holds it.
        """
        try:
            self._open_file()
            fcntl.flock(self.file_handle, fcntl.LOCK_EX | fcntl.LOCK_NB)

            self.file_handle.truncate(0)
            self.file_handle.seek(0)

            info = {
                "source": source,
                "pid": os.getpid(),
                "timestamp": time.time(),
                **(metadata or {})
            }
            json.dump(info, self.file_handle)
            self.file_handle.flush()

            return True
        except BlockingIOError:
            logger.info(f"Sweep lock held by another process ({self.lock_file})")
            self._close_file()
            return False
        except OSError as e:
            logger.error(f"Error acquiring sweep lock: {e}")
            self._close_file()
            return False

    def _close_file(self):
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def release_lock(self):
        """Release the sweep lock and clear the owner info."""
        if self.file_handle:
            try:
                self.file_handle.truncate(0)
                self.file_handle.seek(0)
                fcntl.flock(self.file_handle, fcntl.LOCK_UN)
            except OSError as e:
                logger.error(f"Error releasing sweep lock: {e}")
            finally:
                self._close_file()

    def get_lock_info(self) -> Optional[Dict]:
        """
        Read information about the current lock owner.
        Returns None if file doesn't exist or is empty/corrupt.
        """
        if not os.path.exists(self.lock_file):
            return None

        try:
            with open(self.lock_file, "r") as f:
                content = f.read().strip()
                if not content:
                    return None
                return json.loads(content)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read lock info: {e}")
            return None
