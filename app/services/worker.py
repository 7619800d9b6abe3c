import threading
import logging

from app.db.session import SessionLocal
from app.jobs.retention import run_retention

logger = logging.getLogger(__name__)

def run_sweep() -> dict:
    db = SessionLocal()
    try:
        return run_retention(db)
    finally:
        db.close()

class SweepWorker(threading.Thread):
    """Daemon thread that purges expired OTPs and sessions every `interval` seconds."""

    def __init__(self, interval: int = 3600):
        super().__init__(daemon=True, name="sweep-worker")
        self.interval = interval
        self._stop_event = threading.Event()

    def run(self):
        logger.info(f"Maintenance worker started (every {self.interval}s)")
        while not self._stop_event.is_set():
            try:
                result = run_sweep()
                logger.info(f"Maintenance sweep: {result}")
            except Exception as e:
                logger.error(f"WORKER ERROR: {e}")
            # Returns early when stop() is called
            self._stop_event.wait(self.interval)

    def stop(self):
        self._stop_event.set()
