import time

from logger_config import get_logger

logger = get_logger(__name__)


class LatencyLogger:
    def __init__(self, label="request"):
        self.label = label
        self.checkpoints = []
        self.start_time = time.perf_counter()

    def mark(self, label):
        now = time.perf_counter()
        elapsed = now - self.start_time
        self.checkpoints.append((label, elapsed))

    def durations(self):
        """Return (label, seconds since previous checkpoint) pairs."""
        result = []
        previous = 0.0
        for label, elapsed in self.checkpoints:
            result.append((label, elapsed - previous))
            previous = elapsed
        return result

    def report(self):
        logger.info(f"📊 Latency report for {self.label}:")
        for i, (label, delta) in enumerate(self.durations()):
            if i == 0:
                logger.info(f"  {label}: {delta:.2f}s (from start)")
            else:
                logger.info(f"  {label}: {delta:.2f}s (since previous)")
