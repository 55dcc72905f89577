# voice_control/audio_ingestion.py
import os
import shutil
import time

from logger_config import get_logger
from .errors import AudioIngestionFailed

logger = get_logger(__name__)


def staged_file_name(original_name: str, timestamp_ms: int = None) -> str:
    """'orden.wav' → 'orden-1700000000000.wav'"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    base = os.path.basename(original_name)
    name, suffix = os.path.splitext(base)
    return f"{name}-{timestamp_ms}{suffix}"


class AudioIngestion:
    def __init__(self, staging_dir: str):
        self.staging_dir = staging_dir

    def stage(self, upload) -> str:
        """Copy an uploaded file to the staging directory and return its path."""
        if not upload.filename:
            raise AudioIngestionFailed("Empty filename")

        path = os.path.join(self.staging_dir, staged_file_name(upload.filename))
        try:
            os.makedirs(self.staging_dir, exist_ok=True)
            with open(path, "wb") as f:
                shutil.copyfileobj(upload.file, f)
        except OSError as e:
            raise AudioIngestionFailed(f"Could not stage {upload.filename}: {e}") from e

        logger.debug(f"staged upload {upload.filename} at {path}")
        return path

    def cleanup(self, path: str) -> None:
        if os.path.exists(path):
            try:
                os.remove(path)
                logger.info(f"🧹 Deleted: {path}")
            except OSError as e:
                logger.warning(f"⚠️ Failed to delete file: {e}")
