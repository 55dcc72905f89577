# voice_control/audio_prober.py
import soundfile as sf

from logger_config import get_logger
from .errors import FormatProbeFailed

logger = get_logger(__name__)


class AudioFormatProber:
    def probe(self, path: str) -> dict:
        try:
            info = sf.info(path)
        except (RuntimeError, OSError) as e:
            raise FormatProbeFailed(f"Could not read audio metadata from {path}: {e}") from e

        metadata = {
            "samplerate": info.samplerate,
            "channels": info.channels,
            "frames": info.frames,
            "duration": info.duration,
            "format": info.format,
            "subtype": info.subtype,
        }
        logger.info(f"🎙️ audio info: {metadata}")
        return metadata
