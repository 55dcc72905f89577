# config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# === Google Cloud ===
BUCKET_NAME = os.getenv("BUCKET_NAME", "")
GOOGLE_CLOUD_CREDENTIALS_PATH = os.getenv("GOOGLE_CLOUD_CREDENTIALS_PATH", os.getenv("GOOGLE_APPLICATION_CREDENTIALS", ""))
if GOOGLE_CLOUD_CREDENTIALS_PATH:
    os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = GOOGLE_CLOUD_CREDENTIALS_PATH

# === HTTP server ===
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

# === Logging ===
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = _env_bool("LOG_TO_FILE", False)
LOG_DIR = os.getenv("LOG_DIR", "logs")

# === Audio staging / archive ===
AUDIO_STAGING_DIR = os.getenv("AUDIO_STAGING_DIR", "/tmp")
AUDIO_ARCHIVE_PREFIX = os.getenv("AUDIO_ARCHIVE_PREFIX", "audio-files")
ARCHIVE_TIMEOUT_SECONDS = float(os.getenv("ARCHIVE_TIMEOUT_SECONDS", "60"))

# === Speech-to-Text profile ===
SPEECH_LANGUAGE_CODE = os.getenv("SPEECH_LANGUAGE_CODE", "es-ES")
SPEECH_SAMPLE_RATE_HZ = int(os.getenv("SPEECH_SAMPLE_RATE_HZ", "44100"))
SPEECH_AUDIO_CHANNELS = int(os.getenv("SPEECH_AUDIO_CHANNELS", "2"))
TRANSCRIPTION_TIMEOUT_SECONDS = float(os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "30"))

# === Command interpretation ===
# Partially resolved commands (missing place or intensity) are reported as failures
STRICT_EXTRACTION = _env_bool("STRICT_EXTRACTION", False)
# "apagar dormitorio uno" reads the numeral after the zone instead of the zone itself
TURN_OFF_ZONE_FROM_NEXT_TOKEN = _env_bool("TURN_OFF_ZONE_FROM_NEXT_TOKEN", False)

INITIAL_PLACES = [
    place.strip()
    for place in os.getenv("INITIAL_PLACES", "sala,cocina,baño,dormitorio 1,dormitorio 2").split(",")
    if place.strip()
]
