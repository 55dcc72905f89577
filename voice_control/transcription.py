# voice_control/transcription.py
from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import GoogleAuthError
from google.cloud import speech

from logger_config import get_logger
from .errors import TranscriptionUnavailable

logger = get_logger(__name__)


class SpeechTranscriber:
    """Google Cloud Speech-to-Text client for archived recordings."""

    def __init__(self, language_code="es-ES", sample_rate_hertz=44100,
                 audio_channel_count=2, timeout=None, credentials_path="", client=None):
        self.language_code = language_code
        self.sample_rate_hertz = sample_rate_hertz
        self.audio_channel_count = audio_channel_count
        self.timeout = timeout
        self.credentials_path = credentials_path
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if self.credentials_path:
                self._client = speech.SpeechClient.from_service_account_file(self.credentials_path)
            else:
                self._client = speech.SpeechClient()
        return self._client

    def recognition_config(self) -> speech.RecognitionConfig:
        return speech.RecognitionConfig(
            encoding=speech.RecognitionConfig.AudioEncoding.LINEAR16,
            sample_rate_hertz=self.sample_rate_hertz,
            language_code=self.language_code,
            audio_channel_count=self.audio_channel_count,
        )

    def transcribe(self, uri: str) -> str:
        """Transcribe the audio at ``uri``, joining the top alternative of each segment."""
        audio = speech.RecognitionAudio(uri=uri)
        try:
            response = self.client.recognize(
                config=self.recognition_config(), audio=audio, timeout=self.timeout
            )
        except (GoogleAPICallError, GoogleAuthError, OSError) as e:
            logger.error(f"❌ Speech recognition failed for {uri}: {e}")
            raise TranscriptionUnavailable(f"Speech recognition failed: {e}") from e

        segments = [result.alternatives[0].transcript
                    for result in response.results if result.alternatives]
        if not segments:
            raise TranscriptionUnavailable(f"No speech recognized in {uri}")

        transcription = "\n".join(segments)
        logger.info(f"🗣️ Transcription: {transcription}")
        return transcription
