"""Shared fakes for the Google collaborators and audio uploads."""

import io
import time
import wave
from types import SimpleNamespace

import pytest

from voice_control.audio_ingestion import AudioIngestion
from voice_control.command_log import CommandLog
from voice_control.command_parser import CommandParser
from voice_control.device_registry import DeviceStateRegistry
from voice_control.pipeline import VoicePipeline


def make_wav_bytes(duration_sec: float = 0.1, rate: int = 44100, channels: int = 2) -> bytes:
    """Create a short silent WAV file in memory."""
    n_frames = int(duration_sec * rate)
    with io.BytesIO() as buf:
        with wave.open(buf, "wb") as wf:
            wf.setnchannels(channels)
            wf.setsampwidth(2)  # 16-bit
            wf.setframerate(rate)
            wf.writeframes(b"\x00\x00" * channels * n_frames)
        return buf.getvalue()


def make_upload(filename="orden.wav", content=None):
    if content is None:
        content = make_wav_bytes()
    return SimpleNamespace(filename=filename, file=io.BytesIO(content))


class FakeBlobStore:
    def __init__(self, bucket="test-bucket", error=None, delay=0.0):
        self.bucket = bucket
        self.error = error
        self.delay = delay
        self.archived = []

    def archive(self, path):
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        with open(path, "rb") as f:
            self.archived.append((path, f.read()))
        return f"gs://{self.bucket}/audio-files/{path.rsplit('/', 1)[-1]}"


class FakeTranscriber:
    def __init__(self, transcription="", error=None, delay=0.0):
        self.transcription = transcription
        self.error = error
        self.delay = delay
        self.uris = []

    def transcribe(self, uri):
        self.uris.append(uri)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.transcription


class FakeProber:
    def __init__(self, error=None):
        self.error = error
        self.paths = []

    def probe(self, path):
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        return {"samplerate": 44100, "channels": 2}


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def blob_store():
    return FakeBlobStore()


@pytest.fixture
def prober():
    return FakeProber()


@pytest.fixture
def pipeline(tmp_path, transcriber, blob_store, prober):
    return VoicePipeline(
        parser=CommandParser(),
        registry=DeviceStateRegistry(["sala", "cocina"]),
        command_log=CommandLog(),
        ingestion=AudioIngestion(str(tmp_path / "staging")),
        prober=prober,
        blob_store=blob_store,
        transcriber=transcriber,
        transcription_timeout=2.0,
    )
