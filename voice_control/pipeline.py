# voice_control/pipeline.py
import asyncio
import threading
from typing import Optional

from latency_logger import LatencyLogger
from logger_config import get_logger
from .command_log import CommandLog
from .command_parser import CommandParser
from .device_registry import DeviceStateRegistry
from .errors import ArchivalFailed, FormatProbeFailed, TranscriptionTimeout
from .models import CommandLogEntry, FailedCommand, ParsedCommand, ResolvedCommand

logger = get_logger(__name__)


class VoicePipeline:
    """Runs an uploaded recording through transcription and command interpretation.

    Registry writes and log appends happen together under one lock. The
    archive and transcription round trips run in the default executor
    without holding it.
    """

    def __init__(
        self,
        parser: CommandParser,
        registry: DeviceStateRegistry,
        command_log: CommandLog,
        ingestion=None,
        prober=None,
        blob_store=None,
        transcriber=None,
        transcription_timeout: Optional[float] = None,
        archive_timeout: Optional[float] = None,
        strict_extraction: bool = False,
    ):
        self.parser = parser
        self.registry = registry
        self.command_log = command_log
        self.ingestion = ingestion
        self.prober = prober
        self.blob_store = blob_store
        self.transcriber = transcriber
        self.transcription_timeout = transcription_timeout
        self.archive_timeout = archive_timeout
        self.strict_extraction = strict_extraction
        self._lock = threading.Lock()

    async def process_audio(self, upload) -> CommandLogEntry:
        latency = LatencyLogger(label=upload.filename or "upload")
        path = self.ingestion.stage(upload)
        latency.mark("staged")
        try:
            self._probe(path)
            loop = asyncio.get_running_loop()

            locator = await self._archive(loop, path)
            latency.mark("archived")

            transcription = await self._transcribe(loop, locator)
            latency.mark("transcribed")

            entry = self.handle_transcription(transcription)
            latency.mark("interpreted")
            return entry
        finally:
            self.ingestion.cleanup(path)
            latency.report()

    def handle_transcription(self, transcription: str) -> CommandLogEntry:
        command = self._interpret(transcription)
        with self._lock:
            if command.success and command.is_complete:
                self.registry.update(command.place, command.intensity)
            entry = self.command_log.append(command)

        if entry.success:
            logger.info(f"✅ Command #{entry.id}: {entry.to_dict()}")
        else:
            logger.info(f"🤷 Unrecognized command #{entry.id}: {transcription!r}")
        return entry

    def _interpret(self, transcription: str) -> ParsedCommand:
        command = self.parser.parse(transcription)
        if isinstance(command, ResolvedCommand) and not command.is_complete:
            logger.warning(
                f"Incomplete command: place={command.place} intensity={command.intensity} "
                f"transcription={transcription!r}"
            )
            if self.strict_extraction:
                return FailedCommand(transcription=transcription)
        return command

    def _probe(self, path: str) -> None:
        if self.prober is None:
            return
        try:
            self.prober.probe(path)
        except FormatProbeFailed as e:
            logger.warning(f"⚠️ {e}")

    async def _archive(self, loop, path: str) -> str:
        call = loop.run_in_executor(None, self.blob_store.archive, path)
        try:
            return await asyncio.wait_for(call, timeout=self.archive_timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"❌ Archiving {path} timed out after {self.archive_timeout}s")
            raise ArchivalFailed(f"Archiving audio timed out after {self.archive_timeout}s") from e

    async def _transcribe(self, loop, locator: str) -> str:
        call = loop.run_in_executor(None, self.transcriber.transcribe, locator)
        try:
            return await asyncio.wait_for(call, timeout=self.transcription_timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"❌ Transcription of {locator} timed out after {self.transcription_timeout}s")
            raise TranscriptionTimeout(
                f"Transcription timed out after {self.transcription_timeout}s"
            ) from e
