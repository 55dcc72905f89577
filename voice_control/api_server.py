#to run "uvicorn voice_control.api_server:app --host 0.0.0.0 --port 3001 --reload"

from contextlib import asynccontextmanager
from typing import Dict, List

from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from logger_config import get_logger
from .audio_ingestion import AudioIngestion
from .audio_prober import AudioFormatProber
from .blob_store import GCSBlobStore
from .command_log import CommandLog
from .command_parser import CommandParser, CommandParserConfig
from .device_registry import DeviceStateRegistry
from .errors import PipelineError
from .models import CommandResponse
from .pipeline import VoicePipeline
from .transcription import SpeechTranscriber

logger = get_logger(__name__)


def build_pipeline() -> VoicePipeline:
    parser = CommandParser(CommandParserConfig(
        turn_off_zone_from_next_token=config.TURN_OFF_ZONE_FROM_NEXT_TOKEN,
    ))
    return VoicePipeline(
        parser=parser,
        registry=DeviceStateRegistry(config.INITIAL_PLACES),
        command_log=CommandLog(),
        ingestion=AudioIngestion(config.AUDIO_STAGING_DIR),
        prober=AudioFormatProber(),
        blob_store=GCSBlobStore(
            bucket_name=config.BUCKET_NAME,
            prefix=config.AUDIO_ARCHIVE_PREFIX,
            credentials_path=config.GOOGLE_CLOUD_CREDENTIALS_PATH,
            timeout=config.ARCHIVE_TIMEOUT_SECONDS,
        ),
        transcriber=SpeechTranscriber(
            language_code=config.SPEECH_LANGUAGE_CODE,
            sample_rate_hertz=config.SPEECH_SAMPLE_RATE_HZ,
            audio_channel_count=config.SPEECH_AUDIO_CHANNELS,
            timeout=config.TRANSCRIPTION_TIMEOUT_SECONDS,
            credentials_path=config.GOOGLE_CLOUD_CREDENTIALS_PATH,
        ),
        transcription_timeout=config.TRANSCRIPTION_TIMEOUT_SECONDS,
        archive_timeout=config.ARCHIVE_TIMEOUT_SECONDS,
        strict_extraction=config.STRICT_EXTRACTION,
    )


pipeline = build_pipeline()


def get_pipeline() -> VoicePipeline:
    return pipeline


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 Voice control listening on port {config.PORT} (bucket={config.BUCKET_NAME or '-'})")
    yield
    logger.info("🛑 Voice control stopped")


app = FastAPI(title="Voice Lighting Control API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PipelineError)
async def pipeline_error_handler(request: Request, exc: PipelineError):
    logger.error(f"❌ {exc.kind}: {exc}")
    return JSONResponse(content=exc.to_dict(), status_code=exc.status_code)


@app.get("/")
async def device_state(pipeline: VoicePipeline = Depends(get_pipeline)) -> Dict[str, int]:
    return pipeline.registry.snapshot()


@app.put("/", response_model=CommandResponse)
async def voice_command(audio: UploadFile = File(...), pipeline: VoicePipeline = Depends(get_pipeline)):
    entry = await pipeline.process_audio(audio)
    status_code = 200 if entry.success else 404
    return JSONResponse(content=entry.to_dict(), status_code=status_code)


@app.get("/commands", response_model=List[CommandResponse])
async def list_commands(pipeline: VoicePipeline = Depends(get_pipeline)):
    return [entry.to_dict() for entry in pipeline.command_log.entries()]


@app.get("/commands/{command_id}", response_model=CommandResponse)
async def get_command(command_id: int, pipeline: VoicePipeline = Depends(get_pipeline)):
    entry = pipeline.command_log.get(command_id)
    if entry is None:
        return JSONResponse(content={"error": f"Command {command_id} not found"}, status_code=404)
    return entry.to_dict()


@app.get("/health")
async def health_check():
    return {"status": "ok"}
