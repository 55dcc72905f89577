# voice_control/errors.py


class PipelineError(Exception):
    """Base class for failures that abort a voice command request."""
    status_code = 500

    @property
    def kind(self):
        return type(self).__name__

    def to_dict(self):
        return {"error": str(self), "kind": self.kind}


class AudioIngestionFailed(PipelineError):
    status_code = 400


class ArchivalFailed(PipelineError):
    status_code = 502


class TranscriptionUnavailable(PipelineError):
    status_code = 502


class TranscriptionTimeout(TranscriptionUnavailable):
    status_code = 504


class FormatProbeFailed(Exception):
    """Audio metadata could not be read. Never aborts the request."""
