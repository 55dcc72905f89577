# voice_control/models.py
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

from pydantic import BaseModel


class Intent(str, Enum):
    TURN_ON = "turn_on"
    TURN_OFF = "turn_off"
    UNRECOGNIZED = "unrecognized"


class IntensityLevel(IntEnum):
    """Lighting level stored per place. Values are part of the HTTP contract."""
    OFF = 0
    LOW = 1
    MID = 2
    HIGH = 3


@dataclass(frozen=True)
class FailedCommand:
    """A transcript where no on/off trigger word could be recognized."""
    transcription: str

    success = False
    place = None
    intensity = None

    def to_dict(self):
        return {
            "success": self.success,
            "transcription": self.transcription,
            "place": self.place,
            "intensity": self.intensity,
        }


@dataclass(frozen=True)
class ResolvedCommand:
    """A transcript with a recognized intent.

    ``place`` or ``intensity`` may still be missing when the transcript did
    not contain the tokens the grammar expects; check ``is_complete``.
    """
    transcription: str
    intent: Intent
    place: Optional[str]
    intensity: Optional[IntensityLevel]

    success = True

    @property
    def is_complete(self) -> bool:
        return self.place is not None and self.intensity is not None

    def to_dict(self):
        return {
            "success": self.success,
            "transcription": self.transcription,
            "place": self.place,
            "intensity": None if self.intensity is None else int(self.intensity),
        }


ParsedCommand = Union[FailedCommand, ResolvedCommand]


@dataclass(frozen=True)
class CommandLogEntry:
    id: int
    command: ParsedCommand

    @property
    def success(self) -> bool:
        return self.command.success

    def to_dict(self):
        return {"id": self.id, **self.command.to_dict()}


class CommandResponse(BaseModel):
    id: int
    success: bool
    transcription: str
    place: Optional[str] = None
    intensity: Optional[int] = None
