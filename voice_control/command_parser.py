# voice_control/command_parser.py
"""Keyword grammar for Spanish lighting commands.

Examples:
    "encender dormitorio uno alto" → TURN_ON, "dormitorio 1", HIGH
    "apagar sala"                  → TURN_OFF, "sala", OFF
"""
from dataclasses import dataclass
from typing import List, Optional

from logger_config import get_logger
from .models import (
    FailedCommand,
    IntensityLevel,
    Intent,
    ParsedCommand,
    ResolvedCommand,
)
from .numerals import normalize_numeral

logger = get_logger(__name__)

TURN_OFF_KEYWORDS = ("apagar",)
TURN_ON_KEYWORDS = ("encender", "prender")

# Prefixes so that "alto", "alta", "media", "medio", "bajo", "baja" all match
INTENSITY_PREFIXES = (
    ("baj", IntensityLevel.LOW),
    ("medi", IntensityLevel.MID),
    ("alt", IntensityLevel.HIGH),
)

NUMBERED_ZONE = "dormitorio"


@dataclass
class CommandParserConfig:
    turn_off_zone_from_next_token: bool = False


def tokenize(transcription: str) -> List[str]:
    return transcription.lower().split()


def classify_intent(tokens: List[str]) -> Intent:
    is_turn_off = any(word in tokens for word in TURN_OFF_KEYWORDS)
    is_turn_on = any(word in tokens for word in TURN_ON_KEYWORDS)
    if is_turn_off and not is_turn_on:
        return Intent.TURN_OFF
    if is_turn_on and not is_turn_off:
        return Intent.TURN_ON
    return Intent.UNRECOGNIZED


def _token_at(tokens: List[str], index: int) -> Optional[str]:
    if 0 <= index < len(tokens):
        return tokens[index]
    return None


def _intensity_from_last_token(tokens: List[str]) -> Optional[IntensityLevel]:
    last_token = tokens[-1] if tokens else None
    if last_token is None:
        return None
    for prefix, level in INTENSITY_PREFIXES:
        if last_token.startswith(prefix):
            return level
    return None


def _place_from_tokens(tokens: List[str], numeral_index: int) -> Optional[str]:
    place = _token_at(tokens, 1)
    if place != NUMBERED_ZONE:
        return place
    numeral = _token_at(tokens, numeral_index)
    if numeral is None:
        return None
    return f"{NUMBERED_ZONE} {normalize_numeral(numeral)}"


class CommandParser:
    def __init__(self, config: Optional[CommandParserConfig] = None):
        self.config = config or CommandParserConfig()

    def parse(self, transcription: str) -> ParsedCommand:
        tokens = tokenize(transcription)
        intent = classify_intent(tokens)
        logger.debug(f"tokens={tokens} : intent={intent.value}")

        if intent is Intent.UNRECOGNIZED:
            return FailedCommand(transcription=transcription)

        if intent is Intent.TURN_OFF:
            # The zone token itself is normalized unless the corrected variant is enabled
            numeral_index = 2 if self.config.turn_off_zone_from_next_token else 1
            place = _place_from_tokens(tokens, numeral_index)
            intensity = IntensityLevel.OFF
        else:
            place = _place_from_tokens(tokens, 2)
            intensity = _intensity_from_last_token(tokens)

        return ResolvedCommand(
            transcription=transcription,
            intent=intent,
            place=place,
            intensity=intensity,
        )
