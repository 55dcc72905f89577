# voice_control/device_registry.py
import threading
from typing import Dict, Iterable, Optional

from logger_config import get_logger
from .models import IntensityLevel

logger = get_logger(__name__)


class DeviceStateRegistry:
    def __init__(self, initial_places: Iterable[str] = ()):
        self._state: Dict[str, IntensityLevel] = {
            place: IntensityLevel.OFF for place in initial_places
        }
        self._lock = threading.Lock()

    def update(self, place: str, intensity: IntensityLevel) -> None:
        with self._lock:
            self._state[place] = intensity
        logger.info(f"💡 {place} → {intensity.name}")

    def get(self, place: str) -> Optional[IntensityLevel]:
        with self._lock:
            return self._state.get(place)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return {place: int(level) for place, level in self._state.items()}
