# voice_control/command_log.py
import threading
from typing import List, Optional

from logger_config import get_logger
from .models import CommandLogEntry, ParsedCommand

logger = get_logger(__name__)


class CommandLog:
    """In-memory, append-only history of every parse attempt.

    Entry ids are 1-based and equal to the insertion position. The log lives
    for the lifetime of the process and is never persisted.
    """

    def __init__(self):
        self._entries: List[CommandLogEntry] = []
        self._lock = threading.Lock()

    def append(self, command: ParsedCommand) -> CommandLogEntry:
        with self._lock:
            entry = CommandLogEntry(id=len(self._entries) + 1, command=command)
            self._entries.append(entry)
        logger.debug(f"command logged: {entry.to_dict()}")
        return entry

    def get(self, entry_id: int) -> Optional[CommandLogEntry]:
        if entry_id < 1:
            return None
        with self._lock:
            if entry_id > len(self._entries):
                return None
            return self._entries[entry_id - 1]

    def entries(self) -> List[CommandLogEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self):
        with self._lock:
            return len(self._entries)
