from __future__ import annotations
from pathlib import Path

APP_NAME = "markboard"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

# Relative note locations are resolved against this folder.
NOTES_ROOT = Path.cwd()

# Every note shown on the board has to be listed here.
NOTE_FILES = [
    "MARK/1.md",
    "MARK/2.md",
    "MARK/3.md",
    "MARK/4.md",
    "MARK/5.md",
]

NOTES_PER_PAGE = 5

FETCH_TIMEOUT_S: float | None = None
# None: one fetch thread per source.
FETCH_MAX_WORKERS: int | None = None

# Note bodies are trusted as-is unless this is switched on.
SANITIZE_NOTE_HTML = False

# Newest first by the second line of each note; needs ISO-like dates.
SORT_BY_TIME = False

UNTITLED_TITLE = "Untitled note"
UNKNOWN_TIME = "Unknown time"

LOADING_MESSAGE = "Loading notes…"
EMPTY_MESSAGE = "There are no notes in the MARK folder yet!"
ERROR_MESSAGE = "Failed to load notes. Check the MARK folder and the NOTE_FILES list in settings."

WINDOW_SIZE = (960, 760)
