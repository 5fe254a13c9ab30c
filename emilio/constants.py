"""
Constants for the Emilio CLI application.
"""
from pathlib import Path
import os

# Application information
APP_NAME = "emilio-cli"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Turn a screenshot, URL or prompt into a runnable project with a live sandboxed preview"

# Paths
BASE_DIR = Path(__file__).parent.parent.absolute()
CONFIG_DIR = Path(os.path.expanduser("~/.config/emilio"))
CONFIG_FILE = CONFIG_DIR / "config.toml"
LOG_DIR = CONFIG_DIR / "logs"
HISTORY_FILE = CONFIG_DIR / "shell_history.txt"

# Logging
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"
LOG_ROTATION = "100 MB"
LOG_RETENTION = "10 days"

# API
GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_MAX_TOKENS = 65536
GEMINI_TEMPERATURE = 0.2

# Generation inputs
USER_PROMPT_MAX_LENGTH = 200
IMAGE_MAX_DIMENSION = 512
IMAGE_EXTENSIONS = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}

OUTPUT_TYPES = [
    "React + Tailwind",
    "Vue + Tailwind",
    "Svelte + Tailwind",
    "HTML + CSS + JS",
    "Single-File App (HTML)",
    "Flutter",
    "SwiftUI",
    "Android (XML)",
    "React Native",
    "Three.js (ESM)",
    "WebGL2",
    "Canvas 2D",
    "p5.js",
]

DATABASE_TYPES = [
    "None",
    "Firebase",
    "Supabase",
    "MongoDB + Express",
    "PHP + MySQL",
]

# Response layout, in the order the model is asked to emit them
HEADER_MARKER = "### 4.1. Header Block"
STRUCTURE_MARKER = "### 4.2. Project Structure"
FILES_MARKER = "### 4.3. Code Files"
NOTES_MARKER = "### 4.4. Notes"

FENCE = "```"
DEFAULT_FILE_NAME = "untitled"
DEFAULT_FILE_LANG = "text"
FALLBACK_FILE_NAME = "code.js"
FALLBACK_FILE_LANG = "javascript"

# Preview
ENTRY_FILE_NAME = "index.html"
DEFAULT_MIME_TYPE = "text/plain"
MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".svg": "image/svg+xml",
}
PREVIEW_HOST = "127.0.0.1"
PREVIEW_PORT = 8765
PREVIEW_SANDBOX = "allow-scripts"
PREVIEW_POLL_INTERVAL_MS = 1000

# Export
ARCHIVE_NAME = "emilio-ai-project.zip"
