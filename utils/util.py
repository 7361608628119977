# util.py
import os
import sys
import base64
from dotenv import load_dotenv

# -----------------------------
# Load environment variables
# -----------------------------
load_dotenv()

DEFAULT_JUDGE0_URL = "https://judge0-ce.p.rapidapi.com/submissions"


def get_api_key() -> str:
    # read per call; a missing key is left for the remote service to reject
    return os.getenv("RAPIDAPI_KEY") or ""


def get_judge0_url() -> str:
    return os.getenv("JUDGE0_URL", DEFAULT_JUDGE0_URL)


def get_judge0_timeout():
    """
    Seconds to wait for Judge0, or None to keep the transport default.
    """
    value = os.getenv("JUDGE0_TIMEOUT")
    if not value:
        return None
    return float(value)


# -----------------------------
# Logging (stdout belongs to the tool protocol)
# -----------------------------
def log(message: str):
    print(message, file=sys.stderr, flush=True)


# -----------------------------
# Base64 payload codec
# -----------------------------
def encode(text) -> str:
    """Encode text as base64 of its UTF-8 bytes. None is treated as ""."""
    return base64.b64encode((text or "").encode("utf-8")).decode("ascii")


def decode(data) -> str:
    """
    Decode base64 transport text back to str.

    Judge0 output fields carry raw program output, which is not always
    valid UTF-8. Such bytes are decoded with replacement characters
    instead of raising.
    """
    raw = base64.b64decode(data or "")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("utf-8", errors="replace")
