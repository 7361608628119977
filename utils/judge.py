# judge.py
import binascii
import json
from types import MappingProxyType
from typing import Optional

import httpx
from pydantic import ValidationError

from schemas.models import Judge0Result, Judge0Submission
from utils.debugger import report_unexpected
from utils.util import (
    decode,
    encode,
    get_api_key,
    get_judge0_timeout,
    get_judge0_url,
    log,
)

JUDGE0_PARAMS = {"base64_encoded": "true", "wait": "true"}

LANGUAGE_IDS = MappingProxyType({
    "c": 50,
    "cpp": 54,
    "go": 95,
    "java": 91,
    "javascript": 93,
    "python": 92,
    "ruby": 72,
})

LANGUAGE_ALIASES = MappingProxyType({
    "c++": "cpp",
    "golang": "go",
    "js": "javascript",
})

UNSUPPORTED_LANGUAGE = 0


# -----------------------------
# Errors
# -----------------------------
class ExecutionError(Exception):
    """Base of every failure an execution can end with."""

    kind = "unknown"

    def to_text(self) -> str:
        return f"Error: {self}"


class UnsupportedLanguage(ExecutionError):
    kind = "unsupported_language"

    def __init__(self, language: str):
        super().__init__(f"Unsupported language {language}")
        self.language = language

    def to_text(self) -> str:
        return str(self)


class TransportFailure(ExecutionError):
    kind = "transport_failure"

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"Judge0 responded with HTTP {status_code}")
        self.status_code = status_code
        self.body = body

    def to_text(self) -> str:
        return "Network error"


class DecodeFailure(ExecutionError):
    kind = "decode_failure"


# -----------------------------
# Language lookup
# -----------------------------
def get_language_id(language: str) -> int:
    name = language.lower()
    return LANGUAGE_IDS.get(LANGUAGE_ALIASES.get(name, name), UNSUPPORTED_LANGUAGE)


def build_headers() -> dict:
    return {
        "x-rapidapi-key": get_api_key(),
        "Content-Type": "application/json",
    }


# -----------------------------
# Judge0 call
# -----------------------------
def _describe(data: dict) -> str:
    # status and time are only logged, so any shape is accepted
    status = data.get("status")
    if isinstance(status, dict):
        status = status.get("description")
    return f"{status or 'unknown status'} ({data.get('time') or '?'}s)"


async def _submit(client: httpx.AsyncClient, submission: Judge0Submission) -> str:
    res = await client.post(
        get_judge0_url(),
        params=JUDGE0_PARAMS,
        headers=build_headers(),
        json=submission.model_dump(),
    )
    if not res.is_success:
        log(f"❌ Judge0 returned {res.status_code}: {res.text[:500]}")
        raise TransportFailure(res.status_code, res.text)

    try:
        data = res.json()
        result = Judge0Result.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise DecodeFailure(str(e)) from e

    log(f"✅ Judge0 finished: {_describe(data)}")

    try:
        output = [decode(result.compile_output), decode(result.stdout)]
    except binascii.Error as e:
        raise DecodeFailure(str(e)) from e
    return "\n".join(output).strip()


async def run_code(language_id: int, code: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Send one submission to Judge0 and wait for it to finish.

    Returns compile output and stdout joined by a newline. Raises
    TransportFailure for non-2xx responses and DecodeFailure for bodies
    that cannot be read. There is no retry.
    """
    submission = Judge0Submission(language_id=language_id, source_code=encode(code))

    if client is not None:
        return await _submit(client, submission)

    timeout = get_judge0_timeout()
    client_args = {} if timeout is None else {"timeout": timeout}
    async with httpx.AsyncClient(**client_args) as client:
        return await _submit(client, submission)


async def execute(source_code: str, language: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Run source_code on Judge0 and return the output, or a message saying
    what went wrong. Never raises.
    """
    try:
        language_id = get_language_id(language)
        if language_id == UNSUPPORTED_LANGUAGE:
            raise UnsupportedLanguage(language)
        return await run_code(language_id, source_code, client)
    except ExecutionError as e:
        return e.to_text()
    except Exception as e:
        report_unexpected("execute", e)
        return f"Error: {e}"
