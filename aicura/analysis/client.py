from datetime import datetime, timezone
import json
import logging
from pathlib import Path
import time
from threading import Lock
from uuid import uuid4

from openai import AsyncOpenAI, OpenAIError

from aicura.config import settings
from aicura.errors import ExternalServiceError

_client: AsyncOpenAI | None = None
logger = logging.getLogger(__name__)
_log_write_lock = Lock()


def _analysis_log_path() -> Path:
    log_path = Path(settings.analysis_log_path)
    if log_path.is_absolute():
        return log_path
    project_root = Path(__file__).resolve().parents[2]
    return project_root / log_path


def _append_analysis_log(record: dict) -> None:
    if not settings.analysis_log_enabled:
        return

    path = _analysis_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(record, ensure_ascii=False)
        with _log_write_lock:
            with path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
    except Exception:
        logger.exception("Failed to write analysis request log.")


def get_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        _client = AsyncOpenAI(
            base_url=settings.analysis_base_url,
            api_key=settings.analysis_api_key,
            timeout=settings.analysis_request_timeout_seconds,
            max_retries=0,
        )
    return _client


async def chat_completion(
    system_prompt: str,
    user_prompt: str,
    max_tokens: int | None = None,
    temperature: float | None = None,
    call_type: str = "unspecified",
) -> str:
    """Send one chat completion request to the analysis model.

    Exactly one attempt is made. Transport and API failures, as well as an
    empty completion, are raised as ExternalServiceError.
    """
    resolved_max_tokens = max_tokens or settings.analysis_max_tokens
    resolved_temperature = (
        temperature if temperature is not None else settings.analysis_temperature
    )
    record = {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "call_id": str(uuid4()),
        "call_type": call_type,
        "base_url": settings.analysis_base_url,
        "model": settings.analysis_model,
        "max_tokens": resolved_max_tokens,
        "temperature": resolved_temperature,
        "system_prompt": system_prompt,
        "user_prompt": user_prompt,
    }

    request_started = time.perf_counter()
    try:
        client = get_client()
        response = await client.chat.completions.create(
            model=settings.analysis_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=resolved_max_tokens,
            temperature=resolved_temperature,
        )
    except OpenAIError as exc:
        elapsed_ms = int((time.perf_counter() - request_started) * 1000)
        _append_analysis_log(
            {
                **record,
                "output": None,
                "latency_ms": elapsed_ms,
                "success": False,
                "error_type": exc.__class__.__name__,
                "error_message": str(exc),
            }
        )
        logger.warning("Analysis request failed (%s): %s", exc.__class__.__name__, exc)
        raise ExternalServiceError(
            f"Analysis service call failed: {exc.__class__.__name__}"
        ) from exc

    elapsed_ms = int((time.perf_counter() - request_started) * 1000)
    output = ""
    if response.choices:
        output = response.choices[0].message.content or ""
    _append_analysis_log(
        {
            **record,
            "output": output,
            "latency_ms": elapsed_ms,
            "success": bool(output),
            "error_type": None if output else "EmptyCompletion",
            "error_message": None if output else "Completion contained no text.",
        }
    )
    if not output:
        raise ExternalServiceError("Analysis service returned an empty completion.")
    return output
