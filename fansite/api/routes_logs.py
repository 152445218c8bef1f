import asyncio
import json
import logging
import threading
from collections import deque
from datetime import datetime
from typing import Optional

from fastapi import APIRouter
from starlette.responses import StreamingResponse

router = APIRouter(prefix="/api/logs", tags=["logs"])

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level_number(level: Optional[str]) -> int:
    """Numeric level for a name such as ``warning``; unknown names mean 0."""
    if not level:
        return 0
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else 0


def _sse(entry: dict) -> str:
    return f"data: {json.dumps(entry, ensure_ascii=False)}\n\n"


class BufferedLogHandler(logging.Handler):
    """Keeps the last ``maxlen`` records and pushes new ones to stream subscribers.

    Lets a developer see auditor findings and fixture warnings without a
    terminal attached to the server.
    """

    def __init__(self, maxlen: int = 500):
        super().__init__()
        self._buffer: deque[dict] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._subscribers: list[tuple[asyncio.AbstractEventLoop, asyncio.Queue]] = []

    def emit(self, record: logging.LogRecord):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": self.format(record),
        }
        with self._lock:
            self._buffer.append(entry)
            subscribers = list(self._subscribers)

        for loop, queue in subscribers:
            try:
                loop.call_soon_threadsafe(queue.put_nowait, entry)
            except RuntimeError:
                # Subscriber's loop already closed; it unsubscribes on exit.
                continue

    def get_buffer(self, level: Optional[str] = None) -> list[dict]:
        with self._lock:
            entries = list(self._buffer)
        minimum = _level_number(level)
        return [e for e in entries if _level_number(e["level"]) >= minimum]

    def clear(self):
        with self._lock:
            self._buffer.clear()

    def subscribe(self, loop: asyncio.AbstractEventLoop) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue()
        with self._lock:
            self._subscribers.append((loop, queue))
        return queue

    def unsubscribe(self, queue: asyncio.Queue):
        with self._lock:
            self._subscribers = [s for s in self._subscribers if s[1] is not queue]


log_handler = BufferedLogHandler()
log_handler.setFormatter(logging.Formatter(LOG_FORMAT))


async def _log_stream_generator(
    handler: BufferedLogHandler,
    level: Optional[str] = None,
    keepalive: float = 30,
):
    """Replay the buffer, then push new records at or above ``level``."""
    minimum = _level_number(level)
    queue = handler.subscribe(asyncio.get_running_loop())
    try:
        for entry in handler.get_buffer(level):
            yield _sse(entry)
        while True:
            try:
                entry = await asyncio.wait_for(queue.get(), timeout=keepalive)
            except asyncio.TimeoutError:
                yield ": keepalive\n\n"
                continue
            if _level_number(entry["level"]) >= minimum:
                yield _sse(entry)
    finally:
        handler.unsubscribe(queue)


@router.get("")
async def get_logs(level: Optional[str] = None):
    return {"logs": log_handler.get_buffer(level)}


@router.get("/stream")
async def stream_logs(level: Optional[str] = None):
    return StreamingResponse(
        _log_stream_generator(log_handler, level),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.delete("")
async def clear_logs():
    log_handler.clear()
    return {"status": "ok"}
