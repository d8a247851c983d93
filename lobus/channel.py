"""Line-oriented input channels the engine can await."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional

from .errors import ChannelClosed, ValidationError

Handler = Callable[[Any], None]


class LineChannel:
    """Buffered channel: lines fed ahead of time are consumed in order."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: Deque[str] = deque(lines)
        self._waiter: Optional[asyncio.Future] = None
        self._closed = False

    def feed(self, line: str) -> None:
        if self._closed:
            raise ChannelClosed("Cannot feed a closed channel.")
        if self._waiter is not None and not self._waiter.done():
            self._waiter.set_result(line)
            self._waiter = None
            return
        self._lines.append(line)

    def feed_many(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.feed(line)

    def close(self) -> None:
        self._closed = True
        if self._waiter is not None and not self._waiter.done():
            self._waiter.set_exception(ChannelClosed("Input channel closed."))
        self._waiter = None

    @property
    def pending(self) -> int:
        return len(self._lines)

    async def readline(self) -> str:
        if self._lines:
            return self._lines.popleft()
        if self._closed:
            raise ChannelClosed("Input channel closed.")
        if self._waiter is not None:
            raise RuntimeError("Only one pending read is allowed per channel.")
        waiter = asyncio.get_running_loop().create_future()
        self._waiter = waiter
        try:
            return await waiter
        finally:
            if self._waiter is waiter:
                self._waiter = None


class LineEmitter:
    """Minimal event emitter supporting one-shot listeners."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Handler]] = {}

    def once(self, event: str, handler: Handler) -> None:
        self._listeners.setdefault(event, []).append(handler)

    def emit(self, event: str, data: Any = None) -> bool:
        handlers = self._listeners.pop(event, [])
        for handler in handlers:
            handler(data)
        return bool(handlers)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))


class EmitterChannel:
    """Adapt an emitter with ``once(event, handler)`` to an awaitable channel.

    Each read registers exactly one one-shot handler; the handler resolves the
    pending read and is dropped by the emitter after firing.
    """

    def __init__(self, emitter: Any, event: str = "data") -> None:
        if not callable(getattr(emitter, "once", None)):
            raise ValidationError("You must specify an emitter with a once(event, handler) method.")
        self.emitter = emitter
        self.event = event

    async def readline(self) -> str:
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def handle(data: Any) -> None:
            if future.done():
                return
            if isinstance(data, bytes):
                data = data.decode("utf-8", errors="replace")
            future.set_result("" if data is None else str(data))

        self.emitter.once(self.event, handle)
        return await future


class StdinChannel:
    """Read lines typed at the terminal without blocking the event loop."""

    def __init__(self, prompt: str = "") -> None:
        self.prompt = prompt

    async def readline(self) -> str:
        try:
            return await asyncio.to_thread(input, self.prompt)
        except EOFError as exc:
            raise ChannelClosed("Standard input closed.") from exc
