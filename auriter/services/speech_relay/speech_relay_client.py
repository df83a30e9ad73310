"""
Speech Relay Client Module

Streams raw audio frames to the Deepgram live-listen websocket and hands each
non-empty transcript to a registered sink.

Lifecycle: IDLE -> CONNECTING -> OPEN -> CLOSED. There is no reconnect; a
closed client stays closed. Audio sent while not OPEN is dropped.

Dependencies:
- websockets: For the upstream websocket connection.
- loguru: For logging operations.

"""
import asyncio
import inspect
import json
import os
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union
from urllib.parse import urlencode
import websockets
from loguru import logger

DEEPGRAM_LISTEN_URL = "wss://api.deepgram.com/v1/listen"
DEFAULT_LANGUAGE = "hi"

TranscriptSink = Callable[[str], Union[None, Awaitable[None]]]


class RelayState(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


def build_listen_url(language: str = DEFAULT_LANGUAGE) -> str:
    query = urlencode({
        "sample_rate": 16000,
        "channels": 1,
        "interim_results": "true",
        "language": language,
        "model": "nova-2",
    })
    return f"{DEEPGRAM_LISTEN_URL}?{query}"


def extract_transcript(message: Any) -> Optional[str]:
    """
    Pull channel.alternatives[0].transcript out of a Deepgram result.

    Returns None for messages without a transcript (metadata, keep-alives)
    and for blank transcripts.
    """
    if not isinstance(message, dict):
        return None
    channel = message.get("channel")
    if not isinstance(channel, dict):
        return None
    alternatives = channel.get("alternatives")
    if not isinstance(alternatives, list) or not alternatives or not isinstance(alternatives[0], dict):
        return None
    transcript = alternatives[0].get("transcript")
    if not isinstance(transcript, str) or not transcript.strip():
        return None
    return transcript


class SpeechRelayClient:
    """
    One upstream speech-to-text connection per interview session.

    Args:
        api_key (Optional[str]): Deepgram key, defaults to DEEPGRAM_API_KEY.
        connector: Coroutine factory with the websockets.connect signature.
    """

    def __init__(self, api_key: Optional[str] = None, connector=websockets.connect):
        self.api_key = api_key or os.getenv("DEEPGRAM_API_KEY")
        self._connector = connector
        self._connection = None
        self._receiver: Optional[asyncio.Task] = None
        self.state = RelayState.IDLE
        self.on_transcript: Optional[TranscriptSink] = None

    async def connect(self, language: str = DEFAULT_LANGUAGE) -> None:
        if self.state != RelayState.IDLE:
            raise RuntimeError(f"Cannot connect a relay in state {self.state.value}")
        if not self.api_key:
            self.state = RelayState.CLOSED
            raise RuntimeError("DEEPGRAM_API_KEY environment variable is not set.")

        self.state = RelayState.CONNECTING
        try:
            self._connection = await self._connector(build_listen_url(language), subprotocols=["token", self.api_key])
        except Exception as e:
            self.state = RelayState.CLOSED
            logger.error(f"Speech relay connection failed: {e}")
            raise

        self.state = RelayState.OPEN
        logger.info(f"Speech relay connected (language={language})")
        self._receiver = asyncio.create_task(self._receive_loop())

    async def _receive_loop(self):
        try:
            async for raw in self._connection:
                await self._handle_message(raw)
        except websockets.exceptions.ConnectionClosed as e:
            logger.info(f"Speech relay closed by upstream: {e}")
        except Exception as e:
            logger.error(f"Speech relay receive error: {e}")
        finally:
            self.state = RelayState.CLOSED

    async def _handle_message(self, raw) -> None:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Dropping malformed speech relay message: {e}")
            return

        transcript = extract_transcript(message)
        if transcript is None or self.on_transcript is None:
            return

        try:
            result = self.on_transcript(transcript)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"Transcript sink failed: {e}")

    async def send_audio(self, data: bytes) -> None:
        if self.state != RelayState.OPEN or self._connection is None:
            return
        try:
            await self._connection.send(data)
        except Exception as e:
            logger.error(f"Error sending audio to speech relay: {e}")

    async def close(self) -> None:
        if self.state == RelayState.CLOSED and self._connection is None:
            return
        self.state = RelayState.CLOSED
        connection, self._connection = self._connection, None
        if connection is not None:
            try:
                await connection.close()
            except Exception as e:
                logger.warning(f"Error closing speech relay: {e}")
        if self._receiver is not None and self._receiver is not asyncio.current_task():
            self._receiver.cancel()
            try:
                await self._receiver
            except asyncio.CancelledError:
                pass
        self._receiver = None
        logger.info("Speech relay closed")
