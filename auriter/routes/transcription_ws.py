"""
Description:
WebSocket route for live interview transcription.
The browser streams binary audio frames; they are relayed to the speech-to-text
vendor and every transcript is pushed back as
{"type": "transcript", "content": "..."}.

Dependencies:
- fastapi: For handling WebSocket connections.
- auriter.services.speech_relay: For the upstream speech relay client.
- loguru: For logging information about the WebSocket connection and any exceptions that occur.

"""
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from loguru import logger
from auriter.core.dependencies import get_speech_relay_factory
from auriter.schemas.websocket.websocket_message import WebSocketMessage
from auriter.services.speech_relay import DEFAULT_LANGUAGE

router = APIRouter(
    prefix="/api",
    tags=["transcription"],
    responses={404: {"description": "Not found"}}
)

@router.websocket("/ws/transcription/{room_id}")
async def transcription_websocket(websocket: WebSocket, room_id: str, relay_factory=Depends(get_speech_relay_factory)):
    await websocket.accept()
    logger.info(f"WebSocket connected for transcription (room {room_id})")

    relay = relay_factory()

    async def forward_transcript(transcript: str):
        try:
            await websocket.send_json(WebSocketMessage(type="transcript", content=transcript).model_dump())
        except Exception as e:
            logger.warning(f"Could not forward transcript for room {room_id}: {e}")

    relay.on_transcript = forward_transcript

    language = websocket.query_params.get("language", DEFAULT_LANGUAGE)
    try:
        await relay.connect(language)
    except Exception as e:
        logger.error(f"Speech relay unavailable for room {room_id}: {e}")
        await websocket.send_json(WebSocketMessage(type="error", content="Transcription service unavailable").model_dump())
        #1011 = internal error
        await websocket.close(code=1011)
        return

    await websocket.send_json(WebSocketMessage(type="status", content="connected").model_dump())
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            if message.get("bytes"):
                await relay.send_audio(message["bytes"])
    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected (room {room_id})")
    except Exception as e:
        logger.error(f"Unexpected error in transcription WebSocket for room {room_id}: {e}")
    finally:
        await relay.close()
