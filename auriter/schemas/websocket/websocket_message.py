"""
Description: 
This module defines the schemas for messages sent to browser clients on the transcription websocket.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

"""

from pydantic import BaseModel
from typing import Literal

# Base model for all websocket messages
class WebSocketMessage(BaseModel):
    type: Literal["status", "error", "transcript"]
    content: str
