from .speech_relay_client import DEFAULT_LANGUAGE, RelayState, SpeechRelayClient, build_listen_url, extract_transcript

__all__ = ["DEFAULT_LANGUAGE", "RelayState", "SpeechRelayClient", "build_listen_url", "extract_transcript"]
