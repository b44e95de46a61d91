"""
Client for the PLS relay server.

Used by the Streamlit shell. Extraction degrades to the local pattern
extractor when the relay is offline, and chat failures come back as an
unsuccessful ChatReply, so the UI keeps working without the relay.

Usage:
    from plscc.api import RelayClient

    client = RelayClient("http://localhost:3001")

    client.health_check()
    # {'status': 'ok', 'aiConfigured': True, 'timestamp': '...'}

    result = client.extract_with_fallback(text, "clean-air-act.pdf")
    reply = client.chat([{"role": "user", "content": "What is PLS?"}])
"""

import logging
from typing import Any, Mapping, Optional, Sequence

import requests

from ..chat import ChatReply
from ..errors import RelayError
from ..parsing import ExtractionMethod, ExtractionResult, extract_legislation_fallback

logger = logging.getLogger(__name__)


CONNECTION_ERROR = "Unable to connect to the assistant. Please check if the server is running."


class RelayClient:
    """
    HTTP client for the relay's /api endpoints.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: int = 180,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            base_url: Relay URL (e.g. http://localhost:3001)
            timeout: Request timeout in seconds
            session: Shared session (tests inject a fake here)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def health_check(self) -> dict:
        """Relay status; never raises."""
        try:
            resp = self.session.get(
                f"{self.base_url}/api/health",
                timeout=10,
            )
            resp.raise_for_status()
            return resp.json()
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return {"status": "offline", "aiConfigured": False, "error": str(e)}

    def is_healthy(self) -> bool:
        return self.health_check().get("status") == "ok"

    # ========================================================================
    # Extraction
    # ========================================================================

    def extract(self, text: str, filename: Optional[str] = None) -> dict:
        """
        Extracts legislation details through the relay.

        Args:
            text: Document text
            filename: Original file name

        Returns:
            Envelope {"success", "method", "data", "warning"?}

        Raises:
            RelayError: relay unreachable, non-OK status or unsuccessful envelope
        """
        try:
            resp = self.session.post(
                f"{self.base_url}/api/extract",
                json={"text": text, "filename": filename},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Extraction request failed: {e}")
            raise RelayError(f"Extraction request failed: {e}") from e

        data = self._json(resp)
        if not resp.ok or not data.get("success"):
            error = data.get("error") or f"Relay returned HTTP {resp.status_code}"
            raise RelayError(error, details={"status_code": resp.status_code})
        return data

    def extract_with_fallback(self, text: str, filename: Optional[str] = None) -> tuple[ExtractionResult, Optional[str]]:
        """
        Extracts through the relay, or locally when the relay fails.

        Returns:
            (result, warning). The result carries method "ai" or "fallback".
        """
        try:
            envelope = self.extract(text, filename)
        except RelayError as e:
            logger.warning(f"Relay extraction failed, using local pattern matching: {e.message}")
            return extract_legislation_fallback(text, filename), e.message

        data = envelope.get("data") or {}
        method = ExtractionMethod(data.get("_method") or envelope.get("method") or ExtractionMethod.AI.value)
        return ExtractionResult.from_mapping(data, method=method), envelope.get("warning")

    # ========================================================================
    # Chat
    # ========================================================================

    def chat(
        self,
        messages: Sequence[Mapping[str, Any]],
        document_text: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> ChatReply:
        """
        Sends the conversation to the PLS Assistant.

        Returns:
            ChatReply; connection failures become an unsuccessful reply
        """
        payload: dict[str, Any] = {"messages": [dict(m) for m in messages]}
        if document_text:
            payload["documentText"] = document_text
        if context:
            payload["context"] = dict(context)

        try:
            resp = self.session.post(
                f"{self.base_url}/api/chat",
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Chat request failed: {e}")
            return ChatReply.failed(CONNECTION_ERROR)

        data = self._json(resp)
        reply = ChatReply.from_dict(data)
        if not reply.success and not reply.error:
            return ChatReply.failed(f"Relay returned HTTP {resp.status_code}")
        return reply

    @staticmethod
    def _json(resp) -> dict:
        try:
            data = resp.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
