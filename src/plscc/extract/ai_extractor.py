"""
Model-backed legislation extraction with pattern-matching fallback.

The model is asked for a flat JSON object; any failure (no credential,
network error, non-success status, reply without a usable JSON object)
returns the pattern extractor's result instead, tagged "fallback" and
carrying a warning. Only input validation raises.

Usage:
    from plscc.extract import LegislationExtractor

    extractor = LegislationExtractor(llm_client)
    response = await extractor.extract(text, "clean-air-act.pdf")

    print(response.method)          # ExtractionMethod.AI or FALLBACK
    print(response.to_dict())       # {"success": True, "method": ..., "data": {...}}
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..errors import CredentialMissingError, InputValidationError, UpstreamServiceError
from ..llm.anthropic_client import AnthropicClient
from ..llm.prompts import EXTRACTION_SYSTEM_PROMPT, build_extraction_message
from ..llm.response_parser import extract_json_object
from ..parsing import (
    DEFAULT_FILENAME,
    ExtractionMethod,
    ExtractionResult,
    LegislationPatternExtractor,
)

logger = logging.getLogger(__name__)


AI_FAILED_WARNING = "AI extraction failed, used pattern matching"


@dataclass
class ExtractionConfig:
    """Extraction limits."""

    min_document_chars: int = 50
    document_char_limit: int = 15000


@dataclass
class ExtractionResponse:
    """Envelope returned to the UI for every extraction."""

    data: ExtractionResult
    method: ExtractionMethod
    warning: Optional[str] = None
    success: bool = True

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "success": self.success,
            "method": self.method.value,
            "data": self.data.to_dict(),
        }
        if self.warning:
            result["warning"] = self.warning
        return result


def validate_document_text(text: Optional[str], min_chars: int = 50) -> str:
    """
    Rejects missing or too-short document text.

    Raises:
        InputValidationError: text is None or shorter than min_chars after trimming
    """
    if not text or len(text.strip()) < min_chars:
        raise InputValidationError("Document text is too short for analysis")
    return text


class LegislationExtractor:
    """
    Extracts legislation details with the model, falling back to patterns.

    Attributes:
        llm_client: Messages API client
        pattern_extractor: Deterministic fallback
        config: Extraction limits
    """

    def __init__(
        self,
        llm_client: AnthropicClient,
        pattern_extractor: Optional[LegislationPatternExtractor] = None,
        config: Optional[ExtractionConfig] = None,
    ):
        self.llm_client = llm_client
        self.pattern_extractor = pattern_extractor or LegislationPatternExtractor()
        self.config = config or ExtractionConfig()

    async def extract(self, text: Optional[str], filename: Optional[str] = None) -> ExtractionResponse:
        """
        Extracts legislation details from document text.

        Args:
            text: Document text (at least config.min_document_chars after trimming)
            filename: Original file name, used by the fallback title

        Returns:
            ExtractionResponse, method "ai" on success, "fallback" otherwise

        Raises:
            InputValidationError: text missing or too short
        """
        text = validate_document_text(text, self.config.min_document_chars)
        filename = filename or DEFAULT_FILENAME

        try:
            content = await self.llm_client.create_message(
                system=EXTRACTION_SYSTEM_PROMPT,
                messages=[{
                    "role": "user",
                    "content": build_extraction_message(text, self.config.document_char_limit),
                }],
            )
            extracted = extract_json_object(content)
            result = ExtractionResult.from_mapping(extracted, method=ExtractionMethod.AI)
        except CredentialMissingError:
            logger.warning("ANTHROPIC_API_KEY not configured, using fallback extraction")
            return self._fallback(text, filename)
        except UpstreamServiceError as e:
            if e.status_code is not None:
                return self._fallback(text, filename, AI_FAILED_WARNING)
            return self._fallback(text, filename, e.message)
        except ValueError as e:
            logger.error(f"Extraction error: {e}")
            return self._fallback(text, filename, str(e))
        except Exception as e:
            logger.exception(f"Unexpected extraction error: {e}")
            return self._fallback(text, filename, str(e) or type(e).__name__)

        logger.info(f"AI extraction succeeded for {filename!r}")
        return ExtractionResponse(data=result, method=ExtractionMethod.AI)

    def _fallback(self, text: str, filename: str, warning: Optional[str] = None) -> ExtractionResponse:
        if warning:
            logger.warning(f"Falling back to pattern matching: {warning}")
        return ExtractionResponse(
            data=self.pattern_extractor.extract(text, filename),
            method=ExtractionMethod.FALLBACK,
            warning=warning,
        )
