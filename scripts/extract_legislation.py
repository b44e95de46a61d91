#!/usr/bin/env python3
"""
Extracts legislation details from a document on disk.

Reads the file (PDF, DOCX, DOC or TXT), then extracts with the model
when ANTHROPIC_API_KEY is set, or with pattern matching otherwise
(--fallback forces pattern matching). Prints the result as JSON.

Usage:
    python scripts/extract_legislation.py clean-air-act.pdf
    python scripts/extract_legislation.py act.txt --fallback
    python scripts/extract_legislation.py act.docx --relay http://localhost:3001
"""

import sys
import json
import asyncio
import argparse
import logging
from pathlib import Path

# Adds src to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from plscc.api import RelayClient
from plscc.config import get_settings
from plscc.errors import PLSError
from plscc.extract import ExtractionConfig, LegislationExtractor
from plscc.ingest import DocumentReader
from plscc.llm import AnthropicClient, LLMConfig
from plscc.parsing import extract_legislation_fallback

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


async def extract_direct(text: str, filename: str) -> dict:
    """Extracts in-process with the Anthropic client."""
    settings = get_settings()
    async with AnthropicClient(LLMConfig.from_settings(settings)) as client:
        extractor = LegislationExtractor(
            client,
            config=ExtractionConfig(
                min_document_chars=settings.min_document_chars,
                document_char_limit=settings.extraction_char_limit,
            ),
        )
        response = await extractor.extract(text, filename)
    return response.to_dict()


def main():
    parser = argparse.ArgumentParser(description="Extract legislation details from a document")
    parser.add_argument("path", help="Document to read (.pdf, .docx, .doc, .txt)")
    parser.add_argument("--fallback", action="store_true", help="Pattern matching only, no model call")
    parser.add_argument("--relay", help="Extract through a running relay server instead of in-process")
    args = parser.parse_args()

    path = Path(args.path)
    if not path.exists():
        logger.error(f"File not found: {path}")
        sys.exit(1)

    try:
        doc = DocumentReader().read(path)
        logger.info(f"Read {doc.char_count:,} chars from {doc.filename}")

        if args.fallback:
            output = {
                "success": True,
                "method": "fallback",
                "data": extract_legislation_fallback(doc.text, doc.filename).to_dict(),
            }
        elif args.relay:
            result, warning = RelayClient(args.relay).extract_with_fallback(doc.text, doc.filename)
            output = {"success": True, "method": result.method.value, "data": result.to_dict()}
            if warning:
                output["warning"] = warning
        else:
            output = asyncio.run(extract_direct(doc.text, doc.filename))
    except PLSError as e:
        logger.error(e.message)
        sys.exit(1)

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
