#!/usr/bin/env python3
"""
Checks a running relay server: health, then one extraction round trip.

Usage:
    python scripts/check_relay.py
    python scripts/check_relay.py --url http://localhost:3001 --chat
"""

import sys
import argparse
import logging
from pathlib import Path

# Adds src to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from plscc.api import RelayClient
from plscc.config import get_settings
from plscc.errors import RelayError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)


SAMPLE_TEXT = """AN ACT to provide for the protection of air quality 2019

PURPOSE
This Act establishes standards for emissions from industrial facilities and provides for monitoring, enforcement and public reporting on air quality across the country.

Objectives:
- Reduce industrial emissions
- Improve public health

The Ministry of Environment shall administer this Act.
"""


def main():
    parser = argparse.ArgumentParser(description="Relay server smoke check")
    parser.add_argument("--url", default=get_settings().relay_url, help="Relay URL")
    parser.add_argument("--chat", action="store_true", help="Also send one chat message")
    args = parser.parse_args()

    client = RelayClient(args.url)

    logger.info("=" * 50)
    health = client.health_check()
    logger.info(f"Health: {health}")
    if health.get("status") != "ok":
        logger.error("Relay offline")
        sys.exit(1)

    try:
        envelope = client.extract(SAMPLE_TEXT, "clean-air-act.txt")
    except RelayError as e:
        logger.error(f"Extraction failed: {e.message}")
        sys.exit(1)

    data = envelope["data"]
    logger.info(f"Extraction method: {envelope['method']}")
    logger.info(f"Title: {data['legislationTitle']}")
    logger.info(f"Year: {data['legislationYear']}")
    if envelope.get("warning"):
        logger.warning(f"Warning: {envelope['warning']}")

    if args.chat:
        reply = client.chat([{"role": "user", "content": "In one sentence, what is post-legislative scrutiny?"}])
        if reply.success:
            logger.info(f"Chat: {reply.message}")
        else:
            logger.error(f"Chat failed: {reply.error}")
            sys.exit(1)

    logger.info("=" * 50)
    logger.info("Relay OK")


if __name__ == "__main__":
    main()
