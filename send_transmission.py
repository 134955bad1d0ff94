"""
send_transmission.py
────────────────────
Sends one SparkPost transmission described by a JSON payload file.

Credentials and defaults come from the environment (or a .env file):
    SPARKPOST_API_KEY, SPARKPOST_SANDBOX, SPARKPOST_ENDPOINT

Run with:
    python3 send_transmission.py payload.json --sandbox
"""

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv

from api_clients.sparkpost_client import SparkPostClient
from models.config import load_config_from_env
from utils.errors import SchemaError, SparkPostError, TransmissionFailedError

logger = logging.getLogger("sparkpost_service")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_SCHEMA = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Send a SparkPost transmission.")
    parser.add_argument("payload", help="Path to a JSON file holding the transmission payload")
    parser.add_argument("--sandbox", action="store_true", help="Force sandbox mode")
    parser.add_argument("--endpoint", help="Override the API endpoint")
    parser.add_argument("--api-key", help="Override SPARKPOST_API_KEY")
    return parser.parse_args(argv)


async def send(client: SparkPostClient, payload: dict) -> int:
    try:
        success = await client.transmission(payload)
    except SchemaError as e:
        logger.error(f"{e}")
        return EXIT_SCHEMA
    except TransmissionFailedError as e:
        for entry in e.errors:
            logger.error(f"[{entry.code}] {entry.message}: {entry.description}")
        return EXIT_FAILED
    except SparkPostError as e:
        logger.error(f"Transport failure: {e}")
        return EXIT_FAILED

    results = success.results
    print(f"Transmission {results.id}: "
          f"{results.total_accepted_recipients} accepted, "
          f"{results.total_rejected_recipients} rejected")
    return EXIT_OK


def main(argv=None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    args = parse_args(argv)

    with open(args.payload, "r", encoding="utf-8") as f:
        payload = json.load(f)

    try:
        config = load_config_from_env(api_key=args.api_key)
    except ValueError as e:
        logger.error(f"{e}")
        return EXIT_SCHEMA

    overrides = {}
    if args.sandbox:
        overrides["sandbox"] = True
    if args.endpoint:
        overrides["endpoint"] = args.endpoint
    if overrides:
        config = config.model_copy(update=overrides)

    with SparkPostClient(config) as client:
        return asyncio.run(send(client, payload))


if __name__ == "__main__":
    sys.exit(main())
