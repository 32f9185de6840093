#!/usr/bin/env python3

"""Simple CLI to hit the local /v1/insights endpoint and print decoded insight."""

import argparse
import json
import os
import re
import sys
from time import perf_counter

import requests

DEFAULT_URL = os.getenv("INSIGHTS_URL", "http://localhost:8080/v1/insights")

# the model sometimes wraps JSON into markdown code block
FENCE_PATTERN = re.compile(r"```(?:json)?")


def decode_insight(result: str) -> dict:
    """Strip markdown fence from the model output and decode it."""
    return json.loads(FENCE_PATTERN.sub("", result))


def main() -> int:
    """Entry point to this tool."""
    parser = argparse.ArgumentParser(
        description="Ask the local service for travel insights."
    )
    parser.add_argument("--from", dest="source", default="USD", help="Source currency.")
    parser.add_argument("--to", dest="target", default="JPY", help="Target currency.")
    parser.add_argument("--amount", type=float, default=50, help="Amount to convert.")
    parser.add_argument(
        "--converted-amount",
        default=None,
        help="Converted amount as displayed to the user.",
    )
    parser.add_argument(
        "--url",
        default=DEFAULT_URL,
        help=f"Endpoint URL. Defaults to env INSIGHTS_URL or {DEFAULT_URL!r}.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=60,
        help="Request timeout in seconds (default: 60).",
    )
    args = parser.parse_args()

    payload = {
        "amount": args.amount,
        "from": args.source,
        "to": args.target,
        "convertedAmount": args.converted_amount,
    }

    t0 = perf_counter()
    try:
        resp = requests.post(url=args.url, json=payload, timeout=args.timeout)
        elapsed = perf_counter() - t0
        resp.raise_for_status()
    except requests.exceptions.RequestException as e:
        elapsed = perf_counter() - t0
        print(f"Request failed after {elapsed:.2f}s: {e}", file=sys.stderr)
        return 1

    try:
        obj = resp.json()
    except ValueError:
        print("Server response is not valid JSON.", file=sys.stderr)
        print(resp.text[:1000], file=sys.stderr)
        return 2

    if "result" not in obj:
        print("JSON is missing 'result' field:", file=sys.stderr)
        print(obj, file=sys.stderr)
        return 3

    try:
        insight = decode_insight(obj["result"])
    except ValueError:
        print("Failed to process travel data:", file=sys.stderr)
        print(obj["result"][:1000], file=sys.stderr)
        return 4

    print(json.dumps(insight, indent=2, ensure_ascii=False))
    print(f"Response time {elapsed:.2f} seconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
