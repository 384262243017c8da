#!/usr/bin/env python3
"""
Register-and-buy flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the service.

Usage:
    python scripts/flow_register_and_buy.py --vendor <ADDRESS> --name Acme --lamports 1000
    VENDORPAY_BUYER_PAIR=<BASE58 KEYPAIR> python scripts/flow_register_and_buy.py --vendor <ADDRESS> --name Acme

Flow:
    1. Register vendor
    2. List vendors
    3. Buy from vendor
"""

import argparse
import json
import os
import sys

import httpx

BASE_URL = "http://127.0.0.1:3030"


def api_request(base_url: str, method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make API request."""
    url = f"{base_url}{endpoint}"

    if method == "GET":
        response = httpx.get(url, timeout=10.0)
    elif method == "POST":
        # /buy blocks until the transfer is confirmed
        response = httpx.post(url, json=data or {}, timeout=120.0)
    else:
        raise ValueError(f"Unknown method: {method}")

    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict) -> bool:
    """Print result; False on error status."""
    if result["status"] >= 400:
        print(f"ERROR ({result['status']}): {json.dumps(result['data'], indent=2)}")
        return False

    print(f"Status: {result['status']}")
    if result["data"]:
        print(json.dumps(result["data"], indent=2))
    return True


def main():
    parser = argparse.ArgumentParser(description="Register a vendor and pay it")
    parser.add_argument("--base-url", default=BASE_URL, help="Service base URL")
    parser.add_argument("--vendor", required=True, help="Vendor wallet address")
    parser.add_argument("--name", required=True, help="Vendor display name")
    parser.add_argument("--address", default="", help="Vendor contact address")
    parser.add_argument("--service", action="append", default=[], help="Offered service (repeatable)")
    parser.add_argument("--lamports", type=int, default=1000, help="Amount to transfer")
    parser.add_argument("--skip-buy", action="store_true", help="Only register and list")
    args = parser.parse_args()

    print_step(1, "Register vendor")
    result = api_request(args.base_url, "POST", "/vendors", {
        "wallet_id": args.vendor,
        "name": args.name,
        "address": args.address,
        "services": args.service,
    })
    if not print_result(result):
        sys.exit(1)

    print_step(2, "List vendors")
    result = api_request(args.base_url, "GET", "/vendors")
    if not print_result(result):
        sys.exit(1)

    if args.skip_buy:
        return

    # Read from the environment so the keypair does not land in shell history
    buyer_pair = os.environ.get("VENDORPAY_BUYER_PAIR")
    if not buyer_pair:
        print("ERROR: set VENDORPAY_BUYER_PAIR to the buyer's base58 keypair")
        sys.exit(1)

    print_step(3, "Buy from vendor")
    result = api_request(args.base_url, "POST", "/buy", {
        "lamports": args.lamports,
        "vendor": args.vendor,
        "buyer_pair": buyer_pair,
    })
    if not print_result(result):
        sys.exit(1)

    print(f"\nTransferred {args.lamports} lamports to {args.vendor}")


if __name__ == "__main__":
    main()
