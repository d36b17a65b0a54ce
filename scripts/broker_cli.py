"""Command-line client for a running service broker API.

Usage:
    python scripts/broker_cli.py --broker-url http://localhost:5000 provision --instance-id db-1
    python scripts/broker_cli.py bind --instance-id db-1 --binding-id app-1
"""
from __future__ import annotations
import argparse
import json
import os
import sys

import requests

# Status codes that count as success per command. Deletes also accept 410:
# the resource being gone already is the desired end state.
SUCCESS_STATUSES = {
    "catalog": {200},
    "provision": {201},
    "deprovision": {200, 410},
    "bind": {201},
    "unbind": {200, 410},
}


def _request_for(args) -> tuple[str, str]:
    """Return (method, path) for the parsed command."""
    if args.cmd == "catalog":
        return "GET", "/v2/catalog"
    instance_path = f"/v2/service_instances/{args.instance_id}"
    if args.cmd == "provision":
        return "PUT", instance_path
    if args.cmd == "deprovision":
        return "DELETE", instance_path
    binding_path = f"{instance_path}/service_bindings/{args.binding_id}"
    if args.cmd == "bind":
        return "PUT", binding_path
    return "DELETE", binding_path


def call_broker(broker_url: str, method: str, path: str, timeout: float) -> tuple[int, object]:
    """Send one request to the broker and return (status, parsed JSON body)."""
    url = f"{broker_url.rstrip('/')}{path}"
    response = requests.request(method, url, json={}, timeout=timeout)
    try:
        body = response.json()
    except ValueError:
        body = response.text
    return response.status_code, body


def main() -> None:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Service broker API client")
    parser.add_argument("--broker-url", default=os.environ.get("BROKER_URL", "http://localhost:5000"))
    parser.add_argument("--timeout", type=float, default=10.0)

    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("catalog")

    sp = sub.add_parser("provision")
    sp.add_argument("--instance-id", required=True)

    sd = sub.add_parser("deprovision")
    sd.add_argument("--instance-id", required=True)

    sb = sub.add_parser("bind")
    sb.add_argument("--instance-id", required=True)
    sb.add_argument("--binding-id", required=True)

    su = sub.add_parser("unbind")
    su.add_argument("--instance-id", required=True)
    su.add_argument("--binding-id", required=True)

    args = parser.parse_args()

    if not args.cmd:
        parser.print_help()
        return

    method, path = _request_for(args)
    try:
        status, body = call_broker(args.broker_url, method, path, args.timeout)
    except requests.RequestException as e:
        print(f"[{args.cmd}] Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"{status} {json.dumps(body)}")
    if status not in SUCCESS_STATUSES[args.cmd]:
        sys.exit(1)


if __name__ == "__main__":
    main()
