#!/usr/bin/env python3
"""Benchmark role grants and has-role lookups: throughput and latency.

Usage:
  With Keycloak:
    export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
    export KEYCLOAK_REALM=nftroles KEYCLOAK_CLIENT_ID=nftroles-api KEYCLOAK_CLIENT_SECRET=secret
    export BENCH_USER=testuser BENCH_PASSWORD=testpass
    python scripts/bench_grants.py [--num-grants 200]

  Dev mode (TRUST_ACCOUNT_HEADER=true on the server, no Keycloak):
    export BENCH_ACCOUNT=0x00000000000000000000000000000000000000aa
    python scripts/bench_grants.py --num-grants 200
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

ROLE_NAME = "bench()"
TOKEN_ADDRESS = "0x000000000000000000000000000000000000bEEF"


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def _percentiles(latencies: list[float]) -> tuple[float, float, float]:
    n = len(latencies)
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return p50, p95, p99


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark role grants")
    parser.add_argument("--num-grants", type=int, default=100, help="Number of grants")
    parser.add_argument("--ttl", type=int, default=3600, help="Grant lifetime in seconds")
    parser.add_argument("--output", type=str, default="/results/bench_grants.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    account = os.environ.get("BENCH_ACCOUNT")
    if account:
        headers = {"X-Account": account}
        grantor = account
    else:
        token = get_token(
            os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
            os.environ.get("KEYCLOAK_REALM", "nftroles"),
            os.environ.get("KEYCLOAK_CLIENT_ID", "nftroles-api"),
            os.environ.get("KEYCLOAK_CLIENT_SECRET", ""),
            os.environ.get("BENCH_USER", "testuser"),
            os.environ.get("BENCH_PASSWORD", "testpass"),
        )
        headers = {"Authorization": f"Bearer {token}"}
        grantor = None

    with httpx.Client(timeout=30.0) as client:
        r = client.get(f"{api_url}/v1/role-ids", params={"name": ROLE_NAME})
        r.raise_for_status()
        role = r.json()["id"]

        grant_latencies: list[float] = []
        lookup_latencies: list[float] = []
        errors = 0
        expiration = int(time.time()) + args.ttl

        print(f"Granting {args.num_grants} roles...")
        start_total = time.perf_counter()
        for i in range(args.num_grants):
            grantee = f"0x{i:040x}"
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/roles/{role}/grants",
                json={
                    "grantee": grantee,
                    "token_address": TOKEN_ADDRESS,
                    "token_id": i,
                    "expiration_date": expiration,
                    "data": "0x",
                },
                headers=headers,
            )
            if r.status_code != 201:
                errors += 1
                continue
            grant_latencies.append(time.perf_counter() - t0)
            grantor = grantor or r.json()["grantor"]

            t0 = time.perf_counter()
            r = client.get(
                f"{api_url}/v1/roles/{role}/grantors/{grantor}/tokens/{TOKEN_ADDRESS}/{i}"
                f"/grantees/{grantee}/has-role",
                params={"supports_multiple_assignments": "false"},
            )
            if r.status_code == 200 and r.json()["has_role"]:
                lookup_latencies.append(time.perf_counter() - t0)
            else:
                errors += 1
        total_elapsed = time.perf_counter() - start_total

    n = len(grant_latencies)
    if n == 0 or not lookup_latencies:
        print("No successful grants.")
        return 1

    g50, g95, g99 = _percentiles(grant_latencies)
    l50, l95, l99 = _percentiles(lookup_latencies)
    summary = (
        f"Grant benchmark (n={n}, errors={errors})\n"
        f"  Throughput: {n / total_elapsed:.2f} grant+lookup pairs/s\n"
        f"  Grant latency: p50={g50:.1f} ms, p95={g95:.1f} ms, p99={g99:.1f} ms\n"
        f"  has-role latency: p50={l50:.1f} ms, p95={l95:.1f} ms, p99={l99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
