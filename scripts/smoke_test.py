#!/usr/bin/env python3
"""
Smoke test for a running sportify backend, against the real Spotify API.

It runs through:
- health + auth URL
- user info and recently played tracks
- tempo-filtered recently played / saved tracks
- running-session playlist proposal

Run with:
    SPOTIFY_ACCESS_TOKEN=... python scripts/smoke_test.py
"""

import json
import os
import sys
from typing import Any, Dict

import requests

BASE_URL = os.getenv("SPORTIFY_BASE_URL", "http://localhost:5000")
ACCESS_TOKEN = os.getenv("SPOTIFY_ACCESS_TOKEN", "")

# Easy running session: 6 min/km over 5 km for a 180 cm runner (112 BPM)
SESSION_PARAMS = {"pace": 6.0, "distance": 5.0, "height": 180}


def call(method: str, path: str, allowed=(200,), **kwargs) -> Dict[str, Any]:
    """Helper to call the API and print concise output."""
    url = f"{BASE_URL}{path}"
    headers = kwargs.pop("headers", {})
    if ACCESS_TOKEN:
        headers["Authorization"] = f"Bearer {ACCESS_TOKEN}"

    print(f"\n=== {method.upper()} {path} ===")
    try:
        resp = requests.request(method, url, headers=headers, timeout=60, **kwargs)
    except requests.RequestException as e:
        print(f"❌ Request failed: {e}")
        sys.exit(1)

    print(f"Status: {resp.status_code}")

    if resp.status_code not in allowed:
        print("❌ Unexpected response:")
        print(resp.text)
        sys.exit(1)

    try:
        data = resp.json()
    except ValueError:
        print("❌ Non-JSON response:")
        print(resp.text)
        sys.exit(1)

    snippet = json.dumps(data, indent=2)[:500]
    print(snippet)
    if len(snippet) == 500:
        print("…(truncated)…")

    return data


def check_session_playlist() -> None:
    # 404 is a legitimate outcome when the library has no track in the band
    proposal = call(
        "get", "/runningsession/playlist", allowed=(200, 404), params=SESSION_PARAMS
    )
    if "songs" not in proposal:
        print("ℹ️ No track matched the session tempo band.")
        return

    total = sum(s["duration_seconds"] for s in proposal["songs"])
    if proposal["songs"] and total > proposal["needed_duration_seconds"] and len(proposal["songs"]) > 1:
        print("❌ Proposal exceeds its duration budget with more than one song.")
        sys.exit(1)

    print(
        f"ℹ️ {len(proposal['songs'])} songs, {total}s "
        f"for a budget of {proposal['needed_duration_seconds']}s."
    )


def main() -> None:
    print("🏃 Smoke Test: sportify backend\n")

    call("get", "/health")
    call("get", "/auth/url")

    if not ACCESS_TOKEN:
        print("\n⏭  SPOTIFY_ACCESS_TOKEN not set, skipping authenticated endpoints.")
        return

    call("get", "/spotify/userinfo")
    call("get", "/spotify/recently-played", params={"limit": 5})
    call("get", "/spotify/recently-played/bpm", params={"bpm_target": 110, "threshold": 10})
    call("get", "/spotify/saved/bpm", params={"bpm_target": 110, "total_cap": 100})

    check_session_playlist()

    print("\nSkipping POST /spotify/playlist (creates a real playlist).")
    print("\n✅ Smoke test completed.")


if __name__ == "__main__":
    main()
