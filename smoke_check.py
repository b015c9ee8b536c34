# Purpose: Pokes a running Points Converter API the way the frontend would.
# Start the server first (points-api, or uvicorn points_api.main:app --port 8080).

import os
import sys

import requests

# --- Configuration ---
API_URL = os.environ.get("API_URL", "http://127.0.0.1:8080/api/v1").rstrip("/")
FRONTEND_ORIGIN = "https://points-converter.com"
TIMEOUT = 5


def check_health(session):
    response = session.get(f"{API_URL}/health", timeout=TIMEOUT)
    response.raise_for_status()
    body = response.json()
    assert body == {"status": "healthy", "message": "Points Converter API is running"}, body
    print(f"   Health:       {body['status']}")


def check_conversions(session):
    headers = {"Origin": FRONTEND_ORIGIN}
    first = session.get(f"{API_URL}/conversions", headers=headers, timeout=TIMEOUT)
    first.raise_for_status()
    second = session.get(f"{API_URL}/conversions", headers=headers, timeout=TIMEOUT)
    second.raise_for_status()

    assert first.content == second.content, "two fetches returned different bodies"
    assert first.headers.get("Access-Control-Allow-Origin") == FRONTEND_ORIGIN, \
        "frontend origin was not allowed"

    data = first.json()
    print(f"   Last updated: {data.get('lastUpdated', '-')}")
    print(f"   Programs:     {len(data.get('programs') or {})}")
    print(f"   Conversions:  {len(data.get('conversions') or [])}")


def check_preflight(session):
    response = session.options(
        f"{API_URL}/conversions",
        headers={
            "Origin": FRONTEND_ORIGIN,
            "Access-Control-Request-Method": "GET",
        },
        timeout=TIMEOUT,
    )
    assert response.status_code == 204, f"preflight returned {response.status_code}"
    print(f"   Preflight:    {response.headers.get('Access-Control-Allow-Methods')}")


def run_smoke_check():
    print("\n" + "=" * 60)
    print(f"SMOKE CHECK against {API_URL}")
    print("=" * 60 + "\n")

    with requests.Session() as session:
        try:
            check_health(session)
            check_conversions(session)
            check_preflight(session)
        except requests.exceptions.ConnectionError:
            print("ERROR: Could not connect to the API.")
            print("   Make sure the server is running: points-api")
            return 1
        except (requests.exceptions.RequestException, AssertionError) as e:
            print(f"FAILED: {e}")
            return 1

    print("\nOK: API is serving conversion data.")
    return 0


if __name__ == "__main__":
    sys.exit(run_smoke_check())
