#!/usr/bin/env python
"""Walk through the Inform Direct API with bare `requests` calls.

Useful for seeing the HTTP exchange the client library wraps. Uses the
sandbox API and $INFORM_DIRECT_SANDBOX_API_KEY.
"""

from __future__ import annotations

import sys

import requests

from informdirect.auth import SANDBOX_API_KEY_ENV, MissingApiKeyError, load_api_key, mask_secret
from informdirect.models import BASE_URLS, Environment

BASE_URL = BASE_URLS[Environment.SANDBOX]


def main() -> int:
    try:
        api_key = load_api_key(SANDBOX_API_KEY_ENV)
    except MissingApiKeyError as e:
        print(e, file=sys.stderr)
        return 1

    print("Inform Direct - Raw Requests Example")
    print(f"Base URL : {BASE_URL}")
    print(f"API Key  : {mask_secret(api_key)}\n")

    print("1. POST /authenticate")
    res = requests.post(f"{BASE_URL}/authenticate", json={"ApiKey": api_key})
    print(f"   Status: {res.status_code} {res.reason}")
    if not res.ok:
        print(f"   Auth failed: {res.status_code} {res.reason}", file=sys.stderr)
        return 1
    tokens = res.json()
    access_token = tokens["AccessToken"]
    refresh_token = tokens.get("RefreshToken", "")
    print(f"   Access token  : {mask_secret(access_token)}")
    print(f"   Refresh token : {mask_secret(refresh_token)}")
    print("   Auth succeeded!\n")

    print("2. GET /companies")
    res = requests.get(
        f"{BASE_URL}/companies", headers={"Authorization": f"Bearer {access_token}"}
    )
    print(f"   Status: {res.status_code} {res.reason}")
    if res.ok:
        for c in res.json().get("Companies") or []:
            print(f"   {c['CompanyNumber']}  {c['Name']}")

    print("\n3. POST /logout")
    res = requests.post(f"{BASE_URL}/logout", json={"RefreshToken": refresh_token})
    print(f"   Status: {res.status_code} {res.reason}")
    print("\nDone.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
