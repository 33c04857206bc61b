#!/usr/bin/env python
"""Read-only tour of an account, safe against sandbox or production.

Authenticates, lists the portfolio, fetches the first company and logs out.
"""

from __future__ import annotations

import argparse
import logging
import sys

from informdirect import ConfigError, InformDirectClient, InformDirectError
from informdirect.auth import mask_secret
from informdirect.config import ClientSettings

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    parser = argparse.ArgumentParser(description="Read-only Inform Direct example")
    parser.add_argument("--sandbox", action="store_true", help="Use the sandbox API and key")
    args = parser.parse_args()

    try:
        settings = ClientSettings.from_env(sandbox=args.sandbox)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    print(f"Environment: {'SANDBOX' if args.sandbox else 'PRODUCTION'}")
    print(f"Base URL:    {settings.base_url}")
    print(f"API Key:     {mask_secret(settings.api_key)}\n")

    client = InformDirectClient.from_settings(settings)
    try:
        print("1. Authenticating...")
        tokens = client.authenticate()
        print(f"   Access token:  {mask_secret(tokens.access_token)}")
        print(f"   Refresh token: {mask_secret(tokens.refresh_token)}\n")

        print("2. Listing companies...")
        companies = client.get_companies()
        print(f"   Found {len(companies)} company(ies):\n")
        for company in companies:
            print(f"   {company.company_number}  {company.name}")

        if companies:
            first = companies[0].company_number
            print(f"\n3. Getting details for {first}...")
            detail = client.get_company(first)
            if detail is not None:
                print(f"   Name:   {detail.name}")
                print(f"   Number: {detail.company_number}")
                print(f"   URL:    {detail.public_url}")
    except InformDirectError as e:
        logger.error(f"Request failed: {e}")
        return 1
    finally:
        print("\n4. Logging out...")
        client.logout()
        print("   Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
