#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
import sys

from informdirect import ConfigError, InformDirectClient, InformDirectError
from informdirect.auth import mask_secret


def main() -> int:
    parser = argparse.ArgumentParser(description="Check that an Inform Direct API key authenticates")
    parser.add_argument("--sandbox", action="store_true", help="Use the sandbox API and key")
    args = parser.parse_args()

    try:
        client = InformDirectClient.from_env(sandbox=args.sandbox)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        tokens = client.authenticate()
    except InformDirectError as e:
        print(json.dumps({"ok": False, "status": e.status, "error": e.message}))
        return 1
    print(
        json.dumps(
            {
                "ok": True,
                "base_url": client.base_url,
                "access_token": mask_secret(tokens.access_token),
                "jwt_segments": len(tokens.access_token.split(".")),
            }
        )
    )
    client.logout()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
