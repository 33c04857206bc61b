#!/usr/bin/env python
"""Run the four sandbox operations required before a production key is issued.

1. Add company
2. List companies
3. Get company
4. Remove company

Env vars:
    INFORM_DIRECT_SANDBOX_API_KEY  sandbox API key (required)
    TEST_COMPANY_NUMBER            company to add/remove (default: 00014259)
"""

from __future__ import annotations

import logging
import os
import sys

from informdirect import InformDirectClient, InformDirectError
from informdirect.auth import SANDBOX_API_KEY_ENV, MissingApiKeyError, load_api_key, mask_secret
from informdirect.models import BASE_URLS, Environment

logger = logging.getLogger(__name__)


class StepRecorder:
    def __init__(self) -> None:
        self.passed = 0
        self.failed = 0

    def ok(self, step: str, detail: str | None = None) -> None:
        self.passed += 1
        print(f"  PASS  {step}{f' - {detail}' if detail else ''}")

    def fail(self, step: str, error: object) -> None:
        self.failed += 1
        print(f"  FAIL  {step} - {error}", file=sys.stderr)


def _message(err: InformDirectError) -> str:
    if isinstance(err.body, dict):
        return str(err.body.get("Message") or "")
    return ""


def _in_portfolio(client: InformDirectClient, company: str) -> bool:
    try:
        return any(c.company_number == company for c in client.get_companies())
    except InformDirectError:
        return False


def run(client: InformDirectClient, company: str, steps: StepRecorder) -> None:
    print("Step 1: Add company")
    try:
        result = client.add_company(company)
        steps.ok("POST /companies/add", result.message)
    except InformDirectError as e:
        if e.status == 429:
            steps.fail("POST /companies/add", "rate limited (429) - wait a few minutes and re-run")
        elif e.status == 422 and _in_portfolio(client, company):
            steps.ok("POST /companies/add", f"already exists ({_message(e)}) - treating as pass")
        else:
            steps.fail("POST /companies/add", e)

    print("Step 2: List companies")
    try:
        companies = client.get_companies()
        if any(c.company_number == company for c in companies):
            steps.ok("GET /companies", f"{len(companies)} company(ies)")
        else:
            steps.fail("GET /companies", f"Test company {company} not in list of {len(companies)}")
    except InformDirectError as e:
        steps.fail("GET /companies", e)

    print("Step 3: Get company")
    try:
        found = client.get_company(company)
        if found is None:
            steps.fail("GET /companies/{num}", "Company not found")
        else:
            steps.ok("GET /companies/{num}", found.name)
    except InformDirectError as e:
        steps.fail("GET /companies/{num}", e)

    print("Step 4: Remove company")
    try:
        result = client.remove_company(company)
        steps.ok("PUT /companies/delete", result.message)
    except InformDirectError as e:
        if e.status == 422 and "last on the account" in _message(e):
            steps.ok("PUT /companies/delete", "cannot delete last company - API responded correctly")
        else:
            steps.fail("PUT /companies/delete", e)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        api_key = load_api_key(SANDBOX_API_KEY_ENV)
    except MissingApiKeyError as e:
        print(e, file=sys.stderr)
        return 1
    company = os.getenv("TEST_COMPANY_NUMBER", "00014259")

    print("Inform Direct Sandbox Compliance Test")
    print(f"API Key  : {mask_secret(api_key)}")
    print(f"Test co. : {company}\n")

    client = InformDirectClient(api_key=api_key, base_url=BASE_URLS[Environment.SANDBOX])
    steps = StepRecorder()
    try:
        run(client, company, steps)
    finally:
        client.logout()

    print(f"\nResults: {steps.passed} passed, {steps.failed} failed out of 4")
    if steps.failed:
        print("\nSome steps failed. Check output above for details.")
        return 1
    print("\nAll sandbox compliance steps passed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
