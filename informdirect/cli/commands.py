"""Sub-command handlers. Each returns a process exit code."""

from __future__ import annotations

from informdirect.client import InformDirectClient

from .format import format_company_detail, format_company_table, format_token_info


def authenticate(client: InformDirectClient) -> int:
    print("Authenticating...")
    tokens = client.authenticate()
    print(format_token_info(tokens))
    print("Authentication successful.")
    return 0


def list_companies(client: InformDirectClient) -> int:
    companies = client.get_companies()
    if not companies:
        print("No companies in portfolio.")
        return 0
    print(f"{len(companies)} company(ies):\n")
    print(format_company_table(companies))
    return 0


def get_company(client: InformDirectClient, company_number: str) -> int:
    company = client.get_company(company_number)
    if company is None:
        print(f"Company {company_number} not found in portfolio.")
        return 0
    print(format_company_detail(company))
    return 0


def add_company(
    client: InformDirectClient, company_number: str, auth_code: str | None = None
) -> int:
    result = client.add_company(company_number, auth_code)
    print(result.message or "Company added successfully.")
    return 0


def remove_company(
    client: InformDirectClient,
    company_number: str,
    save_registers: bool | None = None,
    save_documents: bool | None = None,
) -> int:
    result = client.remove_company(
        company_number, save_registers=save_registers, save_documents=save_documents
    )
    print(result.message or "Company removed successfully.")
    return 0
