from __future__ import annotations

import pandas as pd

from informdirect.auth import mask_secret
from informdirect.models import AuthTokens, CompanySummary


def format_company_table(companies: list[CompanySummary]) -> str:
    df = pd.DataFrame(
        [(c.company_number, c.name, c.public_url) for c in companies],
        columns=["Number", "Name", "URL"],
    )
    return df.to_string(index=False, justify="left")


def format_token_info(tokens: AuthTokens) -> str:
    return "\n".join(
        [
            f"  Access token  : {mask_secret(tokens.access_token, visible=10)}",
            f"  Refresh token : {mask_secret(tokens.refresh_token, visible=10)}",
        ]
    )


def format_company_detail(company: CompanySummary) -> str:
    return "\n".join(
        [
            f"Company: {company.name}",
            f"Number:  {company.company_number}",
            f"URL:     {company.public_url}",
        ]
    )
