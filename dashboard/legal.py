RISK_DISCLOSURE_INTRO = (
    "Investing in startups involves significant risk. Carefully review the disclosures below before "
    "committing funds."
)

RISK_DISCLOSURE_POINTS = [
    {
        "title": "You could lose your entire investment",
        "body": (
            "Startup investments are speculative and highly volatile. Never invest money you cannot "
            "afford to lose."
        ),
    },
    {
        "title": "Liquidity is limited",
        "body": (
            "There may be no secondary market for your investment, and you may not be able to sell for "
            "many years."
        ),
    },
    {
        "title": "No guarantees or insurance",
        "body": (
            "Investments are not bank deposits and are not insured or guaranteed by any government or "
            "financial institution."
        ),
    },
    {
        "title": "Diversification is important",
        "body": "Invest across multiple companies and sectors to reduce the impact of any single loss.",
    },
]
