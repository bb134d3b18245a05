"""
Industry catalogue offered by the onboarding form.
The stored profile label is "<industry id>-<sub-industry slug>".
"""
from django.utils.text import slugify

INDUSTRIES = [
    {
        "id": "tech",
        "name": "Technology",
        "sub_industries": [
            "Software Development", "IT Services", "Cybersecurity", "Cloud Computing",
            "Artificial Intelligence/Machine Learning", "Data Science & Analytics",
            "Internet & Web Services", "Robotics", "Quantum Computing", "Blockchain & Cryptocurrency",
        ],
    },
    {
        "id": "finance",
        "name": "Financial Services",
        "sub_industries": [
            "Banking", "Investment Banking", "Insurance", "FinTech", "Wealth Management",
            "Asset Management", "Real Estate Investment", "Private Equity", "Venture Capital",
            "Accounting",
        ],
    },
    {
        "id": "healthcare",
        "name": "Healthcare & Life Sciences",
        "sub_industries": [
            "Pharmaceuticals", "Biotechnology", "Medical Devices", "Healthcare Services",
            "Digital Health", "Telemedicine", "Health Insurance", "Mental Health Services",
        ],
    },
    {
        "id": "manufacturing",
        "name": "Manufacturing & Industrial",
        "sub_industries": [
            "Automotive", "Aerospace & Defense", "Electronics", "Industrial Automation",
            "Chemical Manufacturing", "3D Printing", "Textile Manufacturing",
        ],
    },
    {
        "id": "retail",
        "name": "Retail & E-commerce",
        "sub_industries": [
            "E-commerce", "Retail Stores", "Consumer Goods", "Fashion & Apparel",
            "Food & Beverage", "Supply Chain & Logistics", "Marketplaces",
        ],
    },
    {
        "id": "media",
        "name": "Media & Entertainment",
        "sub_industries": [
            "Digital Media", "Gaming", "Film & Television", "Music", "Publishing",
            "Advertising", "Social Media", "Streaming Services",
        ],
    },
    {
        "id": "education",
        "name": "Education & Training",
        "sub_industries": [
            "EdTech", "Higher Education", "K-12 Education", "Professional Training",
            "Language Learning", "Online Learning Platforms",
        ],
    },
    {
        "id": "energy",
        "name": "Energy & Utilities",
        "sub_industries": [
            "Renewable Energy", "Oil & Gas", "Nuclear Energy", "Power Generation",
            "Utilities", "Energy Storage", "Smart Grid",
        ],
    },
    {
        "id": "consulting",
        "name": "Professional Services",
        "sub_industries": [
            "Management Consulting", "Legal Services", "Human Resources",
            "Marketing Services", "Architecture", "Engineering Services",
        ],
    },
    {
        "id": "government",
        "name": "Government & Public Sector",
        "sub_industries": [
            "Federal Government", "State/Local Government", "Defense",
            "Public Services", "Non-Profit Organizations",
        ],
    },
]

INDUSTRY_BY_ID = {item["id"]: item for item in INDUSTRIES}


def industry_label(industry_id: str, sub_industry: str) -> str:
    return f"{industry_id}-{slugify(sub_industry)}"
