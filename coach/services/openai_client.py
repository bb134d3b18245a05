"""
coach.services.openai_client

Thin wrapper around the OpenAI SDK used by insights, resume and cover letters.
The client is built lazily so Django starts without OPENAI_API_KEY; the key is
only required when a request actually needs the model.
"""
from __future__ import annotations

import json
import logging
import re
from functools import lru_cache
from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from openai import OpenAI

from .errors import AIServiceError

logger = logging.getLogger("coach")

INSIGHTS_SYSTEM_PROMPT = "You are a labour-market analyst. You return only valid JSON."

INSIGHTS_PROMPT = """
Analyze the current state of the {industry} industry and provide insights in ONLY the following JSON format without any additional notes or explanations:
{{
  "salaryRanges": [
    {{ "role": "string", "min": number, "max": number, "median": number, "location": "string" }}
  ],
  "growthRate": number,
  "demandLevel": "High" | "Medium" | "Low",
  "topSkills": ["skill1", "skill2"],
  "marketOutlook": "Positive" | "Neutral" | "Negative",
  "keyTrends": ["trend1", "trend2"],
  "recommendedSkills": ["skill1", "skill2"]
}}

IMPORTANT: Return ONLY the JSON. No additional text, notes, or markdown formatting.
Include at least 5 common roles for salary ranges.
Growth rate should be a percentage.
Include at least 5 skills and trends.
""".strip()


@lru_cache
def get_openai_client() -> OpenAI:
    api_key = getattr(settings, "OPENAI_API_KEY", None)
    if not api_key:
        # Don't kill Django startup; raise only when actually called by a request
        raise ImproperlyConfigured("OPENAI_API_KEY is missing")
    return OpenAI(api_key=api_key, timeout=settings.OPENAI_TIMEOUT)


def complete_text(prompt: str, *, system: str = "", temperature: float = 0.7) -> str:
    """Single chat completion; returns the stripped text or raises AIServiceError."""
    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})

    try:
        client = get_openai_client()
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=messages,
            temperature=temperature,
        )
        text = (response.choices[0].message.content or "").strip()
    except ImproperlyConfigured as e:
        raise AIServiceError(str(e)) from e
    except Exception as e:
        logger.error("[OpenAI error]: %s", e)
        raise AIServiceError(f"OpenAI request failed: {e}") from e

    if not text:
        raise AIServiceError("OpenAI returned an empty completion")
    return text


def _extract_json_object(text: str) -> Dict[str, Any]:
    # Models sometimes wrap the object in ```json fences or stray prose
    cleaned = re.sub(r"```(?:json)?", "", text).strip()
    match = re.search(r"\{.*\}", cleaned, re.DOTALL)
    if not match:
        raise AIServiceError("OpenAI output contained no JSON object")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error("[Insight Parsing Error]: %s\n[Raw GPT Output]: %s", e, text)
        raise AIServiceError("OpenAI output was not valid JSON") from e
    if not isinstance(data, dict):
        raise AIServiceError("OpenAI output was not a JSON object")
    return data


def generate_industry_insights(industry: str) -> Dict[str, Any]:
    """Return the raw (camelCase) insight payload for `industry`."""
    text = complete_text(
        INSIGHTS_PROMPT.format(industry=industry),
        system=INSIGHTS_SYSTEM_PROMPT,
        temperature=0.2,
    )
    return _extract_json_object(text)
