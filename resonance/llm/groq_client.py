from __future__ import annotations

import json
import logging

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are the voice of a vibroacoustic wellness studio. "
    "Given the frequency chosen for a client's session and the reasons it was chosen, "
    "write two warm, calm sentences explaining the choice to the client. "
    "Do not make medical claims and do not invent reasons that are not listed.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"explanation": "<two sentences>"}'
)


def _build_user_message(
    frequency: float,
    frequency_name: str,
    reasons: list[str],
) -> str:
    lines = ["## Selected Frequency", f"- {frequency} Hz ({frequency_name})", "", "## Reasons"]
    lines.extend(f"- {reason}" for reason in reasons)
    return "\n".join(lines)


def personalize_explanation(
    frequency: float,
    frequency_name: str,
    reasons: list[str],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    """
    Ask the Groq LLM to turn scoring reasons into a short client-facing note.

    Returns an empty string on any failure (timeout, bad JSON, API error) so
    the caller can use its template text instead.
    """
    if not config.enabled or not config.api_key:
        return ""

    if not reasons:
        return ""

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": _build_user_message(frequency, frequency_name, reasons),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=0.4,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content or ""
        parsed = json.loads(content)
        explanation = str(parsed.get("explanation", "")).strip()
        return explanation

    except Exception:
        logger.warning("Groq LLM call failed, falling back to template explanation", exc_info=True)
        return ""
