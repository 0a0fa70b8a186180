"""Prompt templates sent to the generative model."""

CONTENT_ANALYSIS_PROMPT = """\
Analyze the following text comprehensively for misinformation, bias, and manipulation.
Return a single, valid JSON object with the following structure:
{{
  "claims": ["Extract up to {max_claims} specific, verifiable claims.", "If none, return an empty array."],
  "biasAnalysis": {{
    "score": "A credibility score from 0 (very low) to 100 (very high) based on language and tone.",
    "explanation": "A one-sentence explanation for the score.",
    "signals": ["List up to {max_signals} specific signals of bias or manipulation found \
(e.g., 'Loaded Language', 'Appeal to Emotion', 'Us-vs-Them Mentality'). \
If none, return an empty array."]
  }}
}}
Text: "{text}"\
"""

FACT_CHECK_PROMPT = """\
Is the following claim true, false, or unproven based on reliable web sources? \
Provide a brief explanation. Respond ONLY with a valid JSON object like \
{{"verdict": "True/False/Unproven", "explanation": "string"}}. Claim: "{claim}"\
"""

PHISHING_PROMPT = """\
Analyze the text for phishing signals like urgency, threats, suspicious links, \
or requests for sensitive information. Provide a risk score from 0 (none) to 10 \
(blatant phishing) and a brief explanation. Respond ONLY with a valid JSON object: \
{{"riskScore": number, "explanation": "string"}}. Text: "{text}"\
"""


def content_analysis_prompt(text: str, *, max_claims: int = 2, max_signals: int = 3) -> str:
    """Build the initial claims + bias analysis prompt."""
    return CONTENT_ANALYSIS_PROMPT.format(
        text=text, max_claims=max_claims, max_signals=max_signals
    )


def fact_check_prompt(claim: str) -> str:
    return FACT_CHECK_PROMPT.format(claim=claim)


def phishing_prompt(text: str) -> str:
    return PHISHING_PROMPT.format(text=text)
