"""Keyword-based claim classifier.

A stand-in for a real verification service: the verdict is picked by the
first keyword group found in the lower-cased text, so the output is fully
determined by the input.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Classification:
    result: str
    confidence: int
    explanation: str


# Checked in order; the first group with a keyword in the text wins.
KEYWORD_VERDICTS = (
    (
        ('fake', 'false', 'hoax'),
        Classification(
            result='false',
            confidence=85,
            explanation='This appears to contain false information based on available evidence.',
        ),
    ),
    (
        ('true', 'verified', 'confirmed'),
        Classification(
            result='true',
            confidence=90,
            explanation='This information appears to be accurate based on current evidence.',
        ),
    ),
    (
        ('partly', 'some', 'mixed'),
        Classification(
            result='partly-true',
            confidence=70,
            explanation='This claim contains some accurate information but may be missing context.',
        ),
    ),
)

UNVERIFIED = Classification(
    result='unverified',
    confidence=75,
    explanation='This claim requires further verification from authoritative sources.',
)


def classify(text: str) -> Classification:
    lowered = text.lower()
    for keywords, verdict in KEYWORD_VERDICTS:
        if any(keyword in lowered for keyword in keywords):
            return verdict
    return UNVERIFIED
