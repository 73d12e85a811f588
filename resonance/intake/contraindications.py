"""
Contraindication reference data for vibroacoustic sessions.

The intake form lists these conditions; the practitioner sees any that were
ticked next to the recommendation. Screening is informational and does not
change frequency scoring.
"""
from __future__ import annotations

from typing import Iterable, Literal

from pydantic import BaseModel

Severity = Literal["critical", "high", "moderate", "low"]

CONTRAINDICATIONS: dict[str, dict[str, str]] = {
    "pacemaker": {
        "title": "Pacemakers/Implants",
        "text": (
            "Powerful magnets in the speakers can interfere with pacemakers, ICDs "
            "(Implantable Cardioverter Defibrillators), deep brain stimulators, or other "
            "metal implants. This interference could potentially cause device malfunction "
            "or discomfort."
        ),
    },
    "dvt": {
        "title": "Deep Vein Thrombosis (DVT)",
        "text": (
            "The vibrations could potentially dislodge a blood clot, which may lead to "
            "serious complications such as pulmonary embolism. If you have DVT or a history "
            "of blood clots, vibroacoustic therapy is not recommended."
        ),
    },
    "bleeding": {
        "title": "Bleeding Disorders",
        "text": (
            "The vibrations can affect circulation, which is not advisable for individuals "
            "with bleeding disorders such as hemophilia or von Willebrand disease. This could "
            "increase the risk of bleeding complications."
        ),
    },
    "surgery": {
        "title": "Recent Surgery/Open Wounds",
        "text": (
            "The therapy can reduce blood clotting necessary for healing. If you have recently "
            "undergone surgery or have open wounds, the vibrations may interfere with the "
            "natural healing process and increase bleeding risk."
        ),
    },
    "hypotension": {
        "title": "Severe Low Blood Pressure (Hypotension)",
        "text": (
            "Vibroacoustic therapy may cause a further reduction in blood pressure, leading to "
            "lethargy, dizziness, or fainting. If you have severe low blood pressure, this "
            "therapy is contraindicated."
        ),
    },
    "epilepsy": {
        "title": "Seizure Disorders (Epilepsy)",
        "text": (
            "The sounds and vibrations may trigger or exacerbate seizures in individuals with "
            "epilepsy or other seizure disorders. The specific frequencies and rhythmic "
            "patterns could act as seizure triggers."
        ),
    },
    "inflammatory": {
        "title": "Acute Inflammatory Conditions",
        "text": (
            "The therapy could worsen conditions like acute rheumatoid arthritis or other "
            "acute inflammatory conditions. Vibrations may increase inflammation and pain "
            "during acute flare-ups."
        ),
    },
    "psychotic": {
        "title": "Psychotic Conditions",
        "text": (
            "There's a potential to provoke feelings of insecurity, paranoia, or exacerbate "
            "symptoms in individuals with psychosis or severe mental health conditions. The "
            "sensory experience may be overwhelming or triggering."
        ),
    },
    "pregnancy": {
        "title": "Pregnancy",
        "text": (
            "Due to limited research and potential effects on the fetus, vibroacoustic therapy "
            "is generally contraindicated during pregnancy, especially during the first "
            "trimester. The impact of low-frequency vibrations on fetal development has not "
            "been adequately studied."
        ),
    },
}

_SEVERITY: dict[str, Severity] = {
    "pacemaker": "critical",
    "dvt": "critical",
    "bleeding": "critical",
    "epilepsy": "critical",
    "surgery": "high",
    "hypotension": "high",
    "pregnancy": "high",
    "inflammatory": "moderate",
    "psychotic": "moderate",
}


class ContraindicationOut(BaseModel):
    key: str
    title: str
    text: str
    severity: Severity


def get_severity(key: str) -> Severity:
    return _SEVERITY.get(key.strip().lower(), "low")


def get_contraindication(key: str) -> ContraindicationOut | None:
    normalized = key.strip().lower()
    info = CONTRAINDICATIONS.get(normalized)
    if info is None:
        return None
    return ContraindicationOut(key=normalized, severity=get_severity(normalized), **info)


def all_contraindications() -> list[ContraindicationOut]:
    return [get_contraindication(key) for key in CONTRAINDICATIONS]


def has_contraindications(concerns: Iterable[str]) -> bool:
    """True when any concern other than the ``none`` sentinel was reported."""
    selected = [c for c in concerns if c and c.strip()]
    if any(c.strip().lower() == "none" for c in selected):
        return False
    return bool(selected)


def screen(concerns: Iterable[str]) -> list[ContraindicationOut]:
    """Known contraindications present in *concerns*, most severe first."""
    order = {"critical": 0, "high": 1, "moderate": 2, "low": 3}
    found: dict[str, ContraindicationOut] = {}
    for concern in concerns:
        info = get_contraindication(concern)
        if info is not None:
            found.setdefault(info.key, info)
    return sorted(found.values(), key=lambda c: order[c.severity])
