"""
Reference descriptions of the eighteen named healing frequencies.

Nine Solfeggio tones plus nine additional tones. This table feeds result
screens and follow-up emails only; scoring is driven by the catalog.
"""
from __future__ import annotations

from ..catalog.models import Hz
from .models import ReferenceFrequency

SOLFEGGIO = (174, 285, 396, 417, 528, 639, 741, 852, 963)

_TABLE: dict[int, dict] = {
    111: {
        "name": "The Frequency of Cellular Rejuvenation",
        "description": (
            "This frequency initiates cellular alignment and natural resonance, promoting "
            "synchronization between left and right hemispheres of the brain. Beneficial for "
            "balancing hormones and stabilizing mood during stress cycles."
        ),
        "benefits": ["cellular alignment", "brain synchronization", "hormonal balance", "mood stability"],
        "chakra": "Pineal",
        "color": "#1ABC9C",
    },
    174: {
        "name": "The Foundation of Safety",
        "description": (
            "This vibration soothes muscles, ligaments, and fascia, easing chronic pain and "
            "physical tension. It helps the body release fear and return to parasympathetic "
            "balance, promoting physical restoration and resilience."
        ),
        "benefits": ["pain relief", "grounding", "trauma integration", "nervous system calming", "sleep support"],
        "chakra": "Root",
        "color": "#C41E3A",
    },
    222: {
        "name": "The Frequency of Harmony and Renewal",
        "description": (
            "This frequency restores equilibrium and harmony after emotional turbulence, "
            "carrying a gentle, nurturing energy that comforts the nervous system. It "
            "strengthens the connection between the heart and solar plexus."
        ),
        "benefits": ["harmony", "emotional renewal", "heart regulation", "nervous system comfort"],
        "chakra": "Heart/Solar Plexus",
        "color": "#F39C12",
    },
    285: {
        "name": "The Cellular Repairer",
        "description": (
            "This frequency supports regeneration and physical repair, promoting cellular "
            "restructuring and helping tissues remember their original integrity. It restores "
            "the body's self-healing intelligence."
        ),
        "benefits": ["cellular repair", "regeneration", "injury recovery", "immune support", "tissue healing"],
        "chakra": "Etheric",
        "color": "#16A085",
    },
    333: {
        "name": "The Frequency of Divine Communication",
        "description": (
            "This tone strengthens intuition and promotes clearer communication with one's "
            "inner voice. It helps regulate thyroid and vocal strain, clearing confusion and "
            "aligning communication with spiritual truth."
        ),
        "benefits": ["divine communication", "clarity", "creativity", "throat chakra", "mental organization"],
        "chakra": "Throat",
        "color": "#3498DB",
    },
    396: {
        "name": "Liberation from Fear and Guilt",
        "description": (
            "This tone assists in dissolving feelings of guilt, shame, or subconscious fear. "
            "By calming the adrenals and releasing muscular contraction, it reduces anxiety "
            "symptoms and restores courage and emotional safety."
        ),
        "benefits": ["fear release", "guilt dissolution", "anxiety reduction", "root chakra", "emotional safety"],
        "chakra": "Root",
        "color": "#E74C3C",
    },
    417: {
        "name": "Transmutation and Change",
        "description": (
            "This frequency assists with personal transformation and emotional clearing, "
            "helping release old patterns, past traumas, and energetic blockages. It supports "
            "forgiveness and emotional cleansing on a deep cellular level."
        ),
        "benefits": ["emotional clearing", "transformation", "trauma release", "sacral chakra", "forgiveness"],
        "chakra": "Sacral",
        "color": "#E67E22",
    },
    432: {
        "name": "The Natural Resonance of the Earth",
        "description": (
            "This tuning frequency aligns with the Schumann Resonance and natural harmonics. "
            "It induces relaxation, emotional release, and balances both hemispheres of the "
            "brain, enhancing creativity and intuition."
        ),
        "benefits": ["earth connection", "relaxation", "brain balance", "natural harmony", "meditation"],
        "chakra": "All Chakras",
        "color": "#16A085",
    },
    444: {
        "name": "The Frequency of Angelic Alignment",
        "description": (
            "444 Hz invokes harmony between the physical and spiritual realms, supporting "
            "heart coherence and balancing electromagnetic flow. Used for emotional protection "
            "and energetic realignment after distress."
        ),
        "benefits": ["angelic alignment", "heart coherence", "protection", "spiritual harmony"],
        "chakra": "Heart/Crown",
        "color": "#9B59B6",
    },
    528: {
        "name": "The Miracle Tone of DNA Repair",
        "description": (
            "This is the frequency most associated with love, vitality, and cellular renewal. "
            "It promotes DNA repair and biophysical harmony, opening the heart chakra and "
            "restoring a sense of self-worth, compassion, and inner peace."
        ),
        "benefits": ["DNA repair", "love", "vitality", "heart chakra", "hormonal balance", "cellular renewal"],
        "chakra": "Heart",
        "color": "#27AE60",
    },
    555: {
        "name": "The Frequency of Transformation and Change",
        "description": (
            "This tone helps dissolve resistance to change and invites courage and flexibility "
            "during major life transitions. It activates the solar plexus and empowers "
            "personal will."
        ),
        "benefits": ["transformation", "change", "courage", "solar plexus", "life transitions"],
        "chakra": "Solar Plexus",
        "color": "#F1C40F",
    },
    639: {
        "name": "Harmony and Relationship Healing",
        "description": (
            "This vibration restores emotional balance and relational harmony, assisting in "
            "healing the heart from grief, loneliness, or interpersonal tension. It encourages "
            "empathy, forgiveness, and open-hearted communication."
        ),
        "benefits": ["relationship healing", "heart harmony", "grief healing", "empathy", "communication"],
        "chakra": "Heart",
        "color": "#2ECC71",
    },
    666: {
        "name": "The Frequency of Inner Integration",
        "description": (
            "This tone represents energetic balance and alignment, integrating shadow and "
            "light aspects of the self for wholeness. Used to dissolve inner conflict, "
            "self-judgment, or guilt from past actions."
        ),
        "benefits": ["inner integration", "shadow work", "self-acceptance", "wholeness", "forgiveness"],
        "chakra": "Solar Plexus/Sacral",
        "color": "#E67E22",
    },
    741: {
        "name": "Cleansing and Intuitive Expression",
        "description": (
            "This tone assists in cleansing physically, emotionally, and energetically. It "
            "helps clear mental fog, anxiety, and self-suppression, while encouraging honest "
            "self-expression and enhancing intuition."
        ),
        "benefits": ["detoxification", "mental clarity", "intuition", "throat chakra", "self-expression"],
        "chakra": "Throat",
        "color": "#3498DB",
    },
    777: {
        "name": "The Frequency of Higher Guidance",
        "description": (
            "This vibration amplifies spiritual awareness and intuitive reception, opening "
            "subtle channels of guidance and strengthening energetic protection. Used to "
            "access deeper states of consciousness during meditation."
        ),
        "benefits": ["higher guidance", "spiritual awareness", "protection", "consciousness", "divine wisdom"],
        "chakra": "Crown/Third Eye",
        "color": "#A569BD",
    },
    852: {
        "name": "Awakening and Spiritual Clarity",
        "description": (
            "This frequency awakens inner vision and intuitive awareness, stimulating the "
            "pineal and pituitary centers. It aligns the third-eye chakra, enhancing "
            "perception and spiritual discernment while dissolving confusion."
        ),
        "benefits": ["spiritual clarity", "intuition", "third eye chakra", "meditation", "inner vision"],
        "chakra": "Third Eye",
        "color": "#9B59B6",
    },
    888: {
        "name": "The Frequency of Abundance and Flow",
        "description": (
            "This tone resonates with infinite potential and cyclical renewal, enhancing "
            "energetic flow through all meridians. It aligns root and crown, grounding "
            "spiritual energy into matter."
        ),
        "benefits": ["abundance", "prosperity", "energy flow", "manifestation", "vitality"],
        "chakra": "Root/Crown",
        "color": "#D4AF37",
    },
    963: {
        "name": "Pure Consciousness and Oneness",
        "description": (
            "This is the frequency of unity, stillness, and spiritual remembrance. It elevates "
            "consciousness and opens the crown chakra, reconnecting the individual to source "
            "consciousness and divine flow."
        ),
        "benefits": ["oneness", "crown chakra", "spiritual awakening", "consciousness", "divine connection"],
        "chakra": "Crown",
        "color": "#8E44AD",
    },
}


def _entry(hz: int) -> ReferenceFrequency:
    return ReferenceFrequency(hz=hz, solfeggio=hz in SOLFEGGIO, **_TABLE[hz])


def all_references() -> list[ReferenceFrequency]:
    return [_entry(hz) for hz in sorted(_TABLE)]


def get_reference(hz: Hz) -> ReferenceFrequency | None:
    return _entry(int(hz)) if hz in _TABLE else None


def closest_reference(hz: Hz) -> ReferenceFrequency:
    """Nearest named frequency; the lower one wins when two are equally close."""
    nearest = min(sorted(_TABLE), key=lambda ref: abs(ref - hz))
    return _entry(nearest)


def search_by_benefit(keyword: str) -> list[ReferenceFrequency]:
    needle = keyword.strip().lower()
    if not needle:
        return []
    return [
        ref for ref in all_references()
        if any(needle in benefit.lower() for benefit in ref.benefits)
    ]
