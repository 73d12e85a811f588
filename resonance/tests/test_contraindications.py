from resonance.intake.contraindications import (
    all_contraindications,
    get_contraindication,
    get_severity,
    has_contraindications,
    screen,
)


def test_all_nine_contraindications_listed():
    keys = [c.key for c in all_contraindications()]
    assert keys == [
        "pacemaker", "dvt", "bleeding", "surgery", "hypotension",
        "epilepsy", "inflammatory", "psychotic", "pregnancy",
    ]


def test_severity_levels():
    assert get_severity("pacemaker") == "critical"
    assert get_severity("Pregnancy") == "high"
    assert get_severity("psychotic") == "moderate"
    assert get_severity("headache") == "low"


def test_lookup_is_case_insensitive():
    info = get_contraindication(" DVT ")
    assert info is not None
    assert info.title == "Deep Vein Thrombosis (DVT)"
    assert get_contraindication("unknown") is None


def test_has_contraindications():
    assert not has_contraindications([])
    assert not has_contraindications(["none"])
    assert not has_contraindications(["None", "epilepsy"])
    assert has_contraindications(["epilepsy"])


def test_screen_orders_by_severity_and_skips_unknown():
    found = screen(["psychotic", "migraine", "surgery", "epilepsy", "epilepsy"])
    assert [(c.key, c.severity) for c in found] == [
        ("epilepsy", "critical"),
        ("surgery", "high"),
        ("psychotic", "moderate"),
    ]
