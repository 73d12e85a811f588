from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    recs = [e for e in events if e["type"] == "recommendation"]
    total = len(recs)

    # Average response time
    times = [r["response_time_ms"] for r in recs if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Chosen frequencies
    hz_counter: Counter[str] = Counter()
    for r in recs:
        hz_counter[str(r.get("frequency"))] += 1
    frequency_distribution = [{"hz": n, "count": c} for n, c in hz_counter.most_common()]

    # How results were produced
    strategy_counter: Counter[str] = Counter(r.get("strategy", "unknown") for r in recs)
    fallbacks = total - strategy_counter.get("scored", 0)

    # Top intentions
    intention_counter: Counter[str] = Counter()
    for r in recs:
        for i in r.get("intentions", []) or []:
            intention_counter[i] += 1
    top_intentions = [{"name": n, "count": c} for n, c in intention_counter.most_common(10)]

    # Tie sizes among scored results
    tie_counts = [r["tie_count"] for r in recs if r.get("strategy") == "scored" and "tie_count" in r]
    avg_tie = round(sum(tie_counts) / len(tie_counts), 2) if tie_counts else 0.0

    empty_catalog = sum(1 for r in recs if r.get("catalog_size", 0) == 0)

    return {
        "total_recommendations": total,
        "avg_response_time_ms": avg_time,
        "frequency_distribution": frequency_distribution,
        "strategy_usage": dict(strategy_counter),
        "fallback_rate": round(fallbacks / total * 100, 1) if total else 0.0,
        "top_intentions": top_intentions,
        "avg_tie_size": avg_tie,
        "empty_catalog_requests": empty_catalog,
    }
