"""Compute evaluation metrics from matcher results."""

import json
import sys
from pathlib import Path

import numpy as np

RESULTS_DIR = Path(__file__).parent / "results"


def rank_of_expected(result: dict) -> int | None:
    """1-based position of the expected disease in the predictions, if present."""
    for position, prediction in enumerate(result.get("predictions", []), start=1):
        if prediction["disease_name"] == result["expected_disease"]:
            return position
    return None


def score_hit_at(result: dict, k: int) -> float:
    position = rank_of_expected(result)
    return 1.0 if position is not None and position <= k else 0.0


def score_reciprocal_rank(result: dict) -> float:
    position = rank_of_expected(result)
    return 1.0 / position if position else 0.0


def compute_all_metrics(results: list[dict]) -> dict:
    """Compute all metrics across all dataset rows."""
    if not results:
        return {"error": "No results to score."}

    hit1 = [score_hit_at(r, 1) for r in results]
    hit5 = [score_hit_at(r, 5) for r in results]
    rr = [score_reciprocal_rank(r) for r in results]
    latencies = [r.get("latency_seconds", 0.0) for r in results]
    top_confidence = [
        r["predictions"][0]["confidence"] for r in results if r.get("predictions")
    ]

    misses = [
        {
            "row_id": r["row_id"],
            "expected_disease": r["expected_disease"],
            "top_prediction": r["predictions"][0]["disease_name"] if r["predictions"] else None,
        }
        for r in results
        if score_hit_at(r, 1) == 0.0
    ]

    return {
        "n_rows": len(results),
        "aggregate": {
            "hit_at_1": round(float(np.mean(hit1)), 3),
            "hit_at_5": round(float(np.mean(hit5)), 3),
            "mrr": round(float(np.mean(rr)), 3),
            "top_confidence_mean": (
                round(float(np.mean(top_confidence)), 1) if top_confidence else None
            ),
            "latency_ms": {
                "p50": round(float(np.percentile(latencies, 50)) * 1000, 3),
                "p95": round(float(np.percentile(latencies, 95)) * 1000, 3),
            },
        },
        "top1_misses": misses,
    }


def main():
    results_path = RESULTS_DIR / "evaluation_results.json"
    if not results_path.exists():
        print(f"No results file found at {results_path}")
        print("Run run_evaluation.py first.")
        sys.exit(1)

    with open(results_path) as f:
        results = json.load(f)

    metrics = compute_all_metrics(results)

    metrics_path = RESULTS_DIR / "metrics.json"
    with open(metrics_path, "w") as f:
        json.dump(metrics, f, indent=2)

    print("=" * 60)
    print("AIcura local matcher: evaluation metrics")
    print("=" * 60)
    agg = metrics.get("aggregate", {})
    print(f"  hit@1: {agg.get('hit_at_1')}  |  hit@5: {agg.get('hit_at_5')}  |  MRR: {agg.get('mrr')}")
    print(f"  mean top confidence: {agg.get('top_confidence_mean')}")

    print("\n" + "-" * 60)
    print("Top-1 misses:")
    for miss in metrics.get("top1_misses", []):
        print(f"  [{miss['row_id']:3d}] expected {miss['expected_disease']!r}, got {miss['top_prediction']!r}")

    print(f"\nMetrics saved to {metrics_path}")


if __name__ == "__main__":
    main()
