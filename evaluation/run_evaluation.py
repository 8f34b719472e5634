"""Run each catalog dataset row through the local matcher and collect outputs."""

import json
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from aicura.matcher.catalog import SYMPTOM_ROWS, build_default_catalog
from aicura.matcher.ranking import predict

RESULTS_DIR = Path(__file__).parent / "results"


def row_to_text(symptoms: list[str]) -> str:
    """Render a dataset row's symptoms as comma-separated free text."""
    return ", ".join(symptoms)


def evaluate_row(index: int, row: tuple[str, ...], catalog) -> dict:
    """Run the matcher on a single dataset row."""
    disease, *symptoms = row
    text = row_to_text(symptoms)
    start = time.perf_counter()
    results = predict(text, catalog)
    elapsed = time.perf_counter() - start

    return {
        "row_id": index,
        "expected_disease": disease,
        "input": text,
        "predictions": [r.model_dump(mode="json") for r in results],
        "latency_seconds": elapsed,
    }


def main():
    catalog = build_default_catalog()
    RESULTS_DIR.mkdir(exist_ok=True)

    print(f"Running evaluation on {len(SYMPTOM_ROWS)} dataset rows...")
    results = [evaluate_row(i, row, catalog) for i, row in enumerate(SYMPTOM_ROWS)]

    output_path = RESULTS_DIR / "evaluation_results.json"
    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)
    print(f"\nResults saved to {output_path}")

    empty = sum(1 for r in results if not r["predictions"])
    print(f"  Rows with no matches: {empty}/{len(results)}")


if __name__ == "__main__":
    main()
