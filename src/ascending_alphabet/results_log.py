"""
Persisting finished runs: the append-only results log and the JSON report.
"""
import json
from pathlib import Path


def format_result_line(result) -> str:
    return f"Score: {result.score} for input: {result.permutation}"


def append_result(path: Path, result) -> None:
    """Append one result line to the log, preceded by a newline."""
    with open(path, "a", encoding="utf-8") as f:
        f.write("\n" + format_result_line(result))


def build_report(result, loops, seed, corpus_path, corpus, restart_scores,
                 elapsed):
    """Summary of one search run."""
    return {
        "loops": loops,
        "seed": seed,
        "corpus": {
            "path": str(corpus_path),
            "n_words": len(corpus),
            "n_chars": corpus.n_chars,
            "skipped": corpus.skipped,
        },
        "best_score": result.score,
        "best_permutation": result.permutation,
        "restart_scores": list(restart_scores),
        "top5": sorted(restart_scores, reverse=True)[:5],
        "elapsed_s": round(elapsed, 2),
    }


def save_report(path: Path, report) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
