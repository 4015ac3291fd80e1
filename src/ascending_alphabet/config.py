"""
Ascending Alphabet - global configuration as a dataclass.
"""
from dataclasses import dataclass
from pathlib import Path


@dataclass
class SearchConfig:
    """Configuration for a search run."""

    # === PATHS ===
    corpus_path: Path = Path("english_words.txt")
    results_path: Path = Path("results.txt")
    report_path: Path | None = None

    # === SEARCH ===
    seed: int | None = None

    # === CORPUS POLICIES ===
    # Unreadable corpus: fail the run unless explicitly allowed to go on empty
    allow_missing_corpus: bool = False
    # Words with characters outside A-Z: "error" or "skip"
    unknown_chars: str = "error"

    def ensure_dirs(self) -> None:
        """Create the parent directories of the output files."""
        for path in [self.results_path, self.report_path]:
            if path is not None:
                path.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_overrides(cls, **kwargs) -> "SearchConfig":
        """Build a config ignoring None values (for Click integration)."""
        filtered = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**filtered)
