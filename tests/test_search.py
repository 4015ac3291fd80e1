import json
import random

import click
import pytest

from ascending_alphabet.config import SearchConfig
from ascending_alphabet.corpus import Corpus
from ascending_alphabet.optimizer import Result
from ascending_alphabet.scoring import ALPHABET, score
from ascending_alphabet.search import run, search


class CountingRng:
    """Shuffle that leaves the order untouched but counts calls."""

    def __init__(self):
        self.calls = 0

    def shuffle(self, seq):
        self.calls += 1


@pytest.mark.parametrize("loops", [0, -1, 1.5, "3", True])
def test_loops_must_be_positive_int(loops, small_corpus):
    with pytest.raises(ValueError):
        search(loops, small_corpus)


def test_first_restart_uses_identity_order():
    result = search(1, Corpus.from_words(["ZA"]), rng=random.Random(0))
    assert result == Result(1, "BCDEFGHIJKLMNOPQRSTUVWXYZA")


def test_shuffles_after_every_restart(small_corpus):
    rng = CountingRng()
    search(3, small_corpus, rng=rng)
    assert rng.calls == 3


def test_restart_monotonicity(small_corpus):
    scores = [search(n, small_corpus, rng=random.Random(5)).score
              for n in range(1, 6)]
    assert scores == sorted(scores)


def test_same_seed_same_result(small_corpus):
    a = search(4, small_corpus, rng=random.Random(9))
    b = search(4, small_corpus, rng=random.Random(9))
    assert a == b


def test_callbacks(small_corpus):
    improvements = []
    restarts = []
    best = search(5, small_corpus, rng=random.Random(2),
                  on_new_best=lambda i, r: improvements.append(r),
                  on_restart=lambda i, r: restarts.append((i, r.score)))

    assert [i for i, _ in restarts] == [0, 1, 2, 3, 4]
    improved = [r.score for r in improvements]
    assert improved == sorted(set(improved))
    assert improvements[-1] == best
    assert best.score == max(s for _, s in restarts)
    assert best.score == score(best.permutation, small_corpus)


def _config(tmp_path, corpus_path, **kwargs):
    return SearchConfig(corpus_path=corpus_path,
                        results_path=tmp_path / "out" / "results.txt",
                        **kwargs)


def test_run_appends_result(tmp_path, word_file, capsys):
    config = _config(tmp_path, word_file("ZA\n"), seed=1)
    result = run(config, 1)
    run(config, 1)

    assert result == Result(1, "BCDEFGHIJKLMNOPQRSTUVWXYZA")
    line = "\nScore: 1 for input: BCDEFGHIJKLMNOPQRSTUVWXYZA"
    assert config.results_path.read_text(encoding="utf-8") == line * 2

    out = capsys.readouterr().out
    assert "Looping 1 times" in out
    assert "=== Outer New highscore === 1" in out
    assert "Highscore = 1" in out
    assert "Best Input = BCDEFGHIJKLMNOPQRSTUVWXYZA" in out
    assert "Time taken = " in out


def test_run_writes_report(tmp_path, word_file):
    report_path = tmp_path / "report.json"
    config = _config(tmp_path, word_file("ZA\nYB\nQ\n"), seed=4,
                     report_path=report_path)
    result = run(config, 3)

    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["loops"] == 3
    assert report["seed"] == 4
    assert report["corpus"]["n_words"] == 3
    assert report["best_score"] == result.score
    assert report["best_permutation"] == result.permutation
    assert len(report["restart_scores"]) == 3


def test_run_missing_corpus_fails(tmp_path):
    config = _config(tmp_path, tmp_path / "missing.txt")
    with pytest.raises(click.ClickException):
        run(config, 1)


def test_run_missing_corpus_allowed(tmp_path, capsys):
    config = _config(tmp_path, tmp_path / "missing.txt",
                     allow_missing_corpus=True)
    result = run(config, 2)

    assert result == Result(0, ALPHABET)
    assert "empty corpus" in capsys.readouterr().err


def test_run_unknown_chars(tmp_path, word_file, capsys):
    path = word_file("AB\nab\nBA\n")
    with pytest.raises(click.ClickException):
        run(_config(tmp_path, path), 1)

    result = run(_config(tmp_path, path, unknown_chars="skip"), 1)
    assert result.score == 1
    assert "1 words skipped" in capsys.readouterr().out


def test_run_results_write_error_is_not_fatal(tmp_path, word_file, capsys):
    config = SearchConfig(corpus_path=word_file("AB\n"),
                          results_path=tmp_path)
    result = run(config, 1)

    assert result.score == 1
    captured = capsys.readouterr()
    assert "cannot write" in captured.err
    assert "Highscore = 1" in captured.out
