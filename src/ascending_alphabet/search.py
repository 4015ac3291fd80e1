"""
Multi-restart search for the alphabet with the most ascending words.

The local optimum reached by coordinate ascent depends on the order in
which letters are repositioned, so the optimizer is restarted `loops`
times from the identity alphabet, shuffling the traversal order after
each restart, and the best result across restarts is kept.

CLI: ascending-alphabet LOOPS
"""
import random
import time

import click

from .config import SearchConfig
from .corpus import Corpus, CorpusLoadError, load_corpus
from .optimizer import Result, optimize
from .results_log import append_result, build_report, save_report
from .scoring import ALPHABET, UnscoreableWordError
from .utils import print_header, print_step


# =====================================================================
# Restart controller
# =====================================================================

def search(loops, corpus, rng=None, on_new_best=None, on_restart=None):
    """Run the optimizer `loops` times with shuffled traversal orders.

    Args:
        loops: number of restarts, positive int
        corpus: Corpus to score against
        rng: random.Random used to shuffle the traversal order
        on_new_best: optional callback(restart, result) on each improvement
        on_restart: optional callback(restart, result) after every restart

    Returns: Result with the best score and permutation across restarts
    """
    if isinstance(loops, bool) or not isinstance(loops, int) or loops < 1:
        raise ValueError(f"loops must be a positive integer, got {loops!r}")
    if rng is None:
        rng = random.Random()

    order = list(ALPHABET)
    best = Result(-1, "")

    for restart in range(loops):
        result = optimize(order, corpus)

        if result.score > best.score:
            best = result
            if on_new_best is not None:
                on_new_best(restart, result)

        if on_restart is not None:
            on_restart(restart, result)

        rng.shuffle(order)

    return best


# =====================================================================
# Entry point
# =====================================================================

def _load(config):
    """Load the corpus according to the configured policies."""
    try:
        return load_corpus(config.corpus_path, config.unknown_chars)
    except CorpusLoadError as e:
        if not config.allow_missing_corpus:
            raise click.ClickException(str(e))
        click.echo(f"  WARNING: {e}", err=True)
        click.echo("  WARNING: continuing with an empty corpus, "
                   "every alphabet will score 0.", err=True)
        return Corpus.empty()
    except UnscoreableWordError as e:
        raise click.ClickException(
            f"{e}. Use --unknown-chars skip to drop such words.")


def _echo_new_best(restart, result):
    click.echo(f"=== Outer Input changed === {result.permutation}")
    click.echo(f"=== Outer New highscore === {result.score}")


def _print_summary(result, elapsed):
    click.echo(f"Highscore = {result.score}")
    click.echo(f"Best Input = {result.permutation}")
    click.echo(f"Time taken = {elapsed:.1f}s")


def run(config: SearchConfig, loops: int) -> Result:
    """Entry point: load the corpus, search, log the result."""
    print_header("ASCENDING ALPHABET SEARCH")

    print_step(f"Loading corpus {config.corpus_path}...")
    corpus = _load(config)
    click.echo(f"    {len(corpus)} words, {corpus.n_chars} letters")
    if corpus.skipped:
        click.echo(f"    {corpus.skipped} words skipped "
                   f"(characters outside {ALPHABET})")

    print_step("Coordinate ascent with restarts...")
    click.echo(f"Looping {loops} times")
    restart_scores = []
    t0 = time.time()
    result = search(
        loops, corpus,
        rng=random.Random(config.seed),
        on_new_best=_echo_new_best,
        on_restart=lambda restart, r: restart_scores.append(r.score),
    )
    elapsed = time.time() - t0

    print_step("Saving result...")
    try:
        config.ensure_dirs()
        append_result(config.results_path, result)
        click.echo(f"    Appended: {config.results_path}")
    except OSError as e:
        click.echo(f"  ERROR: cannot write {config.results_path}: {e}",
                   err=True)

    if config.report_path is not None:
        report = build_report(result, loops, config.seed, config.corpus_path,
                              corpus, restart_scores, elapsed)
        try:
            save_report(config.report_path, report)
            click.echo(f"    Saved: {config.report_path}")
        except OSError as e:
            click.echo(f"  ERROR: cannot write {config.report_path}: {e}",
                       err=True)

    _print_summary(result, elapsed)
    return result
