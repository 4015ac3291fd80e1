"""
Command line interface for the ascending alphabet search.

Entry point: ascending-alphabet
"""
import sys
from pathlib import Path

import click

from .config import SearchConfig


USAGE_MESSAGE = ("Arguments are not correct, "
                 "enter int for the number of innerLoops")


@click.command()
@click.argument("loops", type=click.IntRange(min=1))
@click.option("--corpus", "corpus_path", type=click.Path(path_type=Path),
              default=None,
              help="Word list, one word per line (default: english_words.txt).")
@click.option("--results", "results_path", type=click.Path(path_type=Path),
              default=None,
              help="Results log to append to (default: results.txt).")
@click.option("--report", "report_path", type=click.Path(path_type=Path),
              default=None,
              help="Also write a JSON report of the run to this path.")
@click.option("--seed", type=int, default=None,
              help="Seed for the traversal order shuffle.")
@click.option("--allow-missing-corpus", is_flag=True, default=False,
              help="Run with an empty corpus if the word list is unreadable.")
@click.option("--unknown-chars", type=click.Choice(["error", "skip"]),
              default=None,
              help="Words with characters outside A-Z: fail or skip them "
                   "(default: error).")
def cli(loops, corpus_path, results_path, report_path, seed,
        allow_missing_corpus, unknown_chars):
    """Search for the letter ordering with the most ascending words.

    LOOPS is the number of restarts, each with a shuffled traversal order.
    """
    from .search import run

    config = SearchConfig.from_overrides(
        corpus_path=corpus_path,
        results_path=results_path,
        report_path=report_path,
        seed=seed,
        allow_missing_corpus=allow_missing_corpus,
        unknown_chars=unknown_chars,
    )
    run(config, loops)


def main(args=None):
    """Run the CLI; argument errors print the usage on stdout and exit 1."""
    try:
        cli.main(args=args, prog_name="ascending-alphabet",
                 standalone_mode=False)
    except click.UsageError as e:
        click.echo(USAGE_MESSAGE)
        if e.ctx is not None:
            click.echo(e.ctx.get_usage())
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
