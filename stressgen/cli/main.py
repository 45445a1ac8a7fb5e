"""Typer-based CLI entry points for previewing stress query distributions."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional

import typer

import matplotlib
matplotlib.use("Agg")                     # headless backend for servers/CI
import matplotlib.pyplot as plt

# ---- project imports ----
from stressgen.conf.loader import DEFAULT_STRESS_JSON, default_stress_conf, load_stress_conf
from stressgen.conf.model import StressConf
from stressgen.emit.sql_emit import write_sql_dir
from stressgen.emit.yaml_emit import write_workload
from stressgen.errors import RangeLookupError, StressConfigError
from stressgen.log import get_logger, set_verbose
from stressgen.sampler.distribution import DistributionIndex, build_distribution
from stressgen.sampler.generator import StressConfQueryGenerator
from stressgen.templates.tokens import find_tokens

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# Typer app
# -----------------------------------------------------------------------------
app = typer.Typer(help="Stress query generator CLI.")


# -----------------------------------------------------------------------------
# Utility helpers (shared by commands)
# -----------------------------------------------------------------------------
def _load_conf(conf: Optional[Path], command: str) -> StressConf:
    """Load ``conf`` or fall back to the bundled example job."""
    if conf is None:
        typer.echo(f"[{command}] no --conf given, using the bundled example stress job")
        return default_stress_conf()
    if not conf.exists():
        raise typer.BadParameter(f"configuration file not found: {conf}")
    try:
        return load_stress_conf(conf)
    except StressConfigError as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(code=1)


def _build(stress_conf: StressConf) -> DistributionIndex:
    try:
        return build_distribution(stress_conf)
    except StressConfigError as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(code=1)


def _ensure_parent_dir(path: Path) -> None:
    """Create the parent directory for `path` if needed."""
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


def _range_label(start: int, end: int) -> str:
    return f"[{start}, {end})"


def _plot_hits(index: DistributionIndex, hits: Counter, out: Path) -> None:
    """Bar chart of observed vs expected selections per range."""
    labels = [_range_label(s, e) for s, e in index.describe_ranges()]
    total = sum(hits.values())
    observed = [hits.get(i, 0) for i in range(len(index))]
    expected = [
        total * m.range.width / index.total_frequency for m in index.matchers
    ]
    positions = list(range(len(labels)))

    fig, ax = plt.subplots(figsize=(max(6, 0.8 * len(labels)), 3.6))
    ax.bar([p - 0.2 for p in positions], observed, width=0.4, label="observed")
    ax.bar([p + 0.2 for p in positions], expected, width=0.4, label="expected", alpha=0.6)
    ax.set_xticks(positions)
    ax.set_xticklabels(labels, rotation=30, ha="right")
    ax.set_ylabel("iterations")
    ax.set_title(f"Selections over {total} iterations")
    ax.legend()
    fig.savefig(out, dpi=150, bbox_inches="tight")
    plt.close(fig)


# -----------------------------------------------------------------------------
# SAMPLE: draw iterations from the weighted distribution
# -----------------------------------------------------------------------------
@app.command(name="sample")
def sample(
    conf: Optional[Path] = typer.Option(None, help="stress.json (or .yaml) describing the stress job."),
    n: int = typer.Option(10, min=1, help="Number of iterations to draw."),
    seed: Optional[int] = typer.Option(0, help="Sampling seed."),
    out: Optional[Path] = typer.Option(None, help="Optional workload YAML of the sampled iterations."),
    sql_dir: Optional[Path] = typer.Option(None, help="Optional dir to emit one .sql file per iteration."),
    plot: Optional[Path] = typer.Option(None, help="Optional PNG with selections per range."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not echo rendered queries."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Add more verbose output."),
) -> None:
    """Draw iterations the way a stress run would and show the rendered SQL."""
    set_verbose(verbose)
    stress_conf = _load_conf(conf, "sample")
    index = _build(stress_conf)
    generator = StressConfQueryGenerator(index, seed=seed)
    position = {id(m): i for i, m in enumerate(index.matchers)}

    hits: Counter = Counter()
    iterations: List[Dict[str, object]] = []
    for iteration in range(1, n + 1):
        try:
            matcher, queries = generator.draw()
        except RangeLookupError as exc:
            typer.echo(f"[error] {exc}", err=True)
            raise typer.Exit(code=1)
        hits[position[id(matcher)]] += 1
        iterations.append(
            {
                "iteration": iteration,
                "range": [matcher.range.min, matcher.range.next_number],
                "queries": queries,
            }
        )
        if not quiet:
            typer.echo(f"-- iteration {iteration} {_range_label(matcher.range.min, matcher.range.next_number)}")
            for sql in queries:
                typer.echo(sql)

    if out is not None:
        _ensure_parent_dir(out)
        write_workload(out, iterations)
        typer.echo(f"[sample] Wrote workload YAML to {out}")
    if sql_dir is not None:
        written = write_sql_dir(sql_dir, iterations)
        typer.echo(f"[sample] Wrote {len(written)} SQL files to {sql_dir}")
    if plot is not None:
        _ensure_parent_dir(plot)
        _plot_hits(index, hits, plot)
        typer.echo(f"[sample] Wrote selection plot to {plot}")
    logger.debug("selections per range: %s", dict(sorted(hits.items())))
    typer.echo(f"[sample] generated iterations: {len(iterations)}")


# -----------------------------------------------------------------------------
# RANGES: show the frequency layout
# -----------------------------------------------------------------------------
@app.command(name="ranges")
def ranges(
    conf: Optional[Path] = typer.Option(None, help="stress.json (or .yaml) describing the stress job."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Add more verbose output."),
) -> None:
    """Print every entry's range, share of the total and unbound tokens."""
    set_verbose(verbose)
    index = _build(_load_conf(conf, "ranges"))
    typer.echo(f"[ranges] entries={len(index)} total_frequency={index.total_frequency}")
    for i, matcher in enumerate(index.matchers):
        share = matcher.range.width / index.total_frequency
        unbound: List[str] = []
        for query in matcher.query_list:
            for token in find_tokens(query.query_text):
                if token not in query.parameters and token not in unbound:
                    unbound.append(token)
        line = (
            f"{i:>3} {_range_label(matcher.range.min, matcher.range.next_number):>14} "
            f"{share:7.2%} queries={len(matcher.query_list)}"
        )
        if unbound:
            line += " unbound=" + ",".join(f":{t}" for t in unbound)
        typer.echo(line)


# -----------------------------------------------------------------------------
# EXAMPLE: print the bundled stress.json
# -----------------------------------------------------------------------------
@app.command(name="example")
def example() -> None:
    """Print an example stress.json; a queryGroup entry is picked ~10% of the time."""
    typer.echo(DEFAULT_STRESS_JSON.rstrip("\n"))


# Allow `python -m stressgen.cli.main` direct execution (and `python -m stressgen.cli` via __main__.py)
if __name__ == "__main__":
    app()
