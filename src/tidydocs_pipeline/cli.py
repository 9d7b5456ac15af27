"""Command-line interface for the cleaning pipeline.

Provides subcommands: `clean` and `stats`. Each command is implemented as a
`cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path

from tidydocs_pipeline.aggregate.totals import format_total
from tidydocs_pipeline.batch import clean_files
from tidydocs_pipeline.config import get_settings
from tidydocs_pipeline.logging_config import configure_logging
from tidydocs_pipeline.models import CleaningResult

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def stats_payload(path: Path, result: CleaningResult) -> dict[str, object]:
    """Return the JSON-ready statistics document for one cleaned file."""
    payload: dict[str, object] = {"input_file": str(path)}
    payload.update(result.stats.model_dump(mode="json"))
    payload["total_amount_display"] = format_total(result.stats)
    return payload


def output_stems(paths: list[Path]) -> list[str]:
    """Return one output name stem per input path.

    Stems shared by several inputs are prefixed with the parent directory
    name (`<parent>_<stem>`) so outputs do not overwrite each other.
    """
    counts = Counter(p.stem for p in paths)
    stems: list[str] = []
    for p in paths:
        if counts[p.stem] > 1:
            stem = f"{p.parent.name}_{p.stem}" if p.parent.name else p.stem
            log.warning("Several inputs are named %s; writing %s as %s", p.name, p, stem)
            stems.append(stem)
        else:
            stems.append(p.stem)
    return stems


def write_outputs(
    path: Path,
    result: CleaningResult,
    out_dir: Path,
    stem: str | None = None,
) -> list[Path]:
    """Write `<stem>_clean.csv` and `<stem>_stats.json` into `out_dir`.

    `stem` defaults to the input file stem. The cleaned CSV is skipped
    when the dataset is empty.

    Returns:
        Paths of the files written.
    """
    stem = stem or path.stem
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    if result.dataset.is_empty:
        log.warning("No rows left after cleaning %s; skipping cleaned CSV", path)
    else:
        csv_path = out_dir / f"{stem}_clean.csv"
        result.dataset.to_pandas().to_csv(csv_path, index=False, encoding="utf-8")
        written.append(csv_path)

    stats_path = out_dir / f"{stem}_stats.json"
    stats_path.write_text(
        json.dumps(stats_payload(path, result), indent=2),
        encoding="utf-8",
    )
    written.append(stats_path)
    return written


# --------------------------------------------------
# CLEAN
# --------------------------------------------------
def cmd_clean(args: argparse.Namespace) -> None:
    """Clean the given CSV files and write cleaned CSV + stats per file.

    Args:
        args: argparse namespace with `files` and optional `out_dir`.
    """
    s = get_settings()
    out_dir = Path(args.out_dir) if args.out_dir else s.output_dir

    paths = [Path(f) for f in args.files]
    results = clean_files(
        paths,
        encoding=s.input_encoding,
        scheduler=s.batch_scheduler,
    )

    for (path, result), stem in zip(results, output_stems(paths)):
        written = write_outputs(path, result, out_dir, stem)
        log.info(
            "%s: cleaned=%d/%d total=%s -> %s",
            path.name,
            result.stats.cleaned_rows,
            result.stats.original_rows,
            format_total(result.stats),
            ", ".join(str(w) for w in written),
        )

    log.info("Clean completed.")


# --------------------------------------------------
# STATS
# --------------------------------------------------
def cmd_stats(args: argparse.Namespace) -> None:
    """Print cleaning statistics for each file as JSON without writing output."""
    s = get_settings()
    results = clean_files(
        [Path(f) for f in args.files],
        encoding=s.input_encoding,
        scheduler=s.batch_scheduler,
    )
    payload = [stats_payload(path, result) for path, result in results]
    print(json.dumps(payload, indent=2))


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="tidydocs_pipeline")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_clean = sub.add_parser("clean")
    p_clean.add_argument("files", nargs="+")
    p_clean.add_argument("--out-dir", default=None)

    p_stats = sub.add_parser("stats")
    p_stats.add_argument("files", nargs="+")

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    s = get_settings()
    configure_logging(s.log_path, s.log_level)

    args = build_parser().parse_args(argv)

    if args.cmd == "clean":
        cmd_clean(args)
    elif args.cmd == "stats":
        cmd_stats(args)
    else:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
