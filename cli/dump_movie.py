import argparse
import logging
import os
import sys

import pandas as pd

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from bytereader.error import DumperError
from preprocessing.atom_index import INDEX_COLUMNS, atom_table
from qtdumper import INDENT_STR, QuickTimeDumper

logger = logging.getLogger("qtdump")


def show_progress(pos, total):
    percent = 100 * pos // total if total else 100
    print(f"\r{percent:3d}%", end="", file=sys.stderr, flush=True)


def iter_movie_files(path):
    if os.path.isdir(path):
        for root, _, files in os.walk(path):
            for file in sorted(files):
                yield os.path.join(root, file)
    else:
        yield path


def dump_file(file_path, indent=INDENT_STR, progress=None):
    """Dumps one file; returns (report, index frame, error or None)."""
    with QuickTimeDumper(file_path, progress=progress, indent_str=indent) as dumper:
        error = None
        try:
            report = dumper.run()
        except DumperError as e:
            report = dumper.result()
            error = e
        return report, atom_table(dumper, os.path.basename(file_path)), error


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Dump the atom structure of QuickTime movie files.")
    parser.add_argument("path", help="Movie file, or a directory of movie files")
    parser.add_argument("--csv", help="Also write an atom index (one row per atom) to this CSV file")
    parser.add_argument("--indent", default=INDENT_STR, help=f"Indent unit per nesting level (default {INDENT_STR!r})")
    parser.add_argument("--progress", action="store_true", help="Show parse progress on stderr")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics level (default WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not os.path.exists(args.path):
        logger.error("%s does not exist", args.path)
        return 2

    progress = show_progress if args.progress else None
    frames = []
    status = 0
    files = list(iter_movie_files(args.path))

    for file_path in files:
        if len(files) > 1:
            print(f"== {file_path}")
        report, frame, error = dump_file(file_path, indent=args.indent, progress=progress)
        if progress is not None:
            print(file=sys.stderr)
        print(report, end="")
        if error is not None:
            logger.error("Error during processing %s: %s", file_path, error)
            status = 1
        frames.append(frame)

    if args.csv:
        frames = [df for df in frames if not df.empty]
        df = pd.concat(frames, ignore_index=True) if frames else pd.DataFrame(columns=INDEX_COLUMNS)
        df.to_csv(args.csv, index=False, encoding="utf-8")
        logger.info("Atom index saved to %s", args.csv)

    return status


if __name__ == "__main__":
    raise SystemExit(main())
