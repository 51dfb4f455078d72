import logging
import os
from dataclasses import asdict

import pandas as pd

from bytereader.error import DumperError
from qtdumper import QuickTimeDumper

logger = logging.getLogger(__name__)

INDEX_COLUMNS = ["file", "tag", "name", "offset", "length", "depth", "handled"]


def atom_table(dumper: QuickTimeDumper, file_name: str) -> pd.DataFrame:
    """One row per atom the dumper visited, in traversal order."""
    rows = []
    for record in dumper.atoms:
        row = asdict(record)
        row["file"] = file_name
        rows.append(row)
    return pd.DataFrame(rows, columns=INDEX_COLUMNS)


def index_file(file_path, file_name=None, progress=None) -> pd.DataFrame:
    file_name = file_name or os.path.basename(file_path)
    with QuickTimeDumper(file_path, progress=progress) as dumper:
        try:
            dumper.run()
        except DumperError as e:
            # keep whatever was walked before the stream broke off
            logger.error("Error processing %s: %s", file_path, e)
        return atom_table(dumper, file_name)


def build_index(path) -> pd.DataFrame:
    frames = []
    if os.path.isdir(path):
        for root, _, files in os.walk(path):
            for file in sorted(files):
                frames.append(index_file(os.path.join(root, file), file))
    else:
        frames.append(index_file(path))

    frames = [df for df in frames if not df.empty]
    if not frames:
        return pd.DataFrame(columns=INDEX_COLUMNS)
    return pd.concat(frames, ignore_index=True)


def run_export(path, output_csv_path):
    df = build_index(path)
    df.to_csv(output_csv_path, index=False, encoding="utf-8")
    logger.info("Atom index with %d rows saved to %s", len(df), output_csv_path)
    return df
