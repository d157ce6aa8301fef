"""Batch comparison of template/output file pairs listed in a CSV manifest."""

import logging
from pathlib import Path

import pandas as pd
from tqdm import tqdm

from lines_match.core.line_reader import read_lines
from lines_match.matching import LineMatcher

logger = logging.getLogger(__name__)

MANIFEST_COLUMNS = ["expected", "actual"]
RESULT_COLUMNS = ["expected", "actual", "matched", "kind", "message"]
READ_ERROR = "read_error"


def load_manifest(manifest_path: Path) -> pd.DataFrame:
    """Load a manifest CSV with 'expected' and 'actual' path columns.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ValueError: If required columns are missing.
    """
    if not manifest_path.exists():
        raise FileNotFoundError(f"Manifest not found: {manifest_path}")

    df = pd.read_csv(manifest_path, dtype=str, keep_default_na=False)
    missing_cols = [col for col in MANIFEST_COLUMNS if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Manifest is missing required columns: {', '.join(missing_cols)}")
    return df


def run_batch(
    manifest_path: Path,
    matcher: LineMatcher,
    encoding: str = "utf-8",
    progress: bool = True,
) -> pd.DataFrame:
    """Compare every expected/actual file pair listed in a manifest.

    Relative paths are resolved against the manifest's directory. Pairs whose
    files cannot be read are reported with kind 'read_error' instead of
    aborting the whole batch.

    Args:
        manifest_path: Path to the manifest CSV
        matcher: LineMatcher used for every pair
        encoding: Encoding of the listed files
        progress: Show a progress bar

    Returns:
        DataFrame with columns: expected, actual, matched, kind, message
    """
    manifest = load_manifest(manifest_path)
    base_dir = manifest_path.parent

    rows = []
    for expected_name, actual_name in tqdm(
        zip(manifest["expected"], manifest["actual"]),
        total=len(manifest),
        desc="Comparing",
        disable=not progress,
    ):
        try:
            expected = read_lines(base_dir / expected_name, encoding)
            actual = read_lines(base_dir / actual_name, encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read pair ({expected_name}, {actual_name}): {e}")
            rows.append([expected_name, actual_name, False, READ_ERROR, str(e)])
            continue

        result = matcher.match(expected, actual)
        kind = result.kind.value if result.kind is not None else ""
        rows.append([expected_name, actual_name, result.matched, kind, result.message])

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
