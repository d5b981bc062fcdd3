from pathlib import Path

import pandas as pd

GROUP_COLUMNS = ["Apps", "Version", "Datasets", "Analyses", "Platform", "OS_name"]
METRIC_COLUMNS = ["Execution_time_secs", "RAM_usage_Mb"]
STATS = ["count", "mean", "min", "median", "max"]


def summarize_results(csv_file: Path) -> pd.DataFrame:
    """
    Aggregate per-run rows into one row per app, dataset, analysis and host.

    Args:
        csv_file: CSV written by the record emitter

    Returns:
        DataFrame with columns like ``Execution_time_secs_mean``
    """
    # Empty host fields stay empty strings so their rows keep a group
    df = pd.read_csv(csv_file, keep_default_na=False)
    if df.empty:
        return pd.DataFrame(columns=GROUP_COLUMNS + [f"{m}_{s}" for m in METRIC_COLUMNS for s in STATS])

    summary = df.groupby(GROUP_COLUMNS, sort=False, dropna=False)[METRIC_COLUMNS].agg(STATS)
    summary.columns = [f"{metric}_{stat}" for metric, stat in summary.columns]
    return summary.reset_index()


def write_summary(csv_file: Path, output: Path) -> int:
    summary = summarize_results(csv_file)
    summary.to_csv(output, index=False)
    return len(summary)
