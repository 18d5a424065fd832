#!/usr/bin/env python3
"""Generate the result tables for a range of lattice sizes.

Appends ``p<TAB>mean_sweeps`` lines to ``results/n<side>.dat`` for each
configured run. Edit RUNS to change what gets computed.
"""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from percolation_fire import ExperimentConfig, run_experiment

RESULTS_DIR = project_root / "results"

# Sides 32..512 with default sampling, then one large lattice with a smaller sample
RUNS = [ExperimentConfig(side=2 ** k) for k in range(5, 10)]
RUNS.append(ExperimentConfig(side=1024, sample_size=1000))


def write_results(config: ExperimentConfig) -> Path:
    """
    Run one experiment and append its records to the side's result file.

    Args:
        config: The experiment to run

    Returns:
        Path of the result file
    """
    out_path = RESULTS_DIR / f"n{config.side}.dat"
    records = run_experiment(config)
    with open(out_path, "a") as fp:
        for record in records:
            fp.write(record.format() + "\n")
    return out_path


def main():
    """Run every configured experiment."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    for config in RUNS:
        print(f"--- SIDE {config.side}, SAMPLE {config.sample_size} ---")
        out_path = write_results(config)
        print(f"Appended {config.resolution + 1} records to {out_path}")


if __name__ == "__main__":
    main()
