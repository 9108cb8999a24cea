from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from presssim.config import DEFAULT_PARAMS, load_params
from presssim.generator import simulate_cycle
from presssim.summary import summarize

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Simulate one hydraulic press cycle and export the sampled series",
    )
    ap.add_argument("--params", type=str, default=None, help="JSON parameter file (default: factory defaults)")
    ap.add_argument("--csv", type=str, default=None, help="Write the series as a CSV table")
    ap.add_argument("--h5-dir", type=str, default=None, help="Append the run to dataset.h5 in this directory")
    ap.add_argument("--label", type=str, default="", help="Label stored with the HDF5 record")
    ap.add_argument("--plots", type=str, default=None, help="Directory for PNG charts")
    ap.add_argument("--payload", type=str, default=None, help="Write the ML-service JSON payload")
    ap.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        params = load_params(args.params) if args.params else DEFAULT_PARAMS
        result = simulate_cycle(params)
    except OSError as e:
        logger.error("Cannot read parameter file: %s", e)
        return 2
    except ValueError as e:  # SimulationError is a ValueError too
        logger.error("Invalid press configuration: %s", e)
        return 2

    summary = summarize(result)
    logger.info("Samples: %d, cycle time: %.1f s", len(result), summary.cycle_time)
    logger.info("  Max pressure: %.2f bar", summary.max_pressure)
    logger.info("  Max flow: %.2f L/min", summary.max_flow)
    logger.info("  Max motor power: %.2f kW (avg %.2f kW)", summary.max_motor_power, summary.avg_motor_power)
    logger.info("  Efficiency: %.1f %%, energy: %.1f kJ", summary.efficiency * 100.0, summary.energy_kj)

    if args.csv:
        from presssim.export import write_csv

        logger.info("CSV: %s", write_csv(result, args.csv))

    if args.payload:
        from presssim.export import build_ml_payload, write_ml_payload

        payload = build_ml_payload(params, result, summary)
        logger.info("Payload: %s", write_ml_payload(payload, args.payload))

    if args.h5_dir:
        from presssim.logger import CycleLogger

        with CycleLogger(args.h5_dir, mode="a") as cl:
            meta = cl.log_cycle(params, result, label=args.label, summary=summary)
        logger.info("HDF5: %s (cycle %d)", cl.h5_path, meta.cycle_id)

    if args.plots:
        from presssim.plotting import plot_cycle

        paths = plot_cycle(result, args.plots)
        logger.info("Charts: %d files in %s", len(paths), args.plots)

    return 0


if __name__ == "__main__":
    sys.exit(main())
