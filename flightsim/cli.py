"""
Ring Flight Simulation - CLI

The single entry point for playing a session in the terminal (or replaying a
command script), exporting telemetry and generating plots.
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import replace

from flightsim import hud
from flightsim.config import PROFILES
from flightsim.main import run_session
from flightsim.simulator import Simulator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

PROMPT = "Command: "


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Text-mode ring flight simulator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--rings", "-n",
        type=int,
        default=None,
        help="Number of rings (profile default if omitted)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Ring layout seed (derived from the clock if omitted)"
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=None,
        help="Seconds per tick (profile default if omitted)"
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default="default",
        help="Tuning profile"
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=None,
        help="Stop after this many ticks"
    )
    parser.add_argument(
        "--script", "-s",
        type=str,
        default=None,
        help="Read commands from this file instead of stdin"
    )
    parser.add_argument(
        "--log-csv",
        type=str,
        default=None,
        help="Write per-tick telemetry to this CSV file"
    )
    parser.add_argument(
        "--plot-dir",
        type=str,
        default=None,
        help="Directory to save flight plots (no plots if omitted)"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress HUD output and info logging"
    )
    return parser.parse_args(argv)


def _stdin_commands(prompt: str = PROMPT):
    """Yield lines typed on stdin until EOF."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        yield line


def _script_commands(path: str):
    with open(path, 'r', encoding='utf-8') as fh:
        return fh.read().splitlines()


def build_config(args):
    """Resolve profile, overrides and seed into a SimulationConfig."""
    config = PROFILES[args.profile]()
    overrides = {"verbose": not args.quiet}
    if args.rings is not None:
        overrides["ring_count"] = args.rings
    if args.dt is not None:
        overrides["dt"] = args.dt
    if args.max_ticks is not None:
        overrides["max_ticks"] = args.max_ticks
    overrides["ring_seed"] = args.seed if args.seed is not None else int(time.time())
    return replace(config, **overrides)


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    # Configure verbosity
    if args.quiet:
        logging.getLogger("flightsim").setLevel(logging.WARNING)

    try:
        config = build_config(args)
        if config.ring_count < 0:
            raise ValueError(f"--rings must be non-negative, got {config.ring_count}")
        if config.dt <= 0:
            raise ValueError(f"--dt must be positive, got {config.dt}")
        logger.info(f"Ring seed: {config.ring_seed}")

        if args.script is not None:
            commands = _script_commands(args.script)
        else:
            commands = _stdin_commands()

        simulator = Simulator(config=config)

        if config.verbose:
            print(hud.BANNER)
            print(hud.HELP_TEXT)
            render = lambda sim, tick, dt: print(hud.format_hud(sim, tick, dt))
            on_help = lambda: print(hud.HELP_TEXT)
        else:
            render = None
            on_help = None

        simulator, log, reason = run_session(
            commands, config=config, simulator=simulator,
            render=render, on_help=on_help
        )
        print(hud.format_summary(simulator, reason))

        if args.log_csv:
            log.to_csv(args.log_csv)
            logger.info(f"Telemetry written to {args.log_csv}")

        if args.plot_dir:
            from flightsim.plotting import generate_all_plots

            if os.path.isabs(args.plot_dir):
                plot_dir = args.plot_dir
            else:
                plot_dir = os.path.join(os.getcwd(), args.plot_dir)
            logger.info(f"Generating plots in {plot_dir}")
            generate_all_plots(log, simulator.rings, plot_dir)

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
