import argparse
import logging

from curie_temperature import texts
from curie_temperature.analysis import run_from_csv, simulate
from curie_temperature.collector import INVALID_NUMBER
from curie_temperature.config import load_config
from curie_temperature.logging_config import setup_logging

logger = logging.getLogger(__name__)

MENU = """
===== Dielectric Constant and Curie Temperature Simulation =====
1. Show Theory
2. Show Apparatus
3. Show Procedure
4. Show Precautions
5. Start Simulation
6. Exit"""

EXIT_CHOICE = 6


def show(text):
    print(text)


def run_menu(config):
    actions = {
        1: lambda: show(texts.THEORY),
        2: lambda: show(texts.APPARATUS),
        3: lambda: show(texts.PROCEDURE),
        4: lambda: show(texts.PRECAUTIONS),
        5: lambda: simulate(config),
    }

    while True:
        print(MENU)
        try:
            choice = int(input("Enter your choice: ").strip())
        except ValueError:
            print(INVALID_NUMBER)
            continue

        if choice == EXIT_CHOICE:
            print("Exiting program.")
            return
        action = actions.get(choice)
        if action is None:
            print("Invalid choice. Try again.")
            continue
        action()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Dielectric constant and Curie temperature lab simulator"
    )
    parser.add_argument("--config", default=None,
                        help="JSON configuration file (default ./config.json if present)")
    parser.add_argument("--output-dir", default=None, dest="output_dir",
                        help="Directory for the results file and plot")
    parser.add_argument("--plot", action="store_true",
                        help="Also save a matplotlib plot of ε vs temperature")
    parser.add_argument("--material", default=None,
                        help="Material name for a non-interactive run (needs --readings)")
    parser.add_argument("--readings", default=None,
                        help="CSV with Temperature_C,Capacitance_pF columns")
    parser.add_argument("--log-file", default=None, dest="log_file",
                        help="Also write diagnostics to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    args = parser.parse_args(argv)
    if (args.material is None) != (args.readings is None):
        parser.error("--material and --readings must be given together")
    return args


def main(argv=None):
    try:
        args = parse_args(argv)
    except SystemExit:
        # usage errors and --help still finish with a success status
        return 0
    config = load_config(args.config)
    if args.output_dir is not None:
        config["output_dir"] = args.output_dir
    if args.plot:
        config["save_plot"] = True

    setup_logging("DEBUG" if args.verbose else config["log_level"], args.log_file)
    logger.debug("Configuration: %s", config)

    try:
        if args.material is not None:
            run_from_csv(args.material, args.readings, config)
        else:
            run_menu(config)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting program.")

    return 0
