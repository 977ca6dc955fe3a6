"""Argument parsing functionality for the preinstall preflight check."""

import argparse


def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Every option is optional: when run as a package manager lifecycle script
    the check is driven entirely by the environment and the file system.
    """
    parser = argparse.ArgumentParser(
        prog="preinstall",
        description=(
            "Preinstall - verify node.js, yarn and the native toolchain before installing dependencies"
        ),
        add_help=True,
    )

    parser.add_argument("--root",
                        dest="ROOT",
                        help="Project root containing .yarnrc (default: current directory)",
                        action="store",
                        type=str,
                        default=None)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to a YAML settings file",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
