import argparse

default_config_file_path = "emitter.ini"


def log_level_type(value):
    """Accept a logging level as an int (10, 20, ...) or a name (DEBUG, INFO, ...)"""
    levels = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}
    if str(value).upper() in levels:
        return levels[str(value).upper()]
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid log level: {value}")


def parse_emitter_args(argv=None):
    # parse CLI args
    parser = argparse.ArgumentParser(
        prog="emitter",
        description="Run a script of on/once/off/emit commands against an event emitter.",
    )

    parser.add_argument(
        "script",
        nargs="?",
        help="Path of a command script. Reads from stdin when omitted or '-'",
        default="-",
    )
    parser.add_argument(
        "--config-file-path",
        help=f"Path to an ini file with an [EMITTER] section. Command line arguments override it. (default: {default_config_file_path})",
        default=default_config_file_path,
        required=False,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help="Logging level, as an int (DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40) or a name",
        type=log_level_type,
        default=None,
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        help="Directory to write log files to. No log file is written when unset",
        default=None,
        required=False,
    )
    parser.add_argument(
        "--echo-template",
        help="Format of the line printed by echo listeners. Fields: {listener}, {payload}",
        default=None,
        required=False,
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop the script at the first error",
        required=False,
    )

    return parser.parse_args(argv)
