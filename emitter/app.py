import logging
import sys

from emitter.lib.args import parse_emitter_args
from emitter.lib.events import Emitter
from emitter.lib.logger import configure_logger
from emitter.lib.script import ScriptError, ScriptRunner
from emitter.lib.settings import SettingsManager


def main(argv=None) -> int:
    args = parse_emitter_args(argv)

    settings = SettingsManager(args.config_file_path).resolve(
        log_level=args.log_level,
        log_dir=args.log_dir,
        echo_template=args.echo_template,
        strict=args.strict,
    )

    configure_logger(log_level=settings["log_level"], log_dir=settings["log_dir"] or None)
    logging.debug(f"Resolved settings: {settings}")

    try:
        runner = ScriptRunner(
            Emitter(),
            echo_template=settings["echo_template"],
            strict=settings["strict"],
        )
    except ScriptError as e:
        logging.error(f"Bad settings: {e}")
        return 2

    if args.script == "-":
        errors = runner.run(sys.stdin)
    else:
        try:
            with open(args.script, encoding="utf-8") as script:
                errors = runner.run(script)
        except OSError as e:
            logging.error(f"Could not read script {args.script}: {e}")
            return 2

    if errors:
        logging.info(f"Script finished with {errors} error(s)")
        return 1
    return 0
