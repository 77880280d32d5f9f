import argparse
from datetime import datetime
import logging

from dumpctrl_ui.Init import Init
from dumpctrl_ui.AppState import AppState


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dumper operator console")
    parser.add_argument(
        "--log",
        default="ERROR",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR."
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Save logs to txt file."
    )
    parser.add_argument(
        "--settings",
        default="settings.toml",
        help="Path to the settings file. Defaults are used if it does not exist."
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Bridge URL, e.g. ws://localhost:9090. Overrides the settings file."
    )
    parser.add_argument(
        "--connect",
        action="store_true",
        help="Connect to the bridge on startup."
    )

    args, unknown = parser.parse_known_args()
    return args


def setup_logging(log: str, log_to_file: bool) -> None:
    level_name = log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {log}")

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_to_file:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
        log_filename = f"{timestamp}.txt"
        handlers.append(logging.FileHandler(log_filename))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )


def main() -> None:
    args = parse_args()
    setup_logging(args.log, args.log_to_file)

    settings = Init.settings(args.settings)
    state = AppState(settings, args.url)

    if args.connect:
        state.connect()

    while state.running:
        if not state.handle_events():
            break

        state.update()
        state.render()

        state.tick()

    state.shutdown()


if __name__ == "__main__":
    main()
