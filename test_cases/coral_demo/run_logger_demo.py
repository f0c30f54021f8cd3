"""
Prints one line per log level, then raises the threshold and prints again.

    python -m test_cases.coral_demo.run_logger_demo --context "payments.worker" --level debug
"""

import argparse

from src.coral.logging.log_level import LogLevel
from src.coral.logging.logger import set_log_level
from src.coral.logging.logger_config import create_logger_from_env


def emit_all(log) -> None:
    for level in LogLevel:
        getattr(log, level.value)(f"this is a {level.value} message", {"level": level.value})


def main():
    parser = argparse.ArgumentParser(description="Show coral logger output")
    parser.add_argument("--context", default="coral.demo")
    parser.add_argument("--level", choices=[level.value for level in LogLevel], default=None)
    parser.add_argument("--raise-to", choices=[level.value for level in LogLevel], default="warn")

    args = parser.parse_args()

    log = create_logger_from_env(args.context)
    if args.level:
        set_log_level(log, args.level)

    print(f"[LoggerDemo] {log!r}")
    emit_all(log)

    set_log_level(log, args.raise_to)
    print(f"[LoggerDemo] threshold raised to '{args.raise_to}'")
    emit_all(log)


if __name__ == "__main__":
    main()
