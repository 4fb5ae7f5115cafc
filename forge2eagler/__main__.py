import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from .core.config import load_settings
from .core.conversion import ConversionError, ForgeToEaglerConverter

load_dotenv()


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging.

    Logs go to stderr so converted script on stdout stays clean.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main entry point for forge2eagler."""
    parser = argparse.ArgumentParser(
        prog="forge2eagler",
        description="Convert a Forge mod class to an EaglerForge ModAPI script",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Java source file to convert (reads stdin when omitted)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the script here instead of stdout"
    )
    parser.add_argument(
        "--config",
        default=os.environ.get("FORGE2EAGLER_CONFIG"),
        help="Path to a forge2eagler.yaml settings file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (defaults to the config file's log_level)"
    )
    parser.add_argument(
        "--no-accumulate",
        action="store_true",
        help="Do not carry required modules over between conversions"
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    if args.no_accumulate:
        settings = settings.model_copy(update={"accumulate_required_modules": False})
    setup_logging(args.log_level or os.environ.get("FORGE2EAGLER_LOG_LEVEL") or settings.log_level)

    converter = ForgeToEaglerConverter(settings)
    try:
        if args.input:
            script = converter.convert_file(args.input)
        else:
            script = converter.convert(sys.stdin.read(), "<stdin>")
    except ConversionError as e:
        print(f"Conversion failed: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(script + "\n", encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(script)
    return 0


if __name__ == "__main__":
    sys.exit(main())
