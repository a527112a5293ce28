"""Main entry point for the ScriptForward class generator."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application.generators import ScriptForwardGenerator
from .exceptions import ConfigError, ScriptForwardError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing

MISSING_HEADER_MESSAGE = "Please give the C++ header file to create the ScriptForward class for"
TOO_MANY_HEADERS_MESSAGE = "Please only give 1 C++ header file to create the ScriptForward class for"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Create a ScriptForward class that lets scripts override "
        "the virtual methods of a C++ class",
        epilog="""
Examples:
  # Generate FooScriptForward.h and FooScriptForward.C in the current directory
  python main.py include/Foo.h

  # Write the generated sources somewhere else
  python main.py include/Foo.h -o generated/

  # Show every parsed header and registered method
  python main.py include/Foo.h --verbose
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "headers",
        type=Path,
        nargs="*",
        metavar="HEADER",
        help="C++ header of the class to create the ScriptForward class for",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output directory for the generated sources (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    args = parser.parse_args(argv)

    if not args.headers:
        parser.error(MISSING_HEADER_MESSAGE)
    if len(args.headers) > 1:
        parser.error(TOO_MANY_HEADERS_MESSAGE)

    return args


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Generate the ScriptForward class for one C++ header."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            header_path=args.headers[0],
            output_dir=args.output,
            verbose=args.verbose,
        )
        config.validate()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose, file_logging=config.file_logging)
    logger = get_logger(__name__)

    logger.debug(f"Header file: {config.header_path}")
    logger.debug(f"Output directory: {config.output_dir}")

    generator = ScriptForwardGenerator(config.settings)

    try:
        sources = generator.generate(config.header_path)
    except ScriptForwardError as e:
        logger.error(f"[FAILED] {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"[FAILED] Could not read headers: {e}")
        sys.exit(1)

    try:
        config.ensure_output_dir()
        generator.write(sources, config.output_dir)
    except OSError as e:
        logger.error(f"[FAILED] Could not write generated sources: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
