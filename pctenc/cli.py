from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import StrEnum

from ._errors import DecodeError
from ._logging import logger, logging_to_stderr
from .encoder import encode, decode
from .validator import validate


class Command(StrEnum):
    Encode = 'encode'
    Decode = 'decode'
    Validate = 'validate'


@dataclass
class RunConfig:
    command: Command
    text: str | None = None
    debug: bool = False

    @property
    def input_text(self) -> str:
        if self.text is None:
            return sys.stdin.read().removesuffix('\n')

        return self.text


def parse_args(argv: list[str] | None = None) -> RunConfig:
    parser = argparse.ArgumentParser(
        prog="pctenc",
        description="Percent-encode text using the RFC 3986 unreserved character set, or decode it back."
    )
    parser.add_argument("command", choices=[command.value for command in Command],
                        help="What to do with the text.")
    parser.add_argument("text", nargs="?", default=None,
                        help="Text to process (default: read from stdin).")
    parser.add_argument("--debug", "-d", action="store_true",
                        help="Log at DEBUG level.")
    args = parser.parse_args(argv)

    return RunConfig(Command(args.command), args.text, args.debug)


def run(config: RunConfig) -> str:
    match config.command:
        case Command.Encode:
            return encode(config.input_text)
        case Command.Decode:
            return decode(config.input_text)
        case Command.Validate:
            validate(config.input_text)
            return "ok"


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)

    error: DecodeError | UnicodeEncodeError | None = None

    with logging_to_stderr(config.debug):
        logger.debug(f"running {config}")

        try:
            output = run(config)
        except (DecodeError, UnicodeEncodeError) as exc:
            # text with undecodable bytes reaches us as lone surrogates
            logger.debug(f"{config.command} failed - {type(exc).__name__}")
            error = exc

    if error is not None:
        print(f"pctenc: {error}", file=sys.stderr)
        return 1

    print(output)
    return 0
