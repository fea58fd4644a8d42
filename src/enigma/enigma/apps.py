#!/usr/bin/env python
"""
Enigma Command Line Applications

- ``encrypt STATE``: encrypt stdin line by line
- ``random [COUNT]``: print random wirings
- ``rotors``: list the rotor catalog
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from enigma.core.constants import (
    EXIT_ARG_FAIL,
    EXIT_ENCRYPTION_FAIL,
    EXIT_HELP,
    EXIT_SUCCESS,
    GROUP_SIZE,
    GROUPS_PER_LINE,
    MAX_RANDOM_COUNT,
)
from enigma.core.errors import EnigmaError
from enigma.keygen import random_settings
from enigma.machine import Machine
from enigma.rotors.catalog import entry_names, reflector_names, standard_names
from enigma.text import group_text, pad_to_group, prepare_text

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(slots=True)
class CliConfig:
    """Switches for the ``encrypt`` command."""

    state: str
    filter_invalid: bool = False    # drop symbols outside A-Z
    translate_numbers: bool = False  # 1 -> EINS
    group: bool = False             # pad and print 5 letter groups
    export: bool = False            # state to stderr before and after
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CliConfig:
        return cls(
            state=args.state,
            filter_invalid=args.filter,
            translate_numbers=args.numbers,
            group=args.group,
            export=args.export,
            verbose=args.verbose,
        )


class _ArgumentError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise _ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="enigma", description="Enigma rotor cipher machine", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", help="show this help and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log engine internals to stderr")
    sub = parser.add_subparsers(dest="command", parser_class=_Parser)

    enc = sub.add_parser("encrypt", help="encrypt (or decrypt) stdin", add_help=False)
    enc.add_argument("state", help="machine state, e.g. 'U:UKW_B;W:I;W:II;W:III;E:ETW;S:'")
    enc.add_argument("--filter", action="store_true", help="drop symbols outside A-Z")
    enc.add_argument("--numbers", action="store_true", help="spell out digits in German")
    enc.add_argument("--group", action="store_true", help="pad and print %d letter groups" % GROUP_SIZE)
    enc.add_argument("--export", action="store_true", help="write the machine state to stderr")

    rnd = sub.add_parser("random", help="print random wirings", add_help=False)
    rnd.add_argument("count", nargs="?", default="3", help="number of rotor wirings")

    sub.add_parser("rotors", help="list catalog rotors", add_help=False)
    return parser


def encrypt(config: CliConfig, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Encrypt ``stdin`` line by line with a machine built from ``config.state``."""
    machine = Machine.from_state(config.state)
    if config.export:
        print(machine.export_state(), file=stderr)

    # Line breaks are not part of the message: one cipher stream, one newline
    cipher = []
    for line in stdin:
        text = prepare_text(line, config.translate_numbers, config.filter_invalid)
        if not text:
            continue
        cipher.append(machine.encrypt(text))
        if not config.group:
            stdout.write(cipher[-1])

    if cipher and config.group:
        # Padding goes through the machine like any other text
        tail = "".join(cipher)
        padding = pad_to_group(tail)[len(tail):]
        if padding:
            cipher.append(machine.encrypt(padding))
        print(group_text("".join(cipher), GROUP_SIZE, GROUPS_PER_LINE), file=stdout)
    elif cipher:
        stdout.write("\n")

    if config.export:
        print(machine.export_state(), file=stderr)
    return EXIT_SUCCESS


def show_random(count: int, stdout: TextIO) -> int:
    settings = random_settings(count)
    for i, wiring in enumerate(settings.rotors, 1):
        print(f"Rotor {i}: {wiring}", file=stdout)
    print(f"Reflector: {settings.reflector_pairs}", file=stdout)
    print(f"Plugboard: {settings.plugboard_pairs}", file=stdout)
    print(f"State: {settings.to_state()}", file=stdout)
    return EXIT_SUCCESS


def show_rotors(stdout: TextIO) -> int:
    for title, names in (
        ("Reflectors", reflector_names()),
        ("Rotors", standard_names()),
        ("Entry rotors", entry_names()),
    ):
        print(f"{title}: {', '.join(names)}", file=stdout)
    return EXIT_SUCCESS


def _error_chain(err: BaseException) -> str:
    parts = []
    cause: Optional[BaseException] = err
    while cause is not None:
        parts.append(f"{type(cause).__name__}: {cause}")
        cause = cause.__cause__
    return "\n  caused by ".join(parts)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the command line interface and return the exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except _ArgumentError as err:
        print(f"enigma: {err}", file=stderr)
        parser.print_usage(stderr)
        return EXIT_ARG_FAIL

    if args.help or args.command is None:
        parser.print_help(stdout)
        return EXIT_HELP

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt=LOG_DATEFMT, stream=stderr)

    try:
        if args.command == "encrypt":
            return encrypt(CliConfig.from_args(args), stdin, stdout, stderr)
        if args.command == "random":
            count = int(args.count) if args.count.isascii() and args.count.isdigit() else 0
            if not 1 <= count <= MAX_RANDOM_COUNT:
                print(f"enigma: rotor count must be 1-{MAX_RANDOM_COUNT}, got {args.count!r}", file=stderr)
                return EXIT_ARG_FAIL
            return show_random(count, stdout)
        return show_rotors(stdout)
    except EnigmaError as err:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(_error_chain(err), file=stderr)
        return EXIT_ENCRYPTION_FAIL


if __name__ == "__main__":
    sys.exit(main())
