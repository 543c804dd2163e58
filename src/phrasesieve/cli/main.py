"""phrasesieve command-line entrypoint."""

from __future__ import annotations

import argparse

from phrasesieve.cli import bench, build, match


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="phrasesieve",
        description="Compile phrase lists into a checksum filter and match sentences against it.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build.add_parser(subparsers)
    match.add_parser(subparsers)
    bench.add_parser(subparsers)

    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (ValueError, FileNotFoundError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
