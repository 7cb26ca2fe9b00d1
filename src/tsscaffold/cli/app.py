"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from tsscaffold.core.contracts.exceptions import (
    ConfigError,
    FilesystemWriteError,
    InstallError,
    PreconditionError,
    PromptAbortedError,
)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_ABORTED = 2
EXIT_PRECONDITION = 3
EXIT_CONFIG = 4
EXIT_WRITE = 5
EXIT_INSTALL = 6


def main(argv: list[str] | None = None) -> int:
    import tsscaffold.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)
    cli.validate_args(parser, args)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    reporter = cli.RichReporter()
    try:
        cli._run_create(args, reporter=reporter)
        return EXIT_OK
    except PreconditionError as exc:
        reporter.error(f"[Failed] {exc}")
        return EXIT_PRECONDITION
    except PromptAbortedError as exc:
        reporter.error(f"[Failed] {exc}")
        return EXIT_ABORTED
    except KeyboardInterrupt:
        reporter.error("[Failed] Aborted.")
        return EXIT_ABORTED
    except ConfigError as exc:
        reporter.error(f"[Failed] {exc}")
        return EXIT_CONFIG
    except FilesystemWriteError as exc:
        reporter.error(f"[Failed] {exc}")
        if exc.written:
            reporter.error(f"         {len(exc.written)} path(s) were written before the failure and were kept.")
        return EXIT_WRITE
    except InstallError as exc:
        reporter.error("[Failed] Error when installing dependencies !")
        reporter.error(f"         {exc}")
        return EXIT_INSTALL
    except Exception as exc:  # pragma: no cover
        reporter.error(f"[Failed] {exc}")
        return EXIT_UNEXPECTED


__all__ = ["main"]
