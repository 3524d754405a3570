"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from fnscaffold import (
    CollisionError,
    ConfigError,
    HookError,
    ManifestError,
    ProvisioningError,
    SourceAcquisitionError,
    UserInputError,
)


def main(argv: list[str] | None = None) -> int:
    import fnscaffold.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "create":
            cli.asyncio.run(cli._run_create(args))
        return 0
    except UserInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (ConfigError, ManifestError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ProvisioningError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (CollisionError, SourceAcquisitionError, HookError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 2
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
