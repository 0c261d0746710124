from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import ValidationError

from spireconf import __version__
from spireconf.app import build_provider
from spireconf.config import ConfigurationError, configure_logging
from spireconf.domain.model import Identity
from spireconf.resources import EntryDataSourceModel, EntryResourceModel, IdentityModel

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from spireconf.app import RegistryProvider
    from spireconf.resources import OperationResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage SPIRE registration entries")
    parser.add_argument(
        "--endpoint",
        type=str,
        help="SPIRE server API target, e.g. unix:/tmp/spire-server/private/api.sock "
        "(defaults to SPIRE_SERVER_ENDPOINT)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-call deadline in seconds, 0 disables (defaults to SPIRE_REGISTRY_TIMEOUT)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup = subparsers.add_parser("lookup", help="Find the single entry for a SPIFFE ID")
    lookup.add_argument("spiffe_id", help="SPIFFE ID, e.g. spiffe://example.org/svc")

    create = subparsers.add_parser("create", help="Create an entry from a JSON record")
    create.add_argument("plan", type=Path, help="JSON file with the desired entry")

    read = subparsers.add_parser("read", help="Refresh a previously saved entry state")
    read.add_argument("state", type=Path, help="JSON file with the last known state")

    update = subparsers.add_parser("update", help="Update an entry from a JSON record")
    update.add_argument("plan", type=Path, help="JSON file with the desired entry")
    update.add_argument(
        "--state",
        type=Path,
        help="JSON file with the last known state (supplies the id when the plan has none)",
    )

    delete = subparsers.add_parser("delete", help="Delete the entry in a saved state")
    delete.add_argument("state", type=Path, help="JSON file with the last known state")

    import_ = subparsers.add_parser("import", help="Import an existing entry by id")
    import_.add_argument("entry_id", help="Registration entry id")

    return parser.parse_args(list(argv))


def _load_record(path: Path) -> EntryResourceModel:
    try:
        return EntryResourceModel.model_validate_json(path.read_text())
    except OSError as exc:
        raise ValueError(f"Cannot read {path}: {exc}") from exc
    except ValidationError as exc:
        raise ValueError(f"Invalid entry record in {path}: {exc}") from exc


def _lookup_config(spiffe_id: str) -> EntryDataSourceModel:
    identity = Identity.parse(spiffe_id)
    return EntryDataSourceModel(subject_identity=IdentityModel.from_identity(identity))


def _dispatch(provider: RegistryProvider, args: argparse.Namespace) -> OperationResult[Any]:
    resource = provider.entry_resource()
    match args.command:
        case "lookup":
            return provider.entry_data_source().read(_lookup_config(args.spiffe_id))
        case "create":
            return resource.create(_load_record(args.plan))
        case "read":
            return resource.read(_load_record(args.state))
        case "update":
            state = _load_record(args.state) if args.state else None
            return resource.update(_load_record(args.plan), state)
        case "delete":
            return resource.delete(_load_record(args.state))
        case "import":
            return resource.import_state(args.entry_id)
        case _:
            raise ValueError(f"Unsupported command: {args.command}")


def _report(result: OperationResult[Any]) -> int:
    for diagnostic in result.diagnostics:
        print(diagnostic, file=sys.stderr)  # noqa: T201
    if result.state is not None:
        print(result.state.model_dump_json(indent=2, exclude_none=True))  # noqa: T201
    return 0 if result.ok else 1


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        provider = build_provider(
            endpoint=parsed_args.endpoint,
            timeout_seconds=parsed_args.timeout,
        )
        with provider:
            result = _dispatch(provider, parsed_args)
    except (ConfigurationError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    exit_code = _report(result)
    if exit_code:
        sys.exit(exit_code)


def sigint_handler(signal_received: int, _frame: FrameType | None) -> None:
    """Stop on Ctrl+C with the shell convention exit status (128 + signal)."""
    log.warning("Interrupted; closing registry connection")
    sys.exit(128 + signal_received)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
