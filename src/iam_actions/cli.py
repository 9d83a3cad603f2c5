import argparse
import logging
import sys

from .backends.client import ServiceReferenceClient
from .backends.fzf import FzfSelector
from .capabilities.models import parse_capability_filter, parse_resource_filter
from .config import AppConfig
from .errors import IamActionsError
from .session import DiscoverySession, Mode, QueryOptions

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="iam-actions",
        description="List the IAM actions of an AWS service, filtered by resource type and capability. "
                    "Anything not given on the command line is selected interactively with fzf.",
    )
    p.add_argument("service", nargs="?", help="AWS service name (case-insensitive); omit to pick interactively")
    p.add_argument("-j", "--json", action="store_true", help="Output results in JSON format")
    p.add_argument("--condition-keys", action="store_true", help="List condition keys for the specified service")
    p.add_argument("--resource-details", action="store_true", help="Show details for the selected resource type")
    p.add_argument("--all-resource-details", action="store_true", help="Show details for all resource types")
    p.add_argument("-r", "--resource", help="Resource type filter ('all' for no filter); skips the resource prompt")
    p.add_argument(
        "-c",
        "--capability",
        help="Capability filter ('all' for no filter, 'IsReadOnly' for actions without flags); skips the capability prompt",
    )
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v info, -vv debug)")
    return p.parse_args(argv)


def _mode_from_args(args: argparse.Namespace) -> Mode:
    if args.condition_keys:
        return "condition_keys"
    if args.all_resource_details:
        return "all_resource_details"
    if args.resource_details:
        return "resource_details"
    return "actions"


def build_options(args: argparse.Namespace) -> QueryOptions:
    return QueryOptions(
        service_name=args.service.lower() if args.service else None,
        show_json=args.json,
        mode=_mode_from_args(args),
        resource_filter=parse_resource_filter(args.resource) if args.resource else None,
        capability_filter=parse_capability_filter(args.capability) if args.capability else None,
    )


def _configure_logging(config: AppConfig, verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(config.log_level)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        config = AppConfig()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")
    _configure_logging(config, args.verbose)

    session = DiscoverySession(
        client=ServiceReferenceClient(config.service_list_url, timeout=config.http_timeout),
        selector=FzfSelector(config.fzf_command),
        options=build_options(args),
    )

    try:
        output = session.run()
    except IamActionsError as exc:
        logger.debug("Session aborted", exc_info=True)
        print(exc, file=sys.stderr)
        raise SystemExit(exc.exit_code)

    if output.text:
        print(output.text)
    if output.notice:
        print(output.notice, file=sys.stderr)


if __name__ == "__main__":
    main()
