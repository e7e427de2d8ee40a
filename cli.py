import argparse
import asyncio
import json
import logging
import os
import sys
import uuid as _uuid

from config.settings import get_settings
from models.field_key import FieldKey
from services.presentation import PresentationCoordinator
from services.reporting import TerminalRenderer, print_card, print_fields, view_to_dict
from sources.registry import available_sources, get_source
from utils.logging_setup import init_logging

logger = logging.getLogger(__name__)

BROWSE_HELP = "commands: new | hover <field> | key <field> <Enter|Space> | show | fields | quit"


def _coordinator(args) -> PresentationCoordinator:
	source = get_source(getattr(args, "source", None))
	return PresentationCoordinator(source, renderer=TerminalRenderer(quiet=True))


def cmd_show(args):
	coordinator = _coordinator(args)
	view = asyncio.run(coordinator.start())
	if args.field and view.load_state.is_loaded:
		if not coordinator.on_hover(args.field):
			print(f"Unknown field: {args.field}")
			return 2
	if args.json:
		print(json.dumps(view_to_dict(coordinator.view), indent=2, ensure_ascii=False))
	else:
		print_card(coordinator.view)
	return 1 if coordinator.view.load_state.is_failed else 0


def cmd_fields(args):
	coordinator = _coordinator(args)
	view = asyncio.run(coordinator.start())
	if view.load_state.is_failed:
		print(view.status_text)
		return 1
	print_fields(coordinator.state.record)
	return 0


def _browse_line(coordinator: PresentationCoordinator, line: str) -> bool:
	"""Run one browse command. Returns False when the session should end."""
	parts = line.split()
	if not parts:
		return True
	cmd, rest = parts[0].lower(), parts[1:]
	if cmd in ("quit", "exit", "q"):
		return False
	if cmd == "new":
		asyncio.run(coordinator.on_request_new_record())
	elif cmd == "hover" and rest:
		if not coordinator.on_hover(rest[0]):
			print(f"Nothing to select for {rest[0]!r}")
	elif cmd == "key" and rest:
		key_name = rest[1] if len(rest) > 1 else "Enter"
		# "Space" on the command line stands for the space bar
		if key_name.lower() == "space":
			key_name = " "
		if not coordinator.on_activate_key(rest[0], key_name):
			print(f"Key {key_name!r} on {rest[0]!r} ignored")
	elif cmd == "fields":
		print_fields(coordinator.state.record)
		return True
	elif cmd != "show":
		print(BROWSE_HELP)
		return True
	print_card(coordinator.view)
	return True


def cmd_browse(args):
	coordinator = _coordinator(args)
	asyncio.run(coordinator.start())
	print_card(coordinator.view)
	print(BROWSE_HELP)
	for line in sys.stdin:
		if not _browse_line(coordinator, line):
			break
	coordinator.close()
	return 0


def cmd_sources(args):
	for name in sorted(available_sources()):
		print(name)
	return 0


def main():
	settings = get_settings()
	init_logging(settings.log_level)
	if not os.getenv("RUN_ID"):
		os.environ["RUN_ID"] = _uuid.uuid4().hex
	parser = argparse.ArgumentParser(description="Random profile card")
	parser.add_argument(
		"--log-level", "-l",
		choices=["DEBUG", "INFO", "WARNING", "ERROR"],
		default=None,
		help=f"Set logging level (default: {settings.log_level})",
	)
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_show = sub.add_parser("show", help="Fetch one person and print the card")
	p_show.add_argument("--field", "-f", choices=[k.value for k in FieldKey], help="Field to show instead of the name")
	p_show.add_argument("--source", "-s", help=f"Person source (default: {settings.card_source})")
	p_show.add_argument("--json", action="store_true", help="Print the card as JSON")
	p_show.set_defaults(func=cmd_show)

	p_fields = sub.add_parser("fields", help="Fetch one person and print every field")
	p_fields.add_argument("--source", "-s", help=f"Person source (default: {settings.card_source})")
	p_fields.set_defaults(func=cmd_fields)

	p_browse = sub.add_parser("browse", help="Interactive session driven by stdin commands")
	p_browse.add_argument("--source", "-s", help=f"Person source (default: {settings.card_source})")
	p_browse.set_defaults(func=cmd_browse)

	p_src = sub.add_parser("sources", help="List registered person sources")
	p_src.set_defaults(func=cmd_sources)

	args = parser.parse_args()
	if args.log_level:
		init_logging(args.log_level)
	code = args.func(args)
	if code:
		sys.exit(code)


if __name__ == "__main__":
	main()
