"""
Console front-end for the shared agenda.

Fetches the list, keeps polling in the background and reads commands from
stdin:
  list | add | rm <id> | stats | quit
"""

import argparse
import logging

from ..config import AGENDA_API_URL, LOG_FILE, LOG_LEVEL, POLL_INTERVAL_SECONDS
from ..logging_setup import setup_logging
from . import render
from .agenda import ERROR, AgendaClient
from .api import AgendaApi

logger = logging.getLogger(__name__)

HELP = "Commands: list, add, rm <id>, stats, quit"


def _print_notice(message: str, kind: str) -> None:
    prefix = "!!" if kind == ERROR else "ok"
    print(f"[{prefix}] {message}")


def _confirm(prompt: str) -> bool:
    return input(f"{prompt} [y/N] ").strip().lower() in ("y", "yes")


def _print_stats(client: AgendaClient) -> None:
    stats = client.statistics
    print(f"total: {stats.total}  today: {stats.today}  upcoming: {stats.upcoming}")


def _prompt_new_task(client: AgendaClient) -> None:
    name = input("Name: ")
    description = input("Description: ")
    scheduled_at = input(f"Scheduled at [{client.default_scheduled_at}]: ").strip()
    client.add_task(name, description, scheduled_at or client.default_scheduled_at)


def run_console(client: AgendaClient) -> None:
    print(HELP)
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break

        command, _, arg = line.partition(" ")
        if command in ("quit", "exit", "q"):
            break
        elif command == "list":
            print(render.render_text(client.tasks))
        elif command == "stats":
            _print_stats(client)
        elif command == "add":
            _prompt_new_task(client)
        elif command == "rm":
            try:
                task_id = int(arg)
            except ValueError:
                print("usage: rm <id>")
                continue
            client.remove_task(task_id)
        elif command:
            print(HELP)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="agenda-client", description="Shared agenda console client")
    parser.add_argument("--url", default=AGENDA_API_URL, help="tasks endpoint URL")
    parser.add_argument("--html", default=None, help="write the rendered board to this file")
    parser.add_argument("--interval", type=float, default=POLL_INTERVAL_SECONDS, help="poll interval in seconds")
    args = parser.parse_args(argv)

    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    api = AgendaApi(args.url)
    client = AgendaClient(
        api,
        confirm=_confirm,
        notify=_print_notice,
        html_path=args.html,
        poll_interval=args.interval,
    )

    logger.info("Connecting to %s", args.url)
    client.start()
    try:
        print(render.render_text(client.tasks))
        _print_stats(client)
        run_console(client)
    except KeyboardInterrupt:
        pass
    finally:
        client.stop_polling()
        api.close()


if __name__ == "__main__":
    main()
