"""Command-line interface for lsgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from lsgraph.algorithms.reachability import reachability, reachable_from
from lsgraph.algorithms.spf import shortest_path
from lsgraph.config import ENGINE_CONFIG, EngineConfig
from lsgraph.exceptions import LsGraphError
from lsgraph.io import (
    format_path,
    format_reachability,
    format_topology,
    format_weight,
    load_network,
)
from lsgraph.logging import get_logger, set_global_log_level
from lsgraph.model.network import Network

logger = get_logger(__name__)

SHELL_USAGE = """\
Usage: <action> <parameters>
  graph <file>
  addedge <source> <destination> <transmission time>
  deleteedge <source> <destination>
  edgedown <source> <destination>
  edgeup <source> <destination>
  vertexdown <router>
  vertexup <router>
  path <source> <destination>
  print
  reachable
  help
  quit"""


class QueryShell:
    """Line-oriented command loop over a single ``Network``.

    Each line is one command. Engine errors are reported on ``out`` and the
    loop keeps going.
    """

    def __init__(
        self,
        network: Optional[Network] = None,
        out: TextIO = sys.stdout,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.network = Network() if network is None else network
        self.out = out
        self.config = config or ENGINE_CONFIG
        self._handlers: Dict[str, Callable[[List[str]], None]] = {
            "graph": self._graph,
            "addedge": self._addedge,
            "deleteedge": self._deleteedge,
            "edgedown": self._edgedown,
            "edgeup": self._edgeup,
            "vertexdown": self._vertexdown,
            "vertexup": self._vertexup,
            "path": self._path,
            "print": self._print,
            "reachable": self._reachable,
        }
        # Expected argument count per command
        self._arity: Dict[str, int] = {
            "graph": 1,
            "addedge": 3,
            "deleteedge": 2,
            "edgedown": 2,
            "edgeup": 2,
            "vertexdown": 1,
            "vertexup": 1,
            "path": 2,
            "print": 0,
            "reachable": 0,
        }

    def _emit(self, text: str) -> None:
        print(text, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should stop."""
        tokens = line.split()
        if not tokens:
            return True

        action, args = tokens[0].lower(), tokens[1:]
        if action in ("quit", "exit"):
            return False
        if action == "help":
            self._emit(SHELL_USAGE)
            return True

        handler = self._handlers.get(action)
        if handler is None or len(args) != self._arity[action]:
            self._emit(SHELL_USAGE)
            return True

        try:
            handler(args)
        except (LsGraphError, OSError, UnicodeError) as exc:
            self._emit(f"Error: {exc}")
        return True

    def run(self, stream: TextIO, interactive: bool = False) -> None:
        """Read commands from ``stream`` until ``quit`` or end of input."""
        while True:
            if interactive:
                self.out.write(self.config.prompt)
                self.out.flush()
            line = stream.readline()
            if not line:
                break
            if not self.execute(line):
                break

    #
    # Command handlers
    #
    def _graph(self, args: List[str]) -> None:
        load_network(args[0], network=self.network, config=self.config)
        self._emit(f"Network loaded from <{args[0]}>.")

    def _addedge(self, args: List[str]) -> None:
        src, dst, weight_text = args
        try:
            weight = float(weight_text)
        except ValueError:
            self._emit(f"Error: transmission time {weight_text!r} is not a number.")
            return
        link = self.network.add_link(src, dst, weight)
        self._emit(f"Link <{src}, {dst}, {format_weight(link.weight)}> is added!")

    def _deleteedge(self, args: List[str]) -> None:
        src, dst = args
        self.network.delete_link(src, dst)
        self._emit(f"Link <{src}, {dst}> is removed!")

    def _edgedown(self, args: List[str]) -> None:
        src, dst = args
        self.network.set_link_active(src, dst, False)
        self._emit(f"Link <{src}, {dst}> is down!")

    def _edgeup(self, args: List[str]) -> None:
        src, dst = args
        self.network.set_link_active(src, dst, True)
        self._emit(f"Link <{src}, {dst}> is up!")

    def _vertexdown(self, args: List[str]) -> None:
        self.network.set_router_active(args[0], False)
        self._emit(f"Router <{args[0]}> is down!")

    def _vertexup(self, args: List[str]) -> None:
        self.network.set_router_active(args[0], True)
        self._emit(f"Router <{args[0]}> is up!")

    def _path(self, args: List[str]) -> None:
        path = shortest_path(self.network, args[0], args[1])
        self._emit(format_path(path))

    def _print(self, args: List[str]) -> None:
        self._emit(format_topology(self.network))

    def _reachable(self, args: List[str]) -> None:
        self._emit(format_reachability(reachable_from(self.network, self.config)))


def _load(path: Path) -> Network:
    try:
        return load_network(path)
    except OSError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


def _cmd_print(args: argparse.Namespace) -> None:
    print(format_topology(_load(args.links)))


def _cmd_path(args: argparse.Namespace) -> None:
    network = _load(args.links)
    try:
        path = shortest_path(network, args.source, args.destination)
    except LsGraphError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    print(format_path(path))


def _cmd_reachable(args: argparse.Namespace) -> None:
    network = _load(args.links)
    if args.reverse:
        mapping = reachability(network)
    else:
        mapping = reachable_from(network)
    print(format_reachability(mapping))


def _cmd_shell(args: argparse.Namespace) -> None:
    network = _load(args.links) if args.links is not None else Network()
    QueryShell(network).run(sys.stdin, interactive=sys.stdin.isatty())


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``lsgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="lsgraph",
        description="Query shortest paths and reachability in a link-state network.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{print,path,reachable,shell}",
        help="Available commands",
    )

    print_parser = subparsers.add_parser("print", help="Print the network topology")
    print_parser.add_argument("links", type=Path, help="Path to link file")
    print_parser.set_defaults(func=_cmd_print)

    path_parser = subparsers.add_parser("path", help="Find the shortest path")
    path_parser.add_argument("links", type=Path, help="Path to link file")
    path_parser.add_argument("source", help="Source router")
    path_parser.add_argument("destination", help="Destination router")
    path_parser.set_defaults(func=_cmd_path)

    reach_parser = subparsers.add_parser(
        "reachable", help="List routers reachable from every router"
    )
    reach_parser.add_argument("links", type=Path, help="Path to link file")
    reach_parser.add_argument(
        "--reverse",
        action="store_true",
        help="List, for every router, the routers that can reach it",
    )
    reach_parser.set_defaults(func=_cmd_reachable)

    shell_parser = subparsers.add_parser("shell", help="Start the query shell")
    shell_parser.add_argument(
        "links", type=Path, nargs="?", default=None, help="Optional link file"
    )
    shell_parser.set_defaults(func=_cmd_shell)

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(ENGINE_CONFIG.log_level)

    args.func(args)


if __name__ == "__main__":
    main()
