"""Link-file loading and plain-text rendering of query results.

The link-file format holds one ``<source> <destination> <weight>`` triple per
line, whitespace separated. Blank lines and comment lines are ignored.
Malformed lines are skipped with a warning so one bad line does not abort
the load.

Two comment markers carry state that plain triples cannot:

* a ``# directed`` line makes the file load one direction per triple, even
  when ``EngineConfig.symmetric_load`` is set;
* a trailing ``# down`` on a triple loads that ``source -> destination`` link
  in the down state.

``write_links`` emits both markers, so its output reloads to the same links
with the default loader.
"""

from __future__ import annotations

import math
from pathlib import Path as FilePath
from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    TextIO,
    Tuple,
    Union,
)

from lsgraph.config import ENGINE_CONFIG, EngineConfig
from lsgraph.logging import get_logger
from lsgraph.model.network import Network
from lsgraph.model.path import Path

LOGGER = get_logger(__name__)

LinkTriple = Tuple[str, str, float]
# (source, destination, weight, active)
LinkRecord = Tuple[str, str, float, bool]

DIRECTED_MARKER = "directed"
DOWN_MARKER = "down"


def _iter_records(
    lines: Iterable[Union[str, bytes]],
    config: EngineConfig,
    markers: Optional[Set[str]] = None,
) -> Iterator[LinkRecord]:
    """Yield one record per well-formed line.

    Comment-only lines are collected into ``markers`` when it is given. Byte
    lines are decoded as UTF-8; a line that fails to decode is skipped.
    """
    prefix = config.comment_prefix
    for lineno, raw in enumerate(lines, start=1):
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError:
                LOGGER.warning("Skipping line %d: not valid UTF-8: %r", lineno, raw)
                continue

        body, sep, comment = raw.strip().partition(prefix)
        body = body.strip()
        comment = comment.strip().lower() if sep else ""
        if not body:
            if comment and markers is not None:
                markers.add(comment)
            continue

        tokens = body.split()
        if len(tokens) != 3:
            LOGGER.warning(
                "Skipping line %d: expected 3 fields, got %d: %r",
                lineno,
                len(tokens),
                body,
            )
            continue

        src, dst, weight_text = tokens
        try:
            weight = float(weight_text)
        except ValueError:
            LOGGER.warning(
                "Skipping line %d: weight %r is not a number", lineno, weight_text
            )
            continue

        if math.isnan(weight) or weight < 0:
            LOGGER.warning(
                "Skipping line %d: weight %r must be non-negative", lineno, weight_text
            )
            continue
        if src == dst:
            LOGGER.warning("Skipping line %d: self-loop on router '%s'", lineno, src)
            continue

        yield src, dst, weight, comment != DOWN_MARKER


def parse_links(
    lines: Iterable[Union[str, bytes]], config: Optional[EngineConfig] = None
) -> Iterator[LinkTriple]:
    """Yield ``(source, destination, weight)`` triples from link-file lines.

    Args:
        lines: Lines of text or UTF-8 bytes, with or without trailing newlines.
        config: Optional engine configuration (comment prefix).

    Yields:
        One triple per well-formed line, in input order.
    """
    config = config or ENGINE_CONFIG
    for src, dst, weight, _active in _iter_records(lines, config):
        yield src, dst, weight


def read_links(
    stream: Iterable[Union[str, bytes]],
    network: Optional[Network] = None,
    config: Optional[EngineConfig] = None,
) -> Network:
    """Load link-file content into a network.

    With ``config.symmetric_load`` (the default) each triple installs both
    directions, otherwise only ``source -> destination``. A ``# directed``
    line in the content forces the latter. A triple marked ``# down`` takes
    its ``source -> destination`` link down.

    Args:
        stream: Open text or binary stream, or any iterable of lines.
        network: Network to extend; a new one is created when omitted.
        config: Optional engine configuration.

    Returns:
        The populated network.
    """
    config = config or ENGINE_CONFIG
    network = Network() if network is None else network

    markers: Set[str] = set()
    records = list(_iter_records(stream, config, markers))
    symmetric = config.symmetric_load and DIRECTED_MARKER not in markers
    for src, dst, weight, _active in records:
        network.add_link(src, dst, weight)
        if symmetric:
            network.add_link(dst, src, weight)
    for src, dst, _weight, active in records:
        if not active:
            network.set_link_active(src, dst, False)

    LOGGER.info(
        "Loaded %d link triple(s); network has %d router(s) and %d link(s)",
        len(records),
        len(network),
        len(network.links),
    )
    return network


def load_network(
    path: Union[str, FilePath],
    network: Optional[Network] = None,
    config: Optional[EngineConfig] = None,
) -> Network:
    """Load a link file from disk.

    The file is read as bytes and decoded line by line, so a line that is not
    valid UTF-8 is skipped like any other malformed line.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    path = FilePath(path)
    if not path.is_file():
        raise FileNotFoundError(f"Link file '{path}' does not exist.")

    LOGGER.debug("Reading link file %s", path)
    with path.open("rb") as fh:
        return read_links(fh, network=network, config=config)


def write_links(
    network: Network, stream: TextIO, config: Optional[EngineConfig] = None
) -> int:
    """Write every directed link as a link-file line. Returns the link count.

    The output starts with a ``# directed`` line and marks down links with
    ``# down``, using ``config.comment_prefix``. Router up/down state and
    routers without links are not written.
    """
    prefix = (config or ENGINE_CONFIG).comment_prefix
    stream.write(f"{prefix} {DIRECTED_MARKER}\n")
    count = 0
    for name, _active, neighbors in network.topology():
        for neighbor, weight, link_active in neighbors:
            line = f"{name} {neighbor} {format_weight(weight)}"
            if not link_active:
                line = f"{line}  {prefix} {DOWN_MARKER}"
            stream.write(f"{line}\n")
            count += 1
    return count


def format_weight(value: float) -> str:
    """Return a weight with up to three decimals and trailing zeros trimmed.

    Examples:
        2.0 -> "2"; 0.25 -> "0.25"; 1.23456 -> "1.235".
    """
    text = f"{float(value):.3f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_topology(network: Network) -> str:
    """Render routers and their outgoing links, marking down entities."""
    lines: List[str] = []
    for name, active, neighbors in network.topology():
        lines.append(name if active else f"{name} <DOWN>")
        for neighbor, weight, link_active in neighbors:
            entry = f"  {neighbor} {format_weight(weight)}"
            lines.append(entry if link_active else f"{entry} <DOWN>")
    return "\n".join(lines)


def format_path(path: Path) -> str:
    """Render a path as ``A -> B -> C  <cost>``."""
    return f"{' -> '.join(path.routers)}  {format_weight(path.cost)}"


def format_reachability(mapping: Dict[str, Set[str]]) -> str:
    """Render a router -> router-set mapping with members indented and sorted."""
    lines: List[str] = []
    for name in sorted(mapping):
        lines.append(name)
        lines.extend(f"  {member}" for member in sorted(mapping[name]))
    return "\n".join(lines)
