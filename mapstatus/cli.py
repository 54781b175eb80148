"""CLI entry point and orchestration logic."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from . import __version__
from .defaults import PROTOCOL_NAME
from .model.options import MapOptions
from .util import MapStatusError, OptionsValidationError, setup_logging
from .parser.reader import load_snapshot, parse_interface_status, summarize
from .parser.options import check_options, load_options
from .registry import build_default_registry
from .emitters.status_text import emit_brief, emit_extended
from .emitters.status_yaml import emit_yaml

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mapstatus",
        description="Show MAP-E / MAP-T / LW4over6 interface status from a status dump.",
    )
    p.add_argument(
        "input",
        help="Path to interface status JSON ('-' for stdin)",
    )
    p.add_argument(
        "-n", "--name", default="",
        help="Interface (section) name, e.g. wan6_4",
    )
    p.add_argument("-e", "--extended", action="store_true", help="Show the full status with the rule table")
    p.add_argument("--yaml", action="store_true", help="Output derived values as YAML")
    p.add_argument(
        "--options", type=Path, default=None,
        help="Path to a YAML file with the interface's protocol options to validate",
    )
    p.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Write output to a file instead of stdout",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--version", action="version", version=f"mapstatus {__version__}")
    return p


def _read_input(source: str) -> str:
    if source == "-":
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as e:
            raise MapStatusError(f"stdin is not valid UTF-8: {e}") from e
    return _read_file(Path(source))


def _read_file(path: Path) -> str:
    if not path.exists():
        raise MapStatusError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MapStatusError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise MapStatusError(f"Cannot read {path}: {e.strerror or e}") from e


def _load_options(path: Path, section: str) -> Optional[MapOptions]:
    """Load and validate the options file; None after logging any problem."""
    try:
        return check_options(load_options(_read_file(path), section=section))
    except OptionsValidationError as e:
        log.error(f"{len(e.errors)} problem(s) in {path}:")
        for err in e.errors:
            log.error(f"  - {err}")
    except MapStatusError as e:
        log.error(f"Cannot read options: {e}")
    except yaml.YAMLError as e:
        log.error(f"Cannot read options from {path}: {e}")
    return None


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    registry = build_default_registry()

    # === STEP 1: Validate protocol options ===
    options = None
    if args.options:
        options = _load_options(args.options, args.name)
        if options is None:
            sys.exit(1)
        log.info(f"Options in {args.options} are valid")

    # === STEP 2: Read the status dump ===
    try:
        snapshot = load_snapshot(_read_input(args.input))
    except MapStatusError as e:
        log.error(f"Cannot read status: {e}")
        sys.exit(1)

    status = parse_interface_status(snapshot, name=args.name)
    log.debug(f"Parsed MAP data: {summarize(status.map)}")
    if status.map is None:
        log.warning("Status carries no MAP data; all values are unknown")
    if status.l3_device and not registry.is_virtual_ifname(status.l3_device):
        log.debug(f"Device '{status.l3_device}' is not a MAP tunnel device")
    protocol = registry.get_protocol(PROTOCOL_NAME)
    if status.name and status.l3_device and not protocol.contains_device(status.l3_device, status.name):
        log.debug(f"Device '{status.l3_device}' differs from '{protocol.ifname(status.name)}'")

    # === STEP 3: Emit ===
    if args.yaml:
        output = emit_yaml(status, options)
    elif args.extended:
        output = emit_extended(status, registry, options)
    else:
        output = emit_brief(status)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output.rstrip("\n") + "\n", encoding="utf-8")
        log.info(f"Status written to: {args.output}")
    else:
        print(output.rstrip("\n"))
