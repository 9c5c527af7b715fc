"""Thin CLI entry point — parses fragments and simulates bounded playback."""

import argparse
import json
import math
import sys
from pathlib import Path

from mediafrag.config import PlayerConfig, configure_logging, load_config
from mediafrag.controller import FragmentController
from mediafrag.events import FragmentEvent, LocalEventBus
from mediafrag.fragment import parse_media_fragment
from mediafrag.media import SimulatedMedia
from mediafrag.models import TemporalWindow


def _describe(window: TemporalWindow | None) -> str:
    if window is None:
        return "no temporal fragment"
    start = "-" if window.start is None else f"{window.start:g}s"
    end = "-" if window.end is None else f"{window.end:g}s"
    return f"start={start} end={end}"


def _cmd_parse(args: argparse.Namespace) -> int:
    window = parse_media_fragment(args.url)
    if args.json:
        print(json.dumps({"window": window.to_dict() if window else None}))
    else:
        print(_describe(window))
    return 0 if window is not None else 1


def _cmd_play(args: argparse.Namespace, config: PlayerConfig) -> int:
    bus = LocalEventBus()
    bus.on(
        FragmentEvent.FRAGMENT_END,
        lambda w: print(f"  Boundary reached at {w.end:g}s — playback paused"),
    )

    controller = FragmentController(config, bus)
    window = controller.load_source(args.url)
    print(f"Fragment: {_describe(window)}")

    media = SimulatedMedia(args.duration, time_update_interval=config.time_update_interval)
    controller.attach_media(media)
    if config.start_position >= 0:
        media.seek(config.start_position)

    print(f"  Starting at {media.current_time:.2f}s")
    media.play()
    media.advance(args.duration)

    print()
    print(f"Stopped at {media.current_time:.2f}s ({'ended' if media.ended else 'paused'})")
    print(f"  Pause requests: {media.pause_calls}")
    controller.destroy()
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="mediafrag",
        description="mediafrag — Media Fragment URI temporal windows and playback boundaries.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    parse = sub.add_parser("parse", help="Print the temporal window of a URI")
    parse.add_argument("url", help="Media resource URI, e.g. video.m3u8#t=10,20")
    parse.add_argument("--json", action="store_true", help="Print the result as JSON")

    play = sub.add_parser("play", help="Simulate playback of a URI and enforce its end boundary")
    play.add_argument("url", help="Media resource URI")
    play.add_argument("--duration", "-d", type=float, required=True, help="Media duration in seconds")
    play.add_argument("--config", "-c", type=Path, help="Path to a JSON player config file")

    serve = sub.add_parser("serve", help="Launch the web API")
    serve.add_argument("--port", type=int, default=8321, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        config = load_config(args.config) if getattr(args, "config", None) else PlayerConfig()
    except (OSError, ValueError) as e:
        print(f"Error: invalid config: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging("DEBUG" if args.verbose else config.log_level)

    if args.command == "serve":
        from mediafrag.web import create_app
        app = create_app()
        print(f"mediafrag API: http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=False)
        return

    if args.command == "parse":
        sys.exit(_cmd_parse(args))

    if not math.isfinite(args.duration) or args.duration <= 0:
        print("Error: --duration must be a positive finite number.", file=sys.stderr)
        sys.exit(1)
    sys.exit(_cmd_play(args, config))
