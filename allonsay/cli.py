#!/usr/bin/env python3
"""Read text aloud, switching voices between English/Dutch and Chinese.

Usage:
    allonsay [OPTIONS] TEXT...

Examples:
    allonsay "You can change trains at 美孚 station"
    allonsay --dry-run "Nederlandse Spoorwegen"
    allonsay --plan "University of Hong Kong (香港大學)"
"""

from __future__ import annotations

import argparse
import json
import logging
import shlex
import subprocess
import sys

from .language_router import VoiceAssignment, VoiceMap, VoiceRouter

_LOGGER = logging.getLogger(__name__)

DEFAULT_SAY_COMMAND = "say"


def build_say_commands(assignments: list[VoiceAssignment], say_command: str = DEFAULT_SAY_COMMAND) -> str:
    """Build one shell command line that speaks every part in order.

    Each separate process would introduce an awkward pause whenever the text
    switches voice, so all parts go into a single ``sh -c`` invocation.
    """
    commands = [
        f"{shlex.quote(say_command)} -v {shlex.quote(a.voice)} {shlex.quote(a.text)}"
        for a in assignments
    ]
    return ";".join(commands)


def speak(command_line: str) -> None:
    """Run the command line through ``sh -c``."""
    _LOGGER.debug("Running: %s", command_line)
    subprocess.run(["sh", "-c", command_line], check=True, capture_output=True)


def _plan_to_json(router: VoiceRouter, text: str) -> str:
    result = router.plan(text)
    return json.dumps({
        "language": result.language.value if result.language else None,
        "assignments": [
            {"voice": a.voice, "text": a.text, "ideographic": a.is_ideographic}
            for a in result.assignments
        ],
    }, ensure_ascii=False, indent=2)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = VoiceMap()
    parser = argparse.ArgumentParser(
        prog="allonsay",
        description="Speak mixed English/Dutch and Chinese text with matching voices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to speak",
    )
    parser.add_argument(
        "--english-voice",
        default=defaults.english,
        help=f"Voice for English text (default: {defaults.english})",
    )
    parser.add_argument(
        "--dutch-voice",
        default=defaults.dutch,
        help=f"Voice for Dutch text (default: {defaults.dutch})",
    )
    parser.add_argument(
        "--ideographic-voice",
        default=defaults.ideographic,
        help=f"Voice for Chinese characters (default: {defaults.ideographic})",
    )
    parser.add_argument(
        "--say-command",
        default=DEFAULT_SAY_COMMAND,
        help=f"Speech command to invoke (default: {DEFAULT_SAY_COMMAND})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the shell command instead of running it",
    )
    parser.add_argument(
        "--plan",
        action="store_true",
        help="Print the routing plan as JSON and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    text = " ".join(args.text)
    if not text.strip():
        # Nothing to say
        return

    router = VoiceRouter(voices=VoiceMap(
        english=args.english_voice,
        dutch=args.dutch_voice,
        ideographic=args.ideographic_voice,
    ))

    if args.plan:
        print(_plan_to_json(router, text))
        return

    command_line = build_say_commands(router.route(text), say_command=args.say_command)

    if args.dry_run:
        print(command_line)
        return

    try:
        speak(command_line)
    except FileNotFoundError:
        print("Error: sh not found", file=sys.stderr)
        sys.exit(1)
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        print(f"Error: {args.say_command} failed with exit status {e.returncode}", file=sys.stderr)
        if stderr:
            print(stderr, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
