"""
yuzupack - YuZuUI voice pack builder

Runs the selection wizard (or takes the selection from arguments), then
writes the resource pack zip into the output directory.

Usage:
    yuzupack                                  # Interactive wizard
    yuzupack --characters yoshino,mako --locale en-US   # Build without the wizard
    yuzupack --history                        # Show recent builds
"""

import argparse
import os
import sys

from . import event_logger
from .builder import ArchiveWriteError, AssetStore, assemble, write_archive
from .constants import (
    CHARACTERS,
    DEFAULT_LOCALE_INDEX,
    EXIT_FAILED,
    EXIT_INTERRUPTED,
    EXIT_OK,
    LOCALES,
    SKIP_INDEX,
    VERSION,
)
from .utils import (
    T,
    detect_system_locale,
    get_setting,
    load_env,
    load_settings,
    normalize_tag,
    resolve_assets_root,
    resolve_output_dir,
    set_language,
)
from .wizard import FinalSelection, build_initial_state

SKIP_ALIASES = {"skip", "default", "none"}


def parse_characters(value):
    """
    Parse a comma-separated character list.

    Accepts 0-based indices ("0"), folder names ("1yoshino"), short names
    ("yoshino"), or "skip" for the default voice. An empty string selects
    no characters.
    """
    indices = set()
    for token in (t.strip().lower() for t in value.split(',')):
        if not token:
            continue
        if token in SKIP_ALIASES:
            indices.add(SKIP_INDEX)
            continue
        if token.isdigit() and int(token) < len(CHARACTERS):
            indices.add(int(token))
            continue
        for i, folder in enumerate(CHARACTERS):
            if token in (folder, folder[1:]):
                indices.add(i)
                break
        else:
            raise argparse.ArgumentTypeError(f"unknown character: {token}")
    return frozenset(indices)


def parse_locale(value):
    tag = normalize_tag(value)
    for i, locale in enumerate(LOCALES):
        if locale.lower() == tag.lower():
            return i
    raise argparse.ArgumentTypeError(f"unknown locale: {value} (choose from {', '.join(LOCALES)})")


def build_parser():
    parser = argparse.ArgumentParser(prog="yuzupack", description="YuZuUI voice pack builder")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--lang", metavar="TAG", help="UI language (zh-CN, zh-TW, en-US)")
    parser.add_argument("--assets", metavar="DIR", help="Asset store root (default: bundled assets)")
    parser.add_argument("--output-dir", metavar="DIR", help="Where to write the pack (default: cwd)")
    parser.add_argument("--strict", action="store_true",
                        help="Exit with an error when any asset is missing")
    parser.add_argument("--no-mouse", action="store_true", help="Disable mouse input in the wizard")
    parser.add_argument("--characters", metavar="LIST", type=parse_characters,
                        help="Build without the wizard: comma-separated characters (or 'skip')")
    parser.add_argument("--locale", metavar="TAG", type=parse_locale,
                        help="Build without the wizard: texture locale")
    parser.add_argument("--history", action="store_true", help="Show recent builds and exit")
    return parser


def pick_ui_language(args, settings):
    """--lang -> settings -> YUZUPACK_LANG -> system locale"""
    return (args.lang
            or get_setting('ui.language', settings=settings)
            or os.getenv("YUZUPACK_LANG", "")
            or detect_system_locale())


def print_history(limit=10):
    events = event_logger.get_recent_events(limit)
    if not events:
        print("No builds recorded.")
        return
    for evt in events:
        data = evt.get("data", {})
        chars = ", ".join(data.get("characters", [])) or "-"
        print(f"  {evt['id']}: {evt['status']:<7} {data.get('locale', '?'):<6} "
              f"chars={chars} skipped={data.get('skipped_count', 0)}")


def read_max_events(settings):
    value = get_setting('events.max_events', event_logger.MAX_EVENTS, settings=settings)
    try:
        return int(value)
    except (TypeError, ValueError):
        print(f"[Settings] Invalid events.max_events {value!r}, using {event_logger.MAX_EVENTS}")
        return event_logger.MAX_EVENTS


def select(args, settings):
    """FinalSelection from arguments or the wizard. None means the user aborted."""
    if args.characters is not None or args.locale is not None:
        return FinalSelection(
            characters=args.characters if args.characters is not None else frozenset({SKIP_INDEX}),
            locale=args.locale if args.locale is not None else DEFAULT_LOCALE_INDEX,
        )

    from .wizard.app import run_wizard

    mouse = bool(get_setting('ui.mouse', True, settings=settings)) and not args.no_mouse
    return run_wizard(build_initial_state(T), mouse=mouse)


def main(argv=None):
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()
    events_enabled = bool(get_setting('events.enabled', True, settings=settings))
    max_events = read_max_events(settings)

    if args.history:
        print_history()
        return EXIT_OK

    set_language(pick_ui_language(args, settings))

    selection = select(args, settings)
    if selection is None:
        print("KeyboardInterrupt")
        return EXIT_INTERRUPTED

    store = AssetStore(resolve_assets_root(settings, args.assets))
    output_dir = resolve_output_dir(settings, args.output_dir)
    plan = assemble(selection, store)
    print(f"[Build] {plan.output_name} (locale={plan.locale}, replace={plan.replace}, "
          f"characters={', '.join(plan.characters) or '-'})")

    try:
        report = write_archive(plan, store, output_dir)
    except ArchiveWriteError as e:
        print(f"[ERROR] {e}")
        if events_enabled:
            event_logger.log_build_event(plan.output_name, plan.locale, plan.characters, plan.replace,
                                         status="error", error=str(e), max_events=max_events)
        return EXIT_FAILED

    skipped = [entry.source for entry in report.skipped]
    print(f"[Build] Wrote {len(report.written)} entries to {report.path}")
    if skipped:
        print(f"[WARN] Skipped {len(skipped)} missing assets:")
        for source in skipped:
            print(f"  {source}")

    if events_enabled:
        event_logger.log_build_event(plan.output_name, plan.locale, plan.characters, plan.replace,
                                     written=len(report.written), skipped=skipped,
                                     status="warning" if skipped else "success", max_events=max_events)

    strict = args.strict or bool(get_setting('build.strict_missing', False, settings=settings))
    if strict and skipped:
        print("[ERROR] Missing assets in strict mode")
        return EXIT_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
