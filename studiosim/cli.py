from __future__ import annotations

import argparse
import json
import logging
import sys

from studiosim.catalog import RECORDING_METHODS, EquipmentSlot
from studiosim.channel import Channel
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import ValidationError
from studiosim.formatting import format_monte_carlo, format_text_report
from studiosim.runtime import StudioRuntime
from studiosim.simulation import Simulation, run_monte_carlo
from studiosim.storage import ChannelStore
from studiosim.strategy import STRATEGY_REGISTRY, SkillProfile, Strategy

DEFAULT_STORE = "studiosim_save.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studiosim",
        description="studiosim - Channel Growth Simulation CLI",
    )
    parser.add_argument("--config", default=None, help="JSON file overriding tunables")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    sim = sub.add_parser("simulate", help="Run an autoplay balance simulation")
    sim.add_argument("--days", type=int, default=30, help="Simulated days (default: 30)")
    sim.add_argument(
        "--strategy",
        default="greedy",
        choices=sorted(STRATEGY_REGISTRY),
        help="Strategy to use (default: greedy)",
    )
    sim.add_argument(
        "--minigames",
        action="store_true",
        help="Play all three minigames every day",
    )
    sim.add_argument(
        "--accuracy", type=float, default=0.9, help="Minigame skill, 0-1 (default: 0.9)"
    )
    sim.add_argument("--premium", action="store_true", help="Simulate a premium channel")
    sim.add_argument("--seed", type=int, default=None, help="Random seed")
    sim.add_argument("--export-csv", default=None, help="CSV export path prefix")
    sim.add_argument("--export-json", default=None, help="JSON export path")
    sim.add_argument("--plot", default=None, help="Plot output path (PNG)")
    sim.add_argument(
        "--monte-carlo",
        type=int,
        default=None,
        help="Number of Monte Carlo runs",
    )

    play = sub.add_parser("play", help="Play a stored channel turn by turn")
    play.add_argument("--store", default=DEFAULT_STORE, help=f"Save file (default: {DEFAULT_STORE})")
    play.add_argument("--channel", default=None, help="Channel id (default: last active)")
    play.add_argument("--seed", type=int, default=None, help="Random seed")
    actions = play.add_subparsers(dest="action")

    new = actions.add_parser("new", help="Create a channel")
    new.add_argument("name")
    new.add_argument("--premium", action="store_true")

    actions.add_parser("list", help="List channels")
    actions.add_parser("status", help="Show the channel")

    upload = actions.add_parser("upload", help="Upload a video")
    upload.add_argument("title")
    upload.add_argument("--genre", required=True)
    upload.add_argument("--sub-genre", default=None)
    upload.add_argument(
        "--method",
        default=RECORDING_METHODS[0].name,
        choices=[m.name for m in RECORDING_METHODS],
        help="Recording method",
    )

    actions.add_parser("next-day", help="Advance to the next day")

    upgrade = actions.add_parser("upgrade", help="Upgrade equipment")
    upgrade.add_argument("slot", choices=[s.value for s in EquipmentSlot])

    actions.add_parser("monetize", help="Activate monetization")

    return parser


def load_config(path: str | None) -> StudioConfig:
    """Read a JSON file of tunable overrides. Exits on invalid input."""
    if path is None:
        return DEFAULT_CONFIG
    try:
        with open(path) as f:
            config = StudioConfig.from_dict(json.load(f))
    except (OSError, ValueError) as exc:
        print(f"Error: cannot load config {path!r}: {exc}", file=sys.stderr)
        sys.exit(1)
    errors = config.validate()
    if errors:
        print(f"Error: invalid config {path!r}:", file=sys.stderr)
        for e in errors:
            print(f"  - {e}", file=sys.stderr)
        sys.exit(1)
    return config


def build_strategy(name: str, minigames: bool, accuracy: float) -> Strategy:
    skill = SkillProfile(accuracy=accuracy) if minigames else None
    strategy_cls = STRATEGY_REGISTRY.get(name, STRATEGY_REGISTRY["greedy"])
    return strategy_cls(skill=skill)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    config = load_config(args.config)

    if args.command == "simulate":
        _run_simulate(args, config)
    elif args.command == "play":
        _run_play(args, config)


def _run_simulate(args, config: StudioConfig) -> None:
    if args.monte_carlo and args.monte_carlo > 1:
        summary = run_monte_carlo(
            lambda: build_strategy(args.strategy, args.minigames, args.accuracy),
            days=args.days,
            runs=args.monte_carlo,
            config=config,
            seed=args.seed,
            premium=args.premium,
        )
        print(format_monte_carlo(summary))
        return

    sim = Simulation(
        strategy=build_strategy(args.strategy, args.minigames, args.accuracy),
        days=args.days,
        config=config,
        seed=args.seed,
        premium=args.premium,
    )
    report = sim.run()
    print(format_text_report(report))

    if args.export_csv:
        from studiosim.export import export_csv
        export_csv(report, args.export_csv)
        print(f"\nCSV exported to {args.export_csv}_*.csv")

    if args.export_json:
        from studiosim.export import export_json
        export_json(report, args.export_json)
        print(f"\nJSON exported to {args.export_json}")

    if args.plot:
        from studiosim.visualization import plot_simulation
        plot_simulation(report, args.plot)
        print(f"\nPlot saved to {args.plot}")


def _print_channel(channel: Channel) -> None:
    print(f"{channel.name} [{channel.id}] - day {channel.day}")
    print(f"  Subscribers: {channel.subscribers:,}   Views: {channel.views:,}")
    print(f"  Watch hours: {channel.watch_hours:,.2f}   Money: ${channel.money:,.2f}")
    print(f"  Energy: {channel.energy:g}/{channel.max_energy:g}")
    print(f"  Monetized: {'yes' if channel.is_monetized else 'no'}")
    levels = ", ".join(f"{s.value} {channel.equipment.get(s)}" for s in EquipmentSlot)
    print(f"  Equipment: {levels}")


def _run_play(args, config: StudioConfig) -> None:
    store = ChannelStore(args.store, config=config)

    try:
        if args.action == "new":
            channel = store.create_channel(args.name, premium=args.premium)
            _print_channel(channel)
            return
        if args.action == "list":
            active = store.last_active
            for c in store.list_channels():
                marker = "*" if c.id == active else " "
                print(f"{marker} {c.id}  {c.name}  day {c.day}  {c.subscribers:,} subs")
            return

        channel_id = args.channel or store.last_active
        if channel_id is None:
            print("Error: no channel yet, create one with 'play new NAME'", file=sys.stderr)
            sys.exit(1)
        runtime = StudioRuntime(store.load_channel(channel_id), config=config, seed=args.seed)
        channel = runtime.channel

        if args.action == "upload":
            outcome = runtime.upload_video(args.title, args.genre, args.method, args.sub_genre)
            video = outcome.video
            print(
                f"Uploaded {video.title!r}: {video.views:,} views, "
                f"+{video.subscribers_gained} subs, ${video.money_gained:.2f}"
                + (" (viral!)" if outcome.viral else "")
            )
        elif args.action == "next-day":
            report = runtime.advance_day()
            print(
                f"Day {report.day}: +{report.views_gained:,} views, "
                f"+{report.subscribers_gained} subs, energy {channel.energy:g}"
            )
        elif args.action == "upgrade":
            result = runtime.upgrade_equipment(args.slot)
            print(f"{result.slot.value} upgraded to level {result.new_level} for ${result.cost:,.0f}")
        elif args.action == "monetize":
            if runtime.activate_monetization():
                print("Monetization activated")
            else:
                print("Already monetized")
        else:
            _print_channel(channel)
            return

        for aid in runtime.last_reward.unlocked:
            print(f"Achievement unlocked: {aid}")
        store.save_channel(channel)
        store.last_active = channel.id
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
