from __future__ import annotations

from studiosim.catalog import get_achievement
from studiosim.report import SimulationReport
from studiosim.simulation import MonteCarloSummary


def format_text_report(report: SimulationReport) -> str:
    """Format a simulation report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + " Studio Simulation Report " + "=" * 30)
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Channel: {'premium' if report.premium else 'standard'}")
    lines.append(f"Result: {report.outcome}")
    lines.append("")

    final = report.final
    if final is not None:
        lines.append("CHANNEL:")
        lines.append(f"  Subscribers: {final.subscribers:,}")
        lines.append(f"  Views: {final.views:,}")
        lines.append(f"  Watch hours: {final.watch_hours:,.2f}")
        lines.append(f"  Money: ${final.money:,.2f} (earned ${final.total_earnings:,.2f})")
        lines.append(f"  Videos: {final.videos}")
        if report.monetized_day is not None:
            lines.append(f"  Monetized on day {report.monetized_day}")
        else:
            lines.append("  Not monetized")
        lines.append("")

    # Achievements
    if report.achievements:
        lines.append("ACHIEVEMENTS:")
        for a in report.achievements:
            definition = get_achievement(a.achievement_id)
            name = definition.name if definition else a.achievement_id
            lines.append(f"  * {name:.<30s} day {a.day}")
        lines.append("")

    lines.append("UPLOADS:")
    lines.append(f"  Total: {len(report.uploads)}")
    lines.append(f"  Per day: {report.uploads_per_day:.2f}")
    lines.append(f"  Mean views: {report.mean_views_per_upload:.1f}")
    lines.append(f"  Viral: {report.viral_uploads}")
    lines.append("")

    lines.append("PURCHASES:")
    lines.append(f"  Total: {len(report.purchases)}")
    for p in report.purchases:
        lines.append(f"  day {p.day:>4}: {p.slot} -> level {p.level} (${p.cost:,.0f})")
    lines.append("")

    if report.minigames:
        lines.append("MINIGAMES:")
        lines.append(f"  Played: {len(report.minigames)}")
        lines.append(f"  Completed: {report.minigame_success_rate:.0%}")

    return "\n".join(lines).rstrip()


def format_monte_carlo(summary: MonteCarloSummary) -> str:
    lines = [f"Monte Carlo: {summary.runs} runs of {summary.days} days"]
    lines.append(f"Monetized: {len(summary.monetized_days)}/{summary.runs}")
    if summary.monetized_days:
        days = summary.monetized_days
        lines.append(
            f"Monetization day: mean={sum(days) / len(days):.1f}, "
            f"min={min(days)}, max={max(days)}"
        )
    subs = summary.final_subscribers
    lines.append(f"Final subscribers: mean={sum(subs) / len(subs):,.0f}, min={min(subs):,}, max={max(subs):,}")
    earnings = summary.final_earnings
    lines.append(f"Total earnings: mean=${sum(earnings) / len(earnings):,.2f}")
    if summary.achievement_days:
        lines.append("Achievement days (mean / min / max, runs):")
        for aid, days in sorted(summary.achievement_days.items()):
            mean = sum(days) / len(days)
            lines.append(f"  {aid}: {mean:.1f} / {min(days)} / {max(days)} ({len(days)})")
    return "\n".join(lines)
