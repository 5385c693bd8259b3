from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path

from studiosim.report import SimulationReport


def export_csv(report: SimulationReport, path: str | Path) -> None:
    """Export simulation data as CSV files.

    Creates three files:
      - {path}_days.csv
      - {path}_uploads.csv
      - {path}_purchases.csv
    """
    base = str(path)

    with open(f"{base}_days.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(
            ["day", "subscribers", "views", "money", "watch_hours",
             "total_earnings", "energy", "max_energy", "videos", "is_monetized"]
        )
        for s in report.snapshots:
            writer.writerow([
                s.day, s.subscribers, s.views, s.money, s.watch_hours,
                s.total_earnings, s.energy, s.max_energy, s.videos, s.is_monetized,
            ])

    with open(f"{base}_uploads.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(
            ["day", "video_id", "views", "subscribers", "money", "watch_hours", "viral", "boosts"]
        )
        for u in report.uploads:
            writer.writerow([
                u.day, u.video_id, u.views, u.subscribers, u.money,
                u.watch_hours, u.viral, ";".join(u.boosts_consumed),
            ])

    with open(f"{base}_purchases.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["day", "slot", "level", "cost", "money_after"])
        for p in report.purchases:
            writer.writerow([p.day, p.slot, p.level, p.cost, p.money_after])


def export_json(report: SimulationReport, path: str | Path) -> None:
    """Export full simulation report as JSON."""
    data = {
        "strategy": report.strategy_description,
        "outcome": report.outcome,
        "days": report.days,
        "premium": report.premium,
        "monetized_day": report.monetized_day,
        "achievement_days": report.achievement_days,
        "upload_count": len(report.uploads),
        "uploads_per_day": report.uploads_per_day,
        "mean_views_per_upload": report.mean_views_per_upload,
        "viral_uploads": report.viral_uploads,
        "minigame_success_rate": report.minigame_success_rate,
        "final": asdict(report.final) if report.final else None,
        "snapshots": [asdict(s) for s in report.snapshots],
        "purchases": [asdict(p) for p in report.purchases],
        "minigames": [asdict(m) for m in report.minigames],
    }
    with open(str(path), "w") as f:
        json.dump(data, f, indent=2)
