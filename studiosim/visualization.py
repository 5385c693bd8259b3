from __future__ import annotations

from studiosim.report import SimulationReport


def plot_simulation(
    report: SimulationReport,
    output_path: str | None = None,
) -> None:
    """Generate a 4-panel matplotlib visualization of simulation results.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install studiosim[viz]"
        )

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"Studio Simulation - {report.strategy_description}", fontsize=14)

    # 1. Audience growth
    ax1 = axes[0][0]
    for metric in ("subscribers", "views"):
        series = report.metric_series(metric)
        if series:
            days, values = zip(*series)
            ax1.plot(days, [max(v, 1) for v in values], label=metric)
    if report.monetized_day is not None:
        ax1.axvline(report.monetized_day, color="green", linestyle="--", label="monetized")
    ax1.set_yscale("log")
    ax1.set_xlabel("Day")
    ax1.set_title("Audience")
    ax1.legend(fontsize=8)
    ax1.grid(True, alpha=0.3)

    # 2. Money and watch hours
    ax2 = axes[0][1]
    for metric in ("money", "total_earnings", "watch_hours"):
        series = report.metric_series(metric)
        if series:
            days, values = zip(*series)
            ax2.plot(days, values, label=metric)
    ax2.set_xlabel("Day")
    ax2.set_title("Money and Watch Hours")
    ax2.legend(fontsize=8)
    ax2.grid(True, alpha=0.3)

    # 3. Purchase timeline
    ax3 = axes[1][0]
    if report.purchases:
        slots = sorted({p.slot for p in report.purchases})
        y_map = {s: i for i, s in enumerate(slots)}
        ax3.scatter(
            [p.day for p in report.purchases],
            [y_map[p.slot] for p in report.purchases],
            s=20,
            alpha=0.7,
        )
        ax3.set_yticks(range(len(slots)))
        ax3.set_yticklabels(slots, fontsize=8)
        ax3.set_xlabel("Day")
        ax3.set_title("Equipment Purchases")
        ax3.grid(True, alpha=0.3)

    # 4. Views per upload
    ax4 = axes[1][1]
    if report.uploads:
        ax4.hist([u.views for u in report.uploads], bins=min(30, len(report.uploads)), alpha=0.7)
        ax4.axvline(
            report.mean_views_per_upload,
            color="red",
            linestyle="--",
            label=f"Mean: {report.mean_views_per_upload:.0f}",
        )
        ax4.set_xlabel("Views at upload")
        ax4.set_ylabel("Count")
        ax4.set_title("Upload Views Distribution")
        ax4.legend()
        ax4.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
    else:
        plt.show()
