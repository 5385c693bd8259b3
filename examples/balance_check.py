"""Compare strategies on the stock tuning and on a faster-monetizing variant."""
from __future__ import annotations

from studiosim.definition import StudioConfig
from studiosim.formatting import format_monte_carlo, format_text_report
from studiosim.simulation import Simulation, run_monte_carlo
from studiosim.strategy import GreedyUploader, SaveForBest, SkillProfile


def define_config() -> StudioConfig:
    """Stock tuning with a lower monetization bar."""
    return StudioConfig(
        name="Fast Monetization",
        monetization_subscribers=500,
        monetization_watch_hours=500,
    )


def main() -> None:
    report = Simulation(
        GreedyUploader(skill=SkillProfile(accuracy=0.8)),
        days=60,
        seed=7,
    ).run()
    print(format_text_report(report))
    print()

    for config in (StudioConfig(), define_config()):
        for factory in (GreedyUploader, SaveForBest):
            summary = run_monte_carlo(factory, days=90, runs=20, config=config, seed=1)
            print(f"--- {config.name} / {factory.__name__}")
            print(format_monte_carlo(summary))
            print()


if __name__ == "__main__":
    main()
