"""
WaVer: daily household water-usage tracker.

Each confirmed day is appended to a comma-delimited log; summaries and
high-usage checks always replay the full log.
"""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console

from quwatro.aggregator import Summary, summarize
from quwatro.apps.base import AbstractMenuApp, LineReader, MenuAction
from quwatro.config import Settings
from quwatro.domain.models import USAGE_ORDER, UsageCategory, WaterUsage
from quwatro.domain.validation import WATER_USAGE_FIELDS
from quwatro.errors import LogNotFound
from quwatro.infrastructure.codecs import WaterUsageCodec
from quwatro.infrastructure.log_files import DelimitedLog
from quwatro.reporter import print_high_usage_days, print_usage_summary, print_water_usage
from quwatro.utils.logging import get_logger

log = get_logger(__name__)

USAGE_PROMPTS = {
    UsageCategory.SHOWER: "Enter shower water usage (liters): ",
    UsageCategory.LAUNDRY: "Enter laundry water usage (liters): ",
    UsageCategory.DISHWASHING: "Enter dishwashing water usage (liters): ",
    UsageCategory.TOILET: "Enter toilet water usage (liters): ",
    UsageCategory.IRRIGATION: "Enter irrigation/gardening water usage (liters): ",
}

WATER_SAVING_TIPS = (
    "Fix leaks promptly.",
    "Take shorter showers.",
    "Use low-flow faucets.",
    "Run full loads for laundry and dishes.",
    "Water plants early to reduce evaporation.",
    "Reuse rainwater for irrigation.",
    "Turn off taps while brushing.",
    "Sweep instead of hosing outdoor areas.",
)


def build_usage_log(settings: Settings) -> DelimitedLog[WaterUsage]:
    return DelimitedLog(settings.water_log_path, WaterUsageCodec())


class WaVerApp(AbstractMenuApp):
    name = "waver"
    title = "WaVer - Smart Water Usage Tracker"

    def __init__(
        self,
        settings: Settings,
        read_line: LineReader,
        console: Console,
        usage_log: Optional[DelimitedLog[WaterUsage]] = None,
    ) -> None:
        super().__init__(read_line, console)
        self.threshold = settings.high_usage_threshold
        self.usage_log = usage_log if usage_log is not None else build_usage_log(settings)

    def actions(self) -> List[MenuAction]:
        return [
            MenuAction("Log Daily Water Usage", self.log_daily_usage),
            MenuAction("View Usage Summary", self.view_usage_summary),
            MenuAction("Check for High Usage Days", self.check_high_usage),
            MenuAction("View Water-Saving Tips", self.show_tips),
        ]

    def log_daily_usage(self) -> None:
        date = self.ask(WATER_USAGE_FIELDS, "date", "\nEnter today's date (YYYY-MM-DD): ")
        liters = [
            self.ask_until_valid(WATER_USAGE_FIELDS, "liters", USAGE_PROMPTS[category])
            for category in USAGE_ORDER
        ]
        usage = WaterUsage.from_liters(date, liters)
        print_water_usage(self.console, usage)

        if not self.confirm("Is this information correct? (y/n): "):
            self.console.print("Data not saved. Please re-enter if needed.")
            return

        self.usage_log.append(usage)
        log.info("Water usage logged", extra={"date": usage.date, "total": usage.total})
        self.console.print("[green]Data saved successfully![/green]")
        self.console.print(f"Total usage today: {usage.total:,.2f} liters")
        if usage.total > self.threshold:
            self.console.print("[bold red]Warning: High water usage detected![/bold red]")
            self.show_tips()

    def replay_summary(self) -> Summary[WaterUsage]:
        """Summary over the full log; raises LogNotFound before anything is logged."""
        return summarize(self.usage_log.read_all(), value=lambda u: u.total, threshold=self.threshold)

    def view_usage_summary(self) -> None:
        try:
            usages = list(self.usage_log.read_all())
        except LogNotFound:
            self.console.print("No usage data found.")
            return
        self.console.print("\n=== Water Usage Summary ===")
        for usage in usages:
            print_water_usage(self.console, usage)
        summary = summarize(usages, value=lambda u: u.total, threshold=self.threshold)
        print_usage_summary(self.console, summary)

    def check_high_usage(self) -> None:
        try:
            summary = self.replay_summary()
        except LogNotFound:
            self.console.print("No usage data found.")
            return
        self.console.print("\n=== High Usage Analysis ===")
        print_high_usage_days(self.console, summary)

    def show_tips(self) -> None:
        self.console.print("\n=== Water-Saving Tips ===")
        for number, tip in enumerate(WATER_SAVING_TIPS, start=1):
            self.console.print(f"{number}. {tip}")


__all__ = ["WaVerApp", "build_usage_log", "WATER_SAVING_TIPS"]
