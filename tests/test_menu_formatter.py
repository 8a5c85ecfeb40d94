"""
Menu formatter tests: section layout, ordering, empty sections, breakfast.
"""

import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from menutext.menu_formatter import BREAKFAST_PERIODS, format_item, format_menu
from menutext.menu_types import MealPeriod, MenuItem


def _item(name, price, meal=MealPeriod.LUNCH, desc="desc"):
    return MenuItem(name=name, description=desc, price=Decimal(price), meal=meal)


class TestFormatMenu:

    def test_two_lunch_no_dinner(self):
        items = [_item("Wings", "9.50", desc="hot"), _item("Wrap", "7.25", desc="caesar")]
        assert format_menu(items) == (
            "### Lunch\n\n"
            "## Wings (9.50)\nhot\n\n"
            "## Wrap (7.25)\ncaesar\n\n"
            "### Dinner\n\n"
        )

    def test_empty(self):
        assert format_menu([]) == "### Lunch\n\n### Dinner\n\n"

    def test_partition_keeps_relative_order(self):
        items = [
            _item("A", "1.00"),
            _item("X", "10.00", MealPeriod.DINNER),
            _item("B", "2.00"),
            _item("Y", "11.00", MealPeriod.DINNER),
        ]
        out = format_menu(items)
        lunch, dinner = out.split("### Dinner\n\n")
        assert lunch.index("## A") < lunch.index("## B")
        assert dinner.index("## X") < dinner.index("## Y")
        assert "## X" not in lunch

    def test_format_item(self):
        assert format_item(_item("Steak Frites", "22.00", desc="")) == "## Steak Frites (22.00)\n\n\n"

    def test_breakfast_section(self):
        items = [_item("Omelet", "6.00", MealPeriod.BREAKFAST), _item("Wings", "9.50")]
        out = format_menu(items, BREAKFAST_PERIODS)
        assert out.startswith("### Breakfast\n\n## Omelet (6.00)\n")
        assert out.index("### Lunch") < out.index("### Dinner")

    def test_breakfast_items_hidden_without_section(self):
        out = format_menu([_item("Omelet", "6.00", MealPeriod.BREAKFAST)])
        assert "Omelet" not in out
