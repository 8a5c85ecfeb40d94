# menutext/menu_formatter.py
"""
Menu Formatter: renders parsed items as sectioned blog text:

    ### Lunch

    ## Buffalo Wings (9.50)
    Served with ranch

    ### Dinner

Sections keep the parser's item order; an empty section is just its heading.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from menutext.menu_types import MealPeriod, MenuItem

DEFAULT_PERIODS = (MealPeriod.LUNCH, MealPeriod.DINNER)
BREAKFAST_PERIODS = (MealPeriod.BREAKFAST, MealPeriod.LUNCH, MealPeriod.DINNER)


def format_item(item: MenuItem) -> str:
    return f"## {item.name} ({item.price})\n{item.description}\n\n"


def format_section(heading: str, items: Iterable[MenuItem]) -> str:
    return f"### {heading}\n\n" + "".join(format_item(it) for it in items)


def format_menu(items: Iterable[MenuItem],
                periods: Sequence[MealPeriod] = DEFAULT_PERIODS) -> str:
    items_list: List[MenuItem] = list(items)
    return "".join(
        format_section(meal.heading, [it for it in items_list if it.meal == meal])
        for meal in periods
    )
