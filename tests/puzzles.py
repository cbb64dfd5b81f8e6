"""Shared puzzle fixtures for the test suite."""

SCENARIO_A = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)

SCENARIO_A_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

EMPTY = "." * 81

DEMO = "5286...4913649..257942.563....1..2....78263....25.9.6.24.3..9768.97.2413.7.9.4582"

# Saturation alone leaves cells open; Singles finishes it.
HARD_SINGLES = (
    ".2.6.8..."
    "58...97.."
    "....4...."
    "37....5.."
    "6.......4"
    "..8....13"
    "....2...."
    "..98...36"
    "...3.6.9."
)
