"""Terminal teaching apps: scheduling, calendar, calculator, file tools, games, a task table and shared RAM accounting."""

__version__ = "0.1.0"