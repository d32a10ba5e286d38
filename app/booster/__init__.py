"""Booster program scheduling core: catalog, week windows, schedules and transitions."""
