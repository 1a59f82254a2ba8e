"""Diagnostics package.

- round_trip, pretty_year: always available, pure Python
- long_years: requires the diagnostics extras (numpy, matplotlib for --out)
"""

__all__ = ["round_trip", "long_years", "pretty_year"]
