"""No-limit hold'em game state and transitions, hand bucketing by equity,
density functions and EV-based move selectors."""

__version__ = "0.1.0"