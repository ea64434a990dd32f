"""Utility functions for tango application."""

import random


def normalize_key(text) -> str:
    """Trim and case-fold text for identity and answer comparisons."""
    if text is None:
        return ''
    return str(text).strip().lower()


def shuffle(items: list, rng: random.Random = None) -> list:
    """Shuffle a list in place and return it."""
    (rng or random).shuffle(items)
    return items


def sample(items: list, rng: random.Random = None):
    """Pick one element uniformly at random."""
    return (rng or random).choice(items)
