"""Bag seeding for configured games.

The config's ``seed`` is mixed with the game name through HMAC-SHA256, so
two games sharing a seed but not a name still shuffle their bags
differently, and renaming one game never changes another's deal.
"""

import hashlib
import hmac
import random


def bag_seed(seed: int, game_name: str) -> int:
    """Seed for the tile bag of ``game_name``. Same inputs, same seed."""
    key = seed.to_bytes(8, byteorder="big", signed=True)
    digest = hmac.new(key, game_name.encode("utf-8"), hashlib.sha256).digest()
    return int.from_bytes(digest[:8], byteorder="big")


def bag_rng(seed: int, game_name: str) -> random.Random:
    """Private Random for one game's bag. Never touches global state."""
    return random.Random(bag_seed(seed, game_name))
