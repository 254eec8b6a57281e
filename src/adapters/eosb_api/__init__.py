"""Remote EOSB API adapters - HTTP implementations."""

from .http import HttpEosbApi

__all__ = ["HttpEosbApi"]
