"""Monkey in the Middle: a round-robin item-passing simulation."""
