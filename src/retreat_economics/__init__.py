"""Retreat economics — team payouts, platform fee and host profit."""
