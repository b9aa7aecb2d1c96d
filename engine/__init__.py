"""Headless orchestration of scouting, signing and matches over an EconomyState."""
