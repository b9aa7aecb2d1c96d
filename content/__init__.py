"""Boundary with the generation collaborator: contracts, parsing, prompts, providers."""
