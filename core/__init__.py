"""League domain core: pure models and rules, no UI and no network."""

API_VERSION = "core-v1-20261019"
