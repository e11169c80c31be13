"""Configuration for the PPh21 calculator."""
