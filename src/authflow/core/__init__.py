"""Configuration and runtime wiring."""
