"""Configuration, logging and timezone helpers."""
