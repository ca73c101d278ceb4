"""Configuration loading and derived settings for Metanote."""
