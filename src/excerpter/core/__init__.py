"""Core library for Excerpter: directive parsing, region weaving, config."""
