"""Configuration, session context and telemetry."""
