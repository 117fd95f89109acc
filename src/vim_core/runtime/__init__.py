"""Runtime services (logging, telemetry)."""
