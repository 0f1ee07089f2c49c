"""Application state and the ports handlers depend on."""
