"""Application-level facade between the CLI and the runner."""
