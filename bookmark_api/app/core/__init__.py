"""Cross‑cutting pieces: configuration, logging, errors and locking."""
