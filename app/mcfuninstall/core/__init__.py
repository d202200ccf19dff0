"""Core configuration, paths and scan orchestration."""
