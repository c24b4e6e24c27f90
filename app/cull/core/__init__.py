"""Core infrastructure for cull: configuration, logging, paths and theme."""
