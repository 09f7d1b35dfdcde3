"""Command line interface for pytomboy."""
