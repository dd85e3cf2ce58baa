"""Command-line interface for GRASP."""
