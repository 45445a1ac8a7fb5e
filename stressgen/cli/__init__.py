"""Command line interface for stressgen."""
