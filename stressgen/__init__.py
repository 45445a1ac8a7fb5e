"""
Stress query generator (stressgen) package.

This package turns a stress.json description of weighted queries, query
groups and parameter pools into a frequency-weighted distribution that can be
sampled repeatedly to produce ready-to-execute SQL for a load-generation run.
"""

__all__ = [
    "conf",
    "templates",
    "sampler",
    "emit",
    "cli",
]
