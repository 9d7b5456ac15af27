"""Cleaning stages for the pipeline.

Provides column-role resolution, the repair pass for ragged rows, field
normalization (dates, currency, yes/no flags) and the final completeness
filter that produces the output Dataset.
"""
