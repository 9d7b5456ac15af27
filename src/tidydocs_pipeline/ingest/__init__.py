"""Ingest helpers: reading CSV files as text and tokenizing them into rows."""
