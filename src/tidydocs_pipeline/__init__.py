"""tidydocs_pipeline package.

Contains the cleaning pipeline behind the CSV report tool: tokenizing raw CSV
text, repairing ragged rows, normalizing dates, currency and yes/no fields,
and enforcing that every output row carries a date and a description.

Architecture:
- Ingest → Clean → Aggregate stages, threaded with an immutable stats value
- Dask is used to clean many files side by side
- Pydantic models describe records, datasets and statistics
"""

from tidydocs_pipeline.pipeline import clean_csv_text

__all__ = ["__version__", "clean_csv_text"]
__version__ = "0.1.0"
