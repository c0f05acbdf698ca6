"""Line sheet ingestion and view-model library.

Building blocks:
- ingest.reader: CSV -> RawRow (normalized header keys)
- services.coercion: RawRow -> LineSheetRecord per schema variant
- services.metrics: margin for the internal variant
- services.filtering / services.pagination: view slicing
- services.view_model: state container wiring the above together
"""

__version__ = "0.1.0"
