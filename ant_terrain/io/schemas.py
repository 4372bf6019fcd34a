"""Parquet schema for the exported cell table.

Kept in one place so the exporter and any downstream reader work against the
same column contract.
"""

from __future__ import annotations

import pyarrow as pa

GRID_SCHEMA_VERSION = 1

GRID_CELL_SCHEMA = pa.schema(
    [
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("tile", pa.string()),
        ("color", pa.string()),
        ("inner_color", pa.string()),
    ],
    metadata={"grid_schema_version": str(GRID_SCHEMA_VERSION)},
)
