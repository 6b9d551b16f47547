"""
Domain package for the Debug Logging Benchmark.

Exports the record model and the synthetic dataset generator.
Keep this package focused on data definitions.
"""

from debuglog_bench.domain.generator import generate_records
from debuglog_bench.domain.models import Record

__all__ = [
    "Record",
    "generate_records",
]
