"""Database operations module.

Operations run the SQL produced by the query builder through an
executor:

    - sequences.py: Sequence lifecycle and next values
    - inserts.py: INSERT with sequence prefetch
    - lob.py: Post-save LOB content writes
    - adapter.py: OracleAdapter tying everything to an executor
"""

from orasql.operations.adapter import OracleAdapter
from orasql.operations.inserts import InsertExecutor, extract_table_ref_from_insert_sql
from orasql.operations.lob import LobWriter
from orasql.operations.sequences import SequenceManager

__all__ = [
    "OracleAdapter",
    "InsertExecutor",
    "extract_table_ref_from_insert_sql",
    "LobWriter",
    "SequenceManager",
]
