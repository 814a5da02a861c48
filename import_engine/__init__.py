"""
import_engine - Legacy export import pipeline.

Public API:
    run_import(import_data, app_id, account_id) → ImportReport
    decode_bag(raw) → ImportBag
"""

from import_engine.importer import run_import        # noqa: F401
from import_engine.bag import decode_bag, BagError   # noqa: F401
from import_engine.report import ImportReport        # noqa: F401
