"""The UCD files the titlecase table is assembled from, in merge order."""
import importlib

import pandas as pd

SOURCES = ("special_casing", "unicode_data")


def load_source(name: str, **kwargs) -> pd.DataFrame:
    """Load one UCD file by adapter name, passing kwargs to its load() function.

    Only the adapters in SOURCES feed the table; anything else is rejected.
    """
    if name not in SOURCES:
        raise ValueError(f"Unknown UCD source {name!r}, expected one of {SOURCES}")
    module = importlib.import_module(f"ucd_titlecase.sources.{name}")
    return module.load(**kwargs)
