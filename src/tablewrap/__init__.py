"""tablewrap: fit table cells into a width budget by wrapping their content."""

# Style segmentation
from tablewrap.ansi import Span, StyleTracker, extract_hyperlink, segment

# Configuration
from tablewrap.config import TableConfig

# Targets
from tablewrap.entity import Cell, Column, Global, Row

# Width measurements
from tablewrap.measurement import Max, Measurement, Min, Percent

# Column priority policies
from tablewrap.peaker import Peaker, PriorityMax, PriorityMin, PriorityNone

# Table store
from tablewrap.table import Table

# Utilities
from tablewrap.text import multiline_width, visible_width

# Wrapping
from tablewrap.wrap import Wrap, wrap_text

__all__ = [
    # Style segmentation
    "Span",
    "StyleTracker",
    "extract_hyperlink",
    "segment",
    # Configuration
    "TableConfig",
    # Targets
    "Cell",
    "Column",
    "Global",
    "Row",
    # Width measurements
    "Max",
    "Measurement",
    "Min",
    "Percent",
    # Column priority policies
    "Peaker",
    "PriorityMax",
    "PriorityMin",
    "PriorityNone",
    # Table store
    "Table",
    # Utilities
    "multiline_width",
    "visible_width",
    # Wrapping
    "Wrap",
    "wrap_text",
]
