"""florist: compose bouquets online from a design catalog and arriving stems."""

from .stems import Size, Stem
from .designs import Design, RequirementOrder, StemRequirement
from .bouquet import Bouquet, StemCount
from .catalog import DesignCatalog
from .ledger import SupplyLedger
from .composer import BouquetComposer, try_extract
from .errors import FormatError, RangeError, RecordError
from .records import iter_stems, load_catalog, parse_design, parse_stem, read_section
from .result import Ok, Err, RecordResult, Result

__all__ = [
    # Values
    "Size", "Stem", "Design", "RequirementOrder", "StemRequirement",
    "Bouquet", "StemCount",
    # State
    "DesignCatalog", "SupplyLedger",
    # Composition
    "BouquetComposer", "try_extract",
    # Errors
    "FormatError", "RangeError", "RecordError",
    # Records
    "iter_stems", "load_catalog", "parse_design", "parse_stem", "read_section",
    # Result
    "Ok", "Err", "RecordResult", "Result",
]
