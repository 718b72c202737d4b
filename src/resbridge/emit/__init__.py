"""Output emitters for Apple resources and CSV reports.

Python 3.13+.
"""

from .apple import ResourceEmitter
from .files import encode_with_bom, write_output
from .report import CsvEmitter

__all__ = ["CsvEmitter", "ResourceEmitter", "encode_with_bom", "write_output"]
