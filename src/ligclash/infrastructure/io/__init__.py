from .pdb_reader import PDBAtomReader
from .result_writer import ResultWriter, format_result_row

__all__ = ["PDBAtomReader", "ResultWriter", "format_result_row"]
