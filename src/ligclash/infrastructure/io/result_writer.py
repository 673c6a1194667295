"""Appends analysis results to a shared tab-separated file."""

import os

from ...core.domain.models.clash_result import AnalysisResult


def format_result_row(comment: str, result: AnalysisResult) -> list:
    """Fields of one result line: each count followed by its per-atom ratio."""
    return [
        comment,
        result.ligand_atom_count,
        f"{result.intersection_volume:.3f}",
        f"{result.intersection_ratio:.3f}",
        result.contacts,
        f"{result.contacts_ratio:.3f}",
        result.hbonds,
        f"{result.hbonds_ratio:.3f}",
        result.vdw,
        f"{result.vdw_ratio:.3f}",
    ]


class ResultWriter:
    """Appends one line per analyzed structure."""

    def __init__(self, path: str):
        self.path = path

    def append(self, comment: str, result: AnalysisResult) -> None:
        """
        Append the result line for one structure.

        The comment is written verbatim, so tabs inside it add columns.

        Args:
            comment: Free-text label written in the first column
            result: Scores of the structure
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        row = format_result_row(comment.rstrip("\r\n"), result)
        with open(self.path, "a") as f:
            f.write("\t".join(str(field) for field in row) + "\n")
