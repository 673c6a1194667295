# src/ligclash/presentation/cli/score_structures.py
"""Command-line interface for protein-ligand clash and contact scoring."""

import argparse
import logging
import sys
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, NamedTuple, Optional

from Bio.PDB.PDBExceptions import PDBConstructionException
from tqdm import tqdm

from ...core.config import DEFAULT_CLASH_GATE, AnalysisConfig
from ...core.domain.exceptions import LigclashError
from ...core.domain.models.clash_result import AnalysisResult
from ...core.domain.models.voxel_grid import DEFAULT_MAX_GRID_CELLS
from ...core.services.analysis_service import InteractionAnalysisService
from ...core.utils.benchmarking import Timer
from ...infrastructure.io.pdb_reader import DEFAULT_LIGAND_CHAIN, PDBAtomReader
from ...infrastructure.io.result_writer import ResultWriter

logger = logging.getLogger(__name__)


class ScoringTask(NamedTuple):
    structure: str
    comment: str
    ligand_chain: str
    config: AnalysisConfig


class ScoringOutcome(NamedTuple):
    task: ScoringTask
    result: Optional[AnalysisResult]
    error: Optional[str]
    elapsed: float


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Score steric clashes, contacts, H-bonds and VdW contacts "
        "between a protein and a bound ligand"
    )
    parser.add_argument("structures", nargs="+", help="PDB files to score")
    parser.add_argument(
        "--step", type=float, required=True, help="Voxel grid step in Angstrom"
    )
    parser.add_argument(
        "--cutoff", type=float, required=True, help="Contact distance cutoff in Angstrom"
    )
    parser.add_argument(
        "-o", "--output", required=True, help="Tab-separated results file to append to"
    )
    comment = parser.add_mutually_exclusive_group()
    comment.add_argument("--comment", help="Label for the result line(s)")
    comment.add_argument(
        "--comment-file", help="File whose first line labels the result line(s)"
    )
    parser.add_argument(
        "--ligand-chain",
        default=DEFAULT_LIGAND_CHAIN,
        help="Chain holding the ligand (default: %(default)s)",
    )
    parser.add_argument(
        "--max-grid-cells",
        type=int,
        default=DEFAULT_MAX_GRID_CELLS,
        help="Largest voxel grid to allocate (default: %(default)s)",
    )
    parser.add_argument(
        "--clash-gate",
        type=float,
        default=DEFAULT_CLASH_GATE,
        help="Intersection per ligand atom above which contacts are skipped "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "--legacy-pairing",
        action="store_true",
        help="Retire atoms after any H-bond candidate, as older releases did",
    )
    parser.add_argument(
        "--write-all",
        action="store_true",
        help="Also write structures without any intersection or contact",
    )
    parser.add_argument(
        "-j", "--jobs", type=int, default=1, help="Number of worker processes"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show detailed processing information"
    )
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def read_comment(comment_file: str) -> str:
    """First line of ``comment_file`` without the line break."""
    with open(comment_file, "r") as f:
        return f.readline().rstrip("\r\n")


def score_structure(task: ScoringTask) -> ScoringOutcome:
    """Read and score one structure; failures are reported, not raised."""
    with Timer() as timer:
        try:
            atom_set = PDBAtomReader(ligand_chain=task.ligand_chain).read(task.structure)
            result = InteractionAnalysisService(task.config).analyze(atom_set)
            error = None
        except (LigclashError, PDBConstructionException, ValueError, OSError) as e:
            result = None
            error = str(e)
    return ScoringOutcome(task=task, result=result, error=error, elapsed=timer.elapsed())


def should_write(result: AnalysisResult, write_all: bool = False) -> bool:
    """Results without overlap or contacts are skipped unless ``write_all``."""
    return write_all or result.intersection_volume > 0 or result.contacts > 0


def run(tasks: List[ScoringTask], jobs: int = 1) -> List[ScoringOutcome]:
    """Score tasks, in worker processes when ``jobs > 1``, keeping input order."""
    if jobs <= 1 or len(tasks) <= 1:
        return [
            score_structure(task)
            for task in tqdm(tasks, desc="Scoring", disable=len(tasks) <= 1)
        ]

    with ProcessPoolExecutor(max_workers=jobs) as executor:
        return list(
            tqdm(executor.map(score_structure, tasks), total=len(tasks), desc="Scoring")
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scoring CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = AnalysisConfig(
            step=args.step,
            cutoff=args.cutoff,
            max_grid_cells=args.max_grid_cells,
            clash_gate=args.clash_gate,
            consume_failed_candidates=args.legacy_pairing,
        )
    except LigclashError as e:
        parser.error(str(e))

    shared_comment = args.comment
    if args.comment_file:
        shared_comment = read_comment(args.comment_file)

    tasks = [
        ScoringTask(
            structure=structure,
            comment=shared_comment if shared_comment is not None else Path(structure).stem,
            ligand_chain=args.ligand_chain,
            config=config,
        )
        for structure in args.structures
    ]

    writer = ResultWriter(args.output)
    failures = 0
    for outcome in run(tasks, jobs=args.jobs):
        if outcome.error is not None:
            failures += 1
            logger.error("Failed to score %s: %s", outcome.task.structure, outcome.error)
            continue
        logger.info("Time elapsed for %s: %.3f s", outcome.task.structure, outcome.elapsed)
        if should_write(outcome.result, args.write_all):
            writer.append(outcome.task.comment, outcome.result)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
