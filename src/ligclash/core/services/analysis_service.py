"""Service scoring the interaction of one protein-ligand structure."""

import logging
from typing import Optional

from ..config import AnalysisConfig
from ..domain.exceptions import EmptyInputError
from ..domain.models.atom import AtomSet
from ..domain.models.clash_result import AnalysisResult
from .clash_service import ClashService
from .contact_service import ContactService

logger = logging.getLogger(__name__)


class InteractionAnalysisService:
    """
    Runs the clash estimate and, for plausible poses, the contact pass.

    Poses whose intersection volume per ligand atom reaches
    ``config.clash_gate`` are reported without contact counts.
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        clash_service: Optional[ClashService] = None,
        contact_service: Optional[ContactService] = None,
    ):
        self._config = config or AnalysisConfig()
        self._clash_service = clash_service or ClashService(
            step=self._config.step, max_grid_cells=self._config.max_grid_cells
        )
        self._contact_service = contact_service or ContactService(
            cutoff=self._config.cutoff,
            consume_failed_candidates=self._config.consume_failed_candidates,
        )

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def analyze(self, atom_set: AtomSet) -> AnalysisResult:
        """
        Score one structure.

        Args:
            atom_set: Ligand and protein atoms of the structure

        Returns:
            AnalysisResult; contact counts are NOT_COMPUTED for gated poses

        Raises:
            EmptyInputError: If the structure has no ligand atoms
        """
        ligand_count = atom_set.ligand_atom_count
        if ligand_count == 0:
            raise EmptyInputError("Structure has no ligand atoms")

        box, grid = self._clash_service.index_ligand(atom_set.ligand_atoms)
        intersection = self._clash_service.detect_clashes(
            atom_set.protein_atoms, grid, box
        )
        logger.info(
            "Intersection: %d protein atoms, volume %.3f",
            intersection.overlap_atom_count,
            intersection.volume,
        )

        if intersection.volume / ligand_count >= self._config.clash_gate:
            logger.info(
                "Skipping contacts: %.3f intersection per ligand atom >= %.3f",
                intersection.volume / ligand_count,
                self._config.clash_gate,
            )
            return AnalysisResult(ligand_atom_count=ligand_count, intersection=intersection)

        contacts = self._contact_service.count_contacts(
            atom_set.protein_atoms, atom_set.ligand_atoms, box
        )
        logger.info(
            "Contacts: %d, H-bonds: %d, VdW: %d",
            contacts.contacts,
            contacts.hbonds,
            contacts.vdw,
        )
        return AnalysisResult(
            ligand_atom_count=ligand_count,
            intersection=intersection,
            contacts=contacts.contacts,
            hbonds=contacts.hbonds,
            vdw=contacts.vdw,
        )
