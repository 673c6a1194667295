"""Domain models for clash and contact results."""

from dataclasses import dataclass

from ..exceptions import EmptyInputError

NOT_COMPUTED = -1


@dataclass(frozen=True)
class IntersectionResult:
    """Protein atoms found in ligand-occupied cells and the implied volume."""

    overlap_atom_count: int
    volume: float


@dataclass(frozen=True)
class ContactResult:
    """Counts from the protein-ligand contact pass."""

    contacts: int
    hbonds: int
    vdw: int


@dataclass(frozen=True)
class AnalysisResult:
    """Contains the scores of one analyzed structure."""

    ligand_atom_count: int
    intersection: IntersectionResult
    contacts: int = NOT_COMPUTED
    hbonds: int = NOT_COMPUTED
    vdw: int = NOT_COMPUTED

    @property
    def intersection_volume(self) -> float:
        return self.intersection.volume

    @property
    def contacts_computed(self) -> bool:
        return self.contacts != NOT_COMPUTED

    def per_ligand_atom(self, value: float) -> float:
        """Normalize ``value`` by the ligand atom count."""
        if self.ligand_atom_count <= 0:
            raise EmptyInputError("Ligand atom count is zero")
        return value / self.ligand_atom_count

    @property
    def intersection_ratio(self) -> float:
        return self.per_ligand_atom(self.intersection.volume)

    @property
    def contacts_ratio(self) -> float:
        return self.per_ligand_atom(self.contacts)

    @property
    def hbonds_ratio(self) -> float:
        return self.per_ligand_atom(self.hbonds)

    @property
    def vdw_ratio(self) -> float:
        return self.per_ligand_atom(self.vdw)
