import pytest

from ligclash.core.domain.models.atom import AtomRecord


def _pdb_line(
    record, serial, name, resname, chain, resseq, x, y, z, element, altloc=" ", occupancy=1.0
):
    """Format one fixed-column ATOM/HETATM record."""
    return (
        f"{record:<6}{serial:>5} {name:<4}{altloc}{resname:>3} {chain}{resseq:>4}    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}{occupancy:6.2f}{0.0:6.2f}          {element:>2}\n"
    )


@pytest.fixture
def pdb_line():
    return _pdb_line


@pytest.fixture
def make_atom():
    """Factory for AtomRecord instances."""

    def factory(element, x=0.0, y=0.0, z=0.0, name=None, residue="LIG", chain="B", serial=0):
        return AtomRecord(
            coordinates=(x, y, z),
            element=element,
            atom_name=name if name is not None else f" {element:<3}",
            residue_name=residue,
            chain_id=chain,
            serial=serial,
        )

    return factory
