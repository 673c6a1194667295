import logging
import random

import numpy as np
import pytest

from ligclash.core.domain.exceptions import EmptyInputError
from ligclash.core.domain.implementations.atom_type_classifier import (
    C_O_2,
    CO_CARB,
    GeometricAtomTypeClassifier,
    classify_ligand_atoms,
)
from ligclash.core.domain.models.atom_type import AtomType


def test_carbons_are_never_polar(make_atom):
    ligand = [make_atom("C"), make_atom("C", 1.54, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand) == [AtomType.NONE, AtomType.NONE]


@pytest.mark.parametrize(
    "bond_length, expected",
    [(C_O_2, AtomType.DONOR), (CO_CARB, AtomType.ACCEPTOR), (1.43, AtomType.DONOR), (1.21, AtomType.ACCEPTOR)],
)
def test_oxygen_bonded_to_carbon(make_atom, bond_length, expected):
    ligand = [make_atom("O"), make_atom("C", bond_length, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand)[0] is expected


@pytest.mark.parametrize(
    "bond_length, expected",
    [(1.396, AtomType.DONOR), (1.239, AtomType.ACCEPTOR)],
)
def test_oxygen_bonded_to_nitrogen(make_atom, bond_length, expected):
    ligand = [make_atom("O"), make_atom("N", bond_length, 0.0, 0.0)]
    types = classify_ligand_atoms(ligand)
    assert types[0] is expected
    # a nitrogen whose only neighbor is an oxygen does not H-bond
    assert types[1] is AtomType.NONE


def test_phosphate_oxygen_is_acceptor(make_atom):
    ligand = [make_atom("O"), make_atom("P", 1.52, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand)[0] is AtomType.ACCEPTOR


def test_peroxide_oxygens(make_atom):
    ligand = [make_atom("O"), make_atom("O", 1.47, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand) == [AtomType.NONE, AtomType.NONE]


def test_ether_oxygen_is_saturated(make_atom):
    ligand = [
        make_atom("O"),
        make_atom("C", 1.43, 0.0, 0.0),
        make_atom("C", -1.43, 0.0, 0.0),
    ]
    assert classify_ligand_atoms(ligand)[0] is AtomType.NONE


def test_hydroxyl_with_explicit_hydrogen(make_atom):
    ligand = [
        make_atom("O"),
        make_atom("C", 1.43, 0.0, 0.0),
        make_atom("H", 0.0, 0.96, 0.0),
    ]
    # hydrogen neighbours are outside the recognised set of bonded elements
    assert classify_ligand_atoms(ligand)[0] is AtomType.NONE


def test_tertiary_amine_is_saturated(make_atom):
    ligand = [
        make_atom("N"),
        make_atom("C", 1.47, 0.0, 0.0),
        make_atom("C", -0.74, 1.27, 0.0),
        make_atom("C", -0.74, -1.27, 0.0),
    ]
    assert classify_ligand_atoms(ligand)[0] is AtomType.NONE


def test_two_coordinate_nitrogen_is_both(make_atom):
    ligand = [
        make_atom("N"),
        make_atom("C", 1.34, 0.0, 0.0),
        make_atom("C", -0.67, 1.16, 0.0),
    ]
    assert classify_ligand_atoms(ligand)[0] is AtomType.BOTH


@pytest.mark.parametrize(
    "bond_length, expected",
    [(1.482, AtomType.DONOR), (1.52, AtomType.DONOR), (1.474, AtomType.BOTH), (1.30, AtomType.BOTH)],
)
def test_nitrogen_bonded_to_carbon(make_atom, bond_length, expected):
    ligand = [make_atom("N"), make_atom("C", bond_length, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand)[0] is expected


def test_hydrazine_nitrogens(make_atom):
    ligand = [make_atom("N"), make_atom("N", 1.45, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand) == [AtomType.NONE, AtomType.NONE]


@pytest.mark.parametrize("element", ["F", "Cl", "Br", "I"])
def test_halide_atoms_are_not_polar(make_atom, element):
    ligand = [make_atom("C"), make_atom(element, 1.75, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand)[1] is AtomType.NONE


@pytest.mark.parametrize("polar, halide", [("N", "F"), ("O", "Cl"), ("N", "Br")])
def test_halide_neighbor_makes_acceptor(make_atom, caplog, polar, halide):
    ligand = [make_atom(polar), make_atom(halide, 1.4, 0.0, 0.0)]
    with caplog.at_level(logging.WARNING):
        types = classify_ligand_atoms(ligand)
    assert types == [AtomType.ACCEPTOR, AtomType.NONE]
    assert "Unexpected neighborhood" not in caplog.text


def test_atypical_neighbor(make_atom):
    ligand = [make_atom("O"), make_atom("S", 1.6, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand)[0] is AtomType.NONE


def test_other_elements_are_none(make_atom):
    ligand = [make_atom("S"), make_atom("C", 1.8, 0.0, 0.0), make_atom("ZN", 4.0, 0.0, 0.0)]
    assert classify_ligand_atoms(ligand) == [AtomType.NONE] * 3


def test_isolated_atom_is_logged(make_atom, caplog):
    ligand = [make_atom("N", serial=7), make_atom("C", 5.0, 0.0, 0.0)]
    with caplog.at_level(logging.WARNING):
        types = classify_ligand_atoms(ligand)
    assert types[0] is AtomType.NONE
    assert "Isolated atom" in caplog.text


def test_too_many_bonds_is_logged(make_atom, caplog):
    ligand = [
        make_atom("N"),
        make_atom("C", 1.5, 0.0, 0.0),
        make_atom("C", -1.5, 0.0, 0.0),
        make_atom("C", 0.0, 1.5, 0.0),
        make_atom("C", 0.0, -1.5, 0.0),
    ]
    with caplog.at_level(logging.WARNING):
        types = classify_ligand_atoms(ligand)
    assert "Too many bonds" in caplog.text
    assert types[0] is AtomType.NONE


def test_neighborhood_keeps_nearest_three(make_atom):
    ligand = [
        make_atom("N"),
        make_atom("C", 1.7, 0.0, 0.0),
        make_atom("C", -1.4, 0.0, 0.0),
        make_atom("H", 0.0, 1.0, 0.0),
        make_atom("C", 0.0, -1.5, 0.0),
    ]
    classifier = GeometricAtomTypeClassifier()
    coords = np.array([atom.coordinates for atom in ligand])
    distances = np.linalg.norm(coords - coords[0], axis=1)
    hood = classifier.neighborhood(0, ligand, distances)
    assert [symbol for symbol, _ in hood.bonds] == ["H", "C", "C"]
    assert hood.contains_hydrogen
    assert hood.excess_bonds == 1


def test_classification_is_order_independent(make_atom):
    ligand = [
        make_atom("C", 0.0, 0.0, 0.0, serial=1),
        make_atom("C", 1.52, 0.0, 0.0, serial=2),
        make_atom("O", 2.04, 1.33, 0.0, serial=3),
        make_atom("O", 2.20, -1.05, 0.0, serial=4),
        make_atom("N", -0.72, 1.25, 0.0, serial=5),
        make_atom("Cl", -0.90, -1.50, 0.30, serial=6),
        make_atom("N", 6.0, 6.0, 6.0, serial=7),
    ]
    reference = dict(zip(ligand, classify_ligand_atoms(ligand)))

    rng = random.Random(1234)
    for _ in range(5):
        shuffled = ligand[:]
        rng.shuffle(shuffled)
        for atom, atom_type in zip(shuffled, classify_ligand_atoms(shuffled)):
            assert reference[atom] is atom_type


def test_empty_ligand():
    with pytest.raises(EmptyInputError):
        classify_ligand_atoms([])
