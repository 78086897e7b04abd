"""Tests for XYZ serialization."""

import io

from xyzcheck.domain.models import Atom, Molecule
from xyzcheck.io.xyz_reader import parse_xyz, XYZReader
from xyzcheck.io.xyz_writer import XYZWriter, format_xyz

ETHYNE = Molecule((
    Atom("C", 0.0, 0.0, 0.6013),
    Atom("C", 0.0, 0.0, -0.6013),
    Atom("H", 0.0, 0.0, 1.6644),
    Atom("H", 0.0, 0.0, -1.6644),
))


def test_format_layout():
    text = format_xyz(Molecule((Atom("O", 0.0, 1.5, -2.0),)), comment="oxygen")
    assert text == "1\noxygen\nO 0.0 1.5 -2.0\n"


def test_round_trip_is_exact():
    molecule = Molecule((
        Atom("X1", 0.1 + 0.2, -1e-12, 6.02214076e23),
        Atom("Fe", 1 / 3, 2.5e-300, -0.0),
    ))
    assert parse_xyz(format_xyz(molecule)) == molecule


def test_round_trip_of_parsed_file():
    text = "2\nWater\nO\t0.0 0.0 0.0  extra\nH 9.6e-1 0 0\n"
    molecule = parse_xyz(text)
    assert parse_xyz(format_xyz(molecule, "Water")) == molecule


def test_empty_molecule():
    assert format_xyz(Molecule()) == "0\n\n"
    assert len(parse_xyz(format_xyz(Molecule()))) == 0


def test_multiline_comment_is_flattened():
    text = format_xyz(ETHYNE, comment="first\nsecond")
    assert text.splitlines()[1] == "first second"
    assert parse_xyz(text) == ETHYNE


def test_save_to_path(tmp_path):
    path = tmp_path / "ethyne.xyz"
    XYZWriter.save(ETHYNE, str(path), comment="ethyne")

    assert path.read_text().splitlines()[1] == "ethyne"
    assert XYZReader.read(str(path)) == ETHYNE


def test_save_to_handle():
    buffer = io.StringIO()
    XYZWriter.save(ETHYNE, buffer)

    assert not buffer.closed
    assert parse_xyz(buffer.getvalue()) == ETHYNE


def test_comment_form_feed_is_kept():
    text = format_xyz(ETHYNE, comment="run\x0c42\u2028b")
    assert text.split("\n")[1] == "run\x0c42\u2028b"
    assert parse_xyz(text) == ETHYNE


def test_save_writes_utf8(tmp_path):
    path = tmp_path / "ethyne.xyz"
    XYZWriter.save(ETHYNE, str(path), comment="éthyne Å")

    assert path.read_bytes().decode("utf-8").splitlines()[1] == "éthyne Å"
    assert XYZReader.read(str(path)) == ETHYNE
