"""End-to-end tests for compute_layout and the host-facing helpers."""

# Standard Library
import json
import math

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_molview_to_sys_path()

# local repo modules
from molview import constants
from molview import layout
from molview import structure


#============================================
def _fixture(name):
	return structure.load_structure(conftest.tests_path("fixtures", "structures", name))


#============================================
def test_hydrogen_molecule_single_segment():
	mol = structure.MoleculeStructure(
		id="h2",
		atoms=(
			structure.MoleculeAtom(id="H1", symbol="H", x=0, y=0),
			structure.MoleculeAtom(id="H2", symbol="H", x=1, y=0),
		),
		bonds=(structure.MoleculeBond("H1", "H2", 1),),
	)
	result = layout.compute_layout(mol)
	assert len(result.bond_segments) == 1
	segment = result.bond_segments[0]
	assert segment.p1 == pytest.approx((9.0, 0.0))
	assert segment.p2 == pytest.approx((51.0, 0.0))
	assert result.viewport.as_tuple() == pytest.approx((-40.0, -40.0, 140.0, 80.0))
	for notes in result.annotations.values():
		assert notes.lone_pair_angles == ()
		assert notes.ox_offset is None
		assert notes.charge_offset is None


#============================================
def test_lone_pairs_split_linear_center():
	mol = structure.MoleculeStructure(
		id="linear",
		atoms=(
			structure.MoleculeAtom(id="X1", symbol="Xe", x=0, y=0, lone_pairs=2),
			structure.MoleculeAtom(id="F1", symbol="F", x=-1, y=0),
			structure.MoleculeAtom(id="F2", symbol="F", x=1, y=0),
		),
		bonds=(
			structure.MoleculeBond("X1", "F1", 1),
			structure.MoleculeBond("X1", "F2", 1),
		),
	)
	result = layout.compute_layout(mol, {"lonePairs": True})
	pairs = result.annotations["X1"].lone_pair_angles
	assert pairs == pytest.approx((math.pi / 2, -math.pi / 2))


#============================================
def test_water_ox_labels_all_visible():
	water = _fixture("water.json")
	result = layout.compute_layout(water, {"oxStates": True})
	oxygen = result.annotations["O1"]
	assert math.atan2(oxygen.ox_offset[1], oxygen.ox_offset[0]) == pytest.approx(-math.pi / 2)
	for atom_id in ("H1", "H2"):
		offset = result.annotations[atom_id].ox_offset
		assert math.hypot(*offset) == pytest.approx(constants.OX_LABEL_DIST)
	assert result.atom("O1").ox == -2
	assert result.atom("H1").ox == 1


#============================================
def test_carbon_monoxide_dative_triple():
	mol = _fixture("carbon_monoxide.json")
	result = layout.compute_layout(mol)
	assert len(result.bond_segments) == 3
	assert {segment.rail for segment in result.bond_segments} == {"upper", "center", "lower"}
	assert all(segment.style == "dative" for segment in result.bond_segments)
	ys = sorted(segment.p1[1] for segment in result.bond_segments)
	gap = constants.TRIPLE_BOND_GAP
	assert ys == pytest.approx([-gap, 0.0, gap])


#============================================
def test_layout_is_idempotent():
	water = _fixture("water.json")
	visibility = structure.LayerVisibility(ox_states=True, charges=True, lone_pairs=True)
	assert layout.compute_layout(water, visibility) == layout.compute_layout(water, visibility)


#============================================
def test_bonds_layer_does_not_move_geometry():
	water = _fixture("water.json")
	shown = layout.compute_layout(water, {"bonds": True})
	hidden = layout.compute_layout(water, {"bonds": False})
	assert shown.bond_segments == hidden.bond_segments
	assert shown.viewport == hidden.viewport
	assert shown.annotations == hidden.annotations


#============================================
def test_has_charge():
	water = _fixture("water.json")
	result = layout.compute_layout(water)
	assert result.has_charge("H1")
	assert result.has_charge("O1")
	assert not result.has_charge("nope")
	assert result.atom("nope") is None


#============================================
def test_sulfate_uses_display_labels():
	result = layout.compute_layout(_fixture("sulfate_ion.json"))
	assert result.atom("O3").text == "O⁻"
	assert result.atom("S1").text == "S"
	assert len(result.bond_segments) == 6


#============================================
def test_default_visibility_is_bonds_only():
	assert structure.make_visibility() == structure.LayerVisibility(
		bonds=True, ox_states=False, charges=False, lone_pairs=False,
	)
	merged = structure.make_visibility({"oxStates": True, "lone_pairs": True})
	assert merged.ox_states
	assert merged.lone_pairs
	assert merged.bonds
	assert not merged.charges


#============================================
def test_toggle_layer_flips_one_layer():
	visibility = structure.LayerVisibility()
	flipped = layout.toggle_layer(visibility, "oxStates")
	assert flipped.ox_states
	assert flipped.bonds == visibility.bonds
	assert layout.toggle_layer(flipped, "ox_states") == visibility


#============================================
def test_toggle_layer_respects_locked_layers():
	visibility = structure.LayerVisibility()
	locked = {"bonds": True, "charges": False}
	assert layout.toggle_layer(visibility, "bonds", locked) is visibility
	assert layout.toggle_layer(visibility, "charges", locked).charges
	locked_visibility = structure.LayerVisibility(bonds=False, ox_states=True)
	assert layout.toggle_layer(visibility, "oxStates", locked_visibility) is visibility


#============================================
def test_toggle_unknown_layer_raises():
	with pytest.raises(ValueError):
		layout.toggle_layer(structure.LayerVisibility(), "electrons")


#============================================
def test_layout_to_dict_is_json_ready():
	water = _fixture("water.json")
	result = layout.compute_layout(water, {"oxStates": True, "charges": True})
	data = layout.layout_to_dict(result)
	# must serialize without custom encoders
	json.dumps(data)
	assert data["id"] == "water"
	assert data["viewBox"] == "-88 -40 176 116"
	assert data["visibility"]["ox_states"] is True
	assert [atom["id"] for atom in data["atoms"]] == ["O1", "H1", "H2"]
	oxygen = data["atoms"][0]
	assert oxygen["oxOffset"] == [0.0, -18.0]
	assert oxygen["charge"] == "minus"
	assert len(oxygen["lonePairAngles"]) == 2
	assert len(data["bondSegments"]) == 2
	assert data["bondSegments"][0]["style"] == "normal"


#============================================
def test_layout_mappings_are_read_only():
	result = layout.compute_layout(_fixture("water.json"), {"charges": True})
	with pytest.raises(TypeError):
		result.charges["H1"] = "minus"
	with pytest.raises(TypeError):
		del result.annotations["O1"]
	assert result.charges["H1"] == "plus"
	assert list(result.annotations) == ["O1", "H1", "H2"]
