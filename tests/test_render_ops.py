"""Tests for layered render ops and their JSON form."""

# Standard Library
import json

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_molview_to_sys_path()

# local repo modules
from molview import constants
from molview import layout
from molview import layout_ops
from molview import render_ops
from molview import structure


#============================================
def _water_layout(**layers):
	water = structure.load_structure(conftest.tests_path("fixtures", "structures", "water.json"))
	return layout.compute_layout(water, layers)


#============================================
@pytest.mark.parametrize("color, expected", [
	("#ABC", "#aabbcc"),
	("#112233", "#112233"),
	("none", "none"),
	((1.0, 0.0, 0.0), "#ff0000"),
	((0, 128, 255), "#0080ff"),
	("", None),
	(None, None),
])
def test_color_to_hex(color, expected):
	assert render_ops.color_to_hex(color) == expected


#============================================
def test_sort_ops_is_stable_by_z():
	first = render_ops.LineOp((0, 0), (1, 1), width=1, z=2, op_id="a")
	second = render_ops.LineOp((0, 0), (1, 1), width=1, z=0, op_id="b")
	third = render_ops.LineOp((0, 0), (1, 1), width=1, z=2, op_id="c")
	ordered = render_ops.sort_ops([first, second, third])
	assert [op.op_id for op in ordered] == ["b", "a", "c"]


#============================================
def test_every_op_carries_its_layer():
	result = _water_layout(oxStates=True, charges=True, lonePairs=True)
	ops = layout_ops.layout_to_ops(result)
	layers = {op.layer for op in ops}
	assert layers == set(constants.LAYER_NAMES)
	for op in ops:
		assert op.z == constants.LAYER_NAMES.index(op.layer)


#============================================
def test_lone_pair_ops_emitted_even_when_hidden():
	result = _water_layout()
	ops = layout_ops.layout_to_ops(result)
	dots = render_ops.ops_in_layer(ops, "lone_pairs")
	# two pairs on oxygen, two dots each
	assert len(dots) == 4
	assert all(op.radius == constants.LONE_PAIR_RADIUS for op in dots)
	assert not render_ops.ops_in_layer(ops, "ox_states")
	visible = layout_ops.visible_ops(result)
	assert not render_ops.ops_in_layer(visible, "lone_pairs")
	assert len(render_ops.ops_in_layer(visible, "atoms")) == 3


#============================================
def test_atom_labels_always_visible():
	result = _water_layout(bonds=False)
	visible = layout_ops.visible_ops(result)
	assert {op.layer for op in visible} == {"atoms"}


#============================================
def test_ox_and_charge_label_text():
	result = _water_layout(oxStates=True, charges=True)
	ops = layout_ops.layout_to_ops(result)
	ox_text = {op.op_id: op.text for op in render_ops.ops_in_layer(ops, "ox_states")}
	assert ox_text == {"ox-O1": "−2", "ox-H1": "+1", "ox-H2": "+1"}
	charge_text = {op.op_id: op.text for op in render_ops.ops_in_layer(ops, "charges")}
	assert charge_text == {"charge-O1": "δ−", "charge-H1": "δ+", "charge-H2": "δ+"}
	oxygen = [op for op in ops if op.op_id == "ox-O1"][0]
	assert oxygen.position == pytest.approx((0.0, -constants.OX_LABEL_DIST), abs=1e-9)
	assert "mol-ox--negative" in oxygen.css_class


#============================================
def test_dative_bond_ops_are_dashed():
	mol = structure.load_structure(
		conftest.tests_path("fixtures", "structures", "carbon_monoxide.json"))
	result = layout.compute_layout(mol)
	style = layout_ops.RenderStyle()
	ops = layout_ops.bond_segment_ops(result.bond_segments, style)
	assert len(ops) == 3
	for op in ops:
		assert op.dash == constants.DATIVE_DASH
		assert op.color == style.dative_color
		assert op.cap == "round"


#============================================
def test_ops_to_json_text_is_sorted_by_layer():
	result = _water_layout(oxStates=True, lonePairs=True)
	data = json.loads(render_ops.ops_to_json_text(layout_ops.layout_to_ops(result)))
	z_values = [entry["z"] for entry in data]
	assert z_values == sorted(z_values)
	assert data[0]["kind"] == "line"
	assert data[0]["layer"] == "bonds"
	assert data[0]["id"] == "bond-0-center"
	kinds = {entry["kind"] for entry in data}
	assert kinds == {"line", "circle", "text"}
