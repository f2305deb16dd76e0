#--------------------------------------------------------------------------
#     This file is part of molview - a molecular diagram layout library
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Stateless layout entry point: structure + visibility -> LayoutResult.

Hover, selection and toggle buttons belong to the host. The host keeps the
current LayerVisibility, flips it with toggle_layer, and calls
compute_layout again; nothing here remembers a previous call.
"""

# Standard Library
import dataclasses
import types

# local repo modules
from . import angles
from . import annotations
from . import bond_render
from . import structure as structure_module
from . import viewport as viewport_module


#============================================
@dataclasses.dataclass(frozen=True)
class AtomPlacement:
	atom_id: str
	symbol: str
	text: str
	position: tuple[float, float]
	ox: int | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class LayoutResult:
	structure_id: str
	visibility: structure_module.LayerVisibility
	viewport: viewport_module.Viewport
	atoms: tuple[AtomPlacement, ...]
	bond_segments: tuple[bond_render.BondSegment, ...]
	# read-only views, keyed by atom id in atom order
	annotations: types.MappingProxyType
	charges: types.MappingProxyType

	def has_charge(self, atom_id):
		"""True when atom_id carries a partial-charge annotation."""
		return atom_id in self.charges

	def atom(self, atom_id):
		for placement in self.atoms:
			if placement.atom_id == atom_id:
				return placement
		return None


#============================================
def compute_layout(structure, visibility=None):
	"""Lay out one structure for the given layer visibility.

	Args:
		structure: MoleculeStructure.
		visibility: LayerVisibility, a partial layer mapping, or None for
			the defaults (bonds only).

	Returns:
		LayoutResult
	"""
	visibility = structure_module.make_visibility(visibility)
	bond_angles = angles.build_bond_angles(structure.atoms, structure.bonds)
	placements = tuple(
		AtomPlacement(
			atom_id=atom.id,
			symbol=atom.symbol,
			text=annotations.atom_label_text(atom),
			position=structure_module.atom_position(atom),
			ox=atom.ox,
		)
		for atom in structure.atoms
	)
	return LayoutResult(
		structure_id=structure.id,
		visibility=visibility,
		viewport=viewport_module.compute_viewport(structure.atoms),
		atoms=placements,
		bond_segments=bond_render.build_bond_segments(structure),
		annotations=types.MappingProxyType(
			annotations.compute_annotations(structure, visibility, bond_angles=bond_angles)),
		charges=types.MappingProxyType(annotations.build_charge_map(structure)),
	)


#============================================
def toggle_layer(visibility, key, locked=None):
	"""Return visibility with one layer flipped, unless that layer is locked.

	Args:
		visibility: Current LayerVisibility.
		key: Layer key, camelCase or snake_case.
		locked: Optional LayerVisibility or mapping of locked layers.
	"""
	field_name = structure_module.layer_field_name(key)
	if locked:
		if isinstance(locked, structure_module.LayerVisibility):
			is_locked = getattr(locked, field_name)
		else:
			is_locked = any(
				value and structure_module.layer_field_name(locked_key) == field_name
				for locked_key, value in locked.items()
			)
		if is_locked:
			return visibility
	current = getattr(visibility, field_name)
	return dataclasses.replace(visibility, **{field_name: not current})


#============================================
def _rounded_pair(point, digits):
	if point is None:
		return None
	return [round(point[0], digits), round(point[1], digits)]


#============================================
def layout_to_dict(layout, round_digits=3):
	"""JSON-ready summary of a layout."""
	atoms = []
	for placement in layout.atoms:
		notes = layout.annotations[placement.atom_id]
		atoms.append({
			"id": placement.atom_id,
			"text": placement.text,
			"position": _rounded_pair(placement.position, round_digits),
			"lonePairAngles": [round(angle, 6) for angle in notes.lone_pair_angles],
			"oxOffset": _rounded_pair(notes.ox_offset, round_digits),
			"chargeOffset": _rounded_pair(notes.charge_offset, round_digits),
			"charge": layout.charges.get(placement.atom_id),
		})
	segments = [
		{
			"bond": segment.bond_index,
			"order": segment.order,
			"style": segment.style,
			"rail": segment.rail,
			"p1": _rounded_pair(segment.p1, round_digits),
			"p2": _rounded_pair(segment.p2, round_digits),
		}
		for segment in layout.bond_segments
	]
	return {
		"id": layout.structure_id,
		"viewBox": layout.viewport.view_box,
		"visibility": dataclasses.asdict(layout.visibility),
		"atoms": atoms,
		"bondSegments": segments,
	}
