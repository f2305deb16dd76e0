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

"""Per-atom annotation placement: lone pairs, oxidation states, charges."""

# Standard Library
import dataclasses
import math

# local repo modules
from . import angles
from . import constants
from . import geometry


CHARGE_PLUS = "plus"
CHARGE_MINUS = "minus"
MINUS_SIGN = "−"


#============================================
@dataclasses.dataclass(frozen=True)
class AtomAnnotations:
	lone_pair_angles: tuple[float, ...] = ()
	ox_offset: tuple[float, float] | None = None
	charge_offset: tuple[float, float] | None = None


#============================================
def build_charge_map(structure):
	"""Collapse polarity records into one charge kind per atom.

	Later records win, and within one record the delta-minus atom is
	written after the delta-plus atom. Ids that are not atoms of the
	structure are dropped.

	Returns:
		dict[str, str]: atom id -> CHARGE_PLUS or CHARGE_MINUS, ordered by
		first appearance.
	"""
	atom_ids = {atom.id for atom in structure.atoms}
	charges = {}
	for pol in structure.polarity:
		charges[pol.delta_plus] = CHARGE_PLUS
		charges[pol.delta_minus] = CHARGE_MINUS
	return {atom_id: kind for atom_id, kind in charges.items() if atom_id in atom_ids}


#============================================
def atom_has_charge(structure, atom_id):
	return atom_id in build_charge_map(structure)


#============================================
def compute_annotations(structure, visibility, bond_angles=None):
	"""Place annotations for every atom in priority order.

	Priority is bonds, then lone pairs (when shown), then the oxidation
	label (when shown), then the charge label (when shown). Each placed
	angle becomes occupied before the next placement is computed.
	Lone-pair angles are always computed so that showing them never moves
	them.

	Args:
		structure: MoleculeStructure.
		visibility: LayerVisibility.
		bond_angles: Optional precomputed result of angles.build_bond_angles.

	Returns:
		dict[str, AtomAnnotations]: keyed by atom id in atom order.
	"""
	if bond_angles is None:
		bond_angles = angles.build_bond_angles(structure.atoms, structure.bonds)
	charges = build_charge_map(structure) if visibility.charges else {}
	result = {}
	for atom in structure.atoms:
		occupied = list(bond_angles.get(atom.id, ()))
		pair_angles = angles.compute_lone_pair_angles(occupied, atom.lone_pairs or 0)
		if visibility.lone_pairs:
			occupied.extend(pair_angles)
		ox_offset = None
		if visibility.ox_states and atom.ox is not None:
			ox_angle = angles.compute_annotation_angle(occupied)
			ox_offset = geometry.polar_offset(ox_angle, constants.OX_LABEL_DIST)
			occupied.append(ox_angle)
		charge_offset = None
		if atom.id in charges:
			charge_angle = angles.compute_annotation_angle(occupied)
			charge_offset = geometry.polar_offset(charge_angle, constants.CHARGE_LABEL_DIST)
		result[atom.id] = AtomAnnotations(
			lone_pair_angles=pair_angles,
			ox_offset=ox_offset,
			charge_offset=charge_offset,
		)
	return result


#============================================
def lone_pair_dot_centers(center, angle):
	"""Return the two dot centers of one lone pair placed at angle."""
	dx, dy = geometry.polar_offset(angle, constants.LONE_PAIR_DIST)
	cx = center[0] + dx
	cy = center[1] + dy
	# the dots sit side by side, perpendicular to the placement direction
	half = constants.LONE_PAIR_SPREAD / 2.0
	perp_x = -math.sin(angle) * half
	perp_y = math.cos(angle) * half
	return (cx + perp_x, cy + perp_y), (cx - perp_x, cy - perp_y)


#============================================
def format_ox_state(ox):
	if ox == 0:
		return "0"
	if ox > 0:
		return f"+{ox}"
	return f"{MINUS_SIGN}{abs(ox)}"


#============================================
def ox_sign_class(ox):
	if ox > 0:
		return "positive"
	if ox < 0:
		return "negative"
	return "zero"


#============================================
def charge_label_text(kind):
	if kind == CHARGE_PLUS:
		return "δ+"
	return "δ" + MINUS_SIGN


#============================================
def atom_label_text(atom):
	return atom.label if atom.label is not None else atom.symbol


#============================================
def atom_tooltip_text(atom):
	"""Hover text for one atom: the symbol plus its oxidation state if known."""
	if atom.ox is None:
		return atom.symbol
	return f"{atom.symbol} ({format_ox_state(atom.ox)})"
