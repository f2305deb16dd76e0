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

"""Bond stroke geometry: shortened and offset segments per bond order."""

# Standard Library
import dataclasses

# local repo modules
from . import constants
from . import geometry
from . import structure as structure_module


RAIL_CENTER = "center"
RAIL_UPPER = "upper"
RAIL_LOWER = "lower"


#============================================
@dataclasses.dataclass(frozen=True)
class BondSegment:
	bond_index: int
	order: int
	dative: bool
	rail: str
	p1: tuple[float, float]
	p2: tuple[float, float]

	@property
	def style(self):
		return "dative" if self.dative else "normal"


#============================================
def _segment(bond_index, bond, rail, coords):
	x1, y1, x2, y2 = coords
	return BondSegment(
		bond_index=bond_index,
		order=bond.order,
		dative=bool(bond.dative),
		rail=rail,
		p1=(x1, y1),
		p2=(x2, y2),
	)


#============================================
def build_bond_segments_for_bond(bond_index, bond, start, end):
	"""Return the drawable segments of one bond between two atom centers.

	The center line is shortened by BOND_SHORTEN at both ends so it stops
	short of the atom labels. Double bonds are two rails at half the double
	gap on either side, triple bonds the center line plus two rails at the
	full triple gap. Orders outside 1..3 produce nothing.
	"""
	shortened = geometry.shorten_line(start[0], start[1], end[0], end[1], constants.BOND_SHORTEN)
	if bond.order == 1:
		return [_segment(bond_index, bond, RAIL_CENTER, shortened)]
	if bond.order == 2:
		half_gap = constants.DOUBLE_BOND_GAP / 2.0
		return [
			_segment(bond_index, bond, RAIL_UPPER, geometry.offset_line(*shortened, half_gap)),
			_segment(bond_index, bond, RAIL_LOWER, geometry.offset_line(*shortened, -half_gap)),
		]
	if bond.order == 3:
		return [
			_segment(bond_index, bond, RAIL_UPPER,
					geometry.offset_line(*shortened, constants.TRIPLE_BOND_GAP)),
			_segment(bond_index, bond, RAIL_CENTER, shortened),
			_segment(bond_index, bond, RAIL_LOWER,
					geometry.offset_line(*shortened, -constants.TRIPLE_BOND_GAP)),
		]
	return []


#============================================
def build_bond_segments(structure):
	"""Return segments for every bond whose endpoints resolve, in bond order."""
	positions = {atom.id: structure_module.atom_position(atom) for atom in structure.atoms}
	segments = []
	for bond_index, bond in enumerate(structure.bonds):
		start = positions.get(bond.from_id)
		end = positions.get(bond.to_id)
		if start is None or end is None:
			continue
		segments.extend(build_bond_segments_for_bond(bond_index, bond, start, end))
	return tuple(segments)
