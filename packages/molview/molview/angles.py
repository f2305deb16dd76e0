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

"""Angular occupancy around atoms and gap-based annotation placement.

Angles are in radians in screen coordinates, so -pi/2 points straight up.
Gap sizes are compared exactly; there is no tolerance anywhere in here.
"""

# Standard Library
import dataclasses
import math

# local repo modules
from . import constants
from . import structure as structure_module


#============================================
@dataclasses.dataclass(frozen=True)
class AngularGap:
	start: float
	size: float

	@property
	def center(self):
		return self.start + self.size / 2.0


#============================================
def normalize_angle(angle):
	"""Fold an angle into [-pi, pi) in constant time.

	Raises:
		ValueError: for infinite or NaN angles.
	"""
	if not math.isfinite(angle):
		raise ValueError(f"angle must be finite, got {angle!r}")
	# remainder is exact and lands in [-pi, pi]
	folded = math.remainder(angle, constants.FULL_TURN)
	if folded >= math.pi:
		folded -= constants.FULL_TURN
	return folded


#============================================
def build_bond_angles(atoms, bonds):
	"""Map every atom id to the angles at which its bonds leave it.

	The two ends of a bond see it pointing toward each other, so the from
	atom gets the from->to angle and the to atom the to->from angle.
	Bonds with an unknown endpoint are skipped.

	Args:
		atoms: Sequence of MoleculeAtom.
		bonds: Sequence of MoleculeBond.

	Returns:
		dict[str, list[float]]: one entry per atom, empty when unbonded.
	"""
	positions = {atom.id: structure_module.atom_position(atom) for atom in atoms}
	angles = {atom.id: [] for atom in atoms}
	for bond in bonds:
		p_from = positions.get(bond.from_id)
		p_to = positions.get(bond.to_id)
		if p_from is None or p_to is None:
			continue
		angles[bond.from_id].append(math.atan2(p_to[1] - p_from[1], p_to[0] - p_from[0]))
		angles[bond.to_id].append(math.atan2(p_from[1] - p_to[1], p_from[0] - p_to[0]))
	return angles


#============================================
def find_angular_gaps(angles):
	"""Return the gaps between occupied angles, largest first.

	The circle wraps: the last gap runs from the largest angle to the
	smallest angle plus 2*pi. Equal-size gaps keep ascending start order.

	Args:
		angles: Iterable of occupied angles, any range, at least one.

	Returns:
		list[AngularGap]
	"""
	ordered = sorted(angles)
	if not ordered:
		raise ValueError("find_angular_gaps needs at least one occupied angle")
	gaps = []
	count = len(ordered)
	for index, start in enumerate(ordered):
		if index + 1 < count:
			following = ordered[index + 1]
		else:
			following = ordered[0] + constants.FULL_TURN
		gaps.append(AngularGap(start=start, size=following - start))
	gaps.sort(key=lambda gap: gap.size, reverse=True)
	return gaps


#============================================
def compute_lone_pair_angles(bond_angles, pair_count):
	"""Place pair_count lone pairs around an atom.

	Unbonded atoms get pairs spread evenly from straight up. Otherwise each
	pair goes to the center of the currently largest gap, and that gap is
	replaced by its two halves before the next pair is placed.

	Args:
		bond_angles: Angles of bonds leaving the atom.
		pair_count: Number of lone pairs.

	Returns:
		tuple[float, ...]: one angle per pair, in [-pi, pi).
	"""
	if not pair_count or pair_count <= 0:
		return ()
	if not bond_angles:
		step = constants.FULL_TURN / pair_count
		return tuple(normalize_angle(constants.UP_ANGLE + i * step) for i in range(pair_count))
	gaps = find_angular_gaps(bond_angles)
	placed = []
	for _ in range(pair_count):
		gap = gaps.pop(0)
		half = gap.size / 2.0
		placed.append(normalize_angle(gap.center))
		gaps.append(AngularGap(start=gap.start, size=half))
		gaps.append(AngularGap(start=gap.start + half, size=half))
		gaps.sort(key=lambda item: item.size, reverse=True)
	return tuple(placed)


#============================================
def compute_annotation_angle(occupied):
	"""Return the center of the largest free gap, or straight up if none is occupied."""
	if not occupied:
		return constants.UP_ANGLE
	return normalize_angle(find_angular_gaps(occupied)[0].center)
