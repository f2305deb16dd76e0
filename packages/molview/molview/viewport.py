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

"""Diagram coordinate frame derived from atom positions."""

# Standard Library
import dataclasses

# local repo modules
from . import constants
from . import structure as structure_module


#============================================
@dataclasses.dataclass(frozen=True)
class Viewport:
	min_x: float
	min_y: float
	width: float
	height: float

	@property
	def view_box(self):
		return f"{self.min_x:g} {self.min_y:g} {self.width:g} {self.height:g}"

	def as_tuple(self):
		return (self.min_x, self.min_y, self.width, self.height)


#============================================
def compute_viewport(atoms, padding=constants.PADDING):
	"""Padded bounding box of all atom positions in visual units.

	Annotation offsets are not considered; they are expected to stay inside
	the padding. An empty atom list gives DEFAULT_VIEWPORT.
	"""
	if not atoms:
		return Viewport(*constants.DEFAULT_VIEWPORT)
	xs = []
	ys = []
	for atom in atoms:
		x, y = structure_module.atom_position(atom)
		xs.append(x)
		ys.append(y)
	min_x = min(xs)
	min_y = min(ys)
	return Viewport(
		min_x=min_x - padding,
		min_y=min_y - padding,
		width=max(xs) - min_x + padding * 2,
		height=max(ys) - min_y + padding * 2,
	)
