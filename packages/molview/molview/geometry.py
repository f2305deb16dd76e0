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

"""Two-point line primitives used by the bond renderer."""

# Standard Library
import math


#============================================
def shorten_line(x1, y1, x2, y2, amount):
	"""Move both endpoints of a segment inward by amount.

	Segments no longer than 2 * amount are returned unchanged so that very
	close atoms never produce an inverted or zero-length line.

	Args:
		x1, y1: First endpoint.
		x2, y2: Second endpoint.
		amount: Distance to remove at each end.

	Returns:
		tuple[float, float, float, float]: (x1, y1, x2, y2)
	"""
	dx = x2 - x1
	dy = y2 - y1
	length = math.hypot(dx, dy)
	if length <= amount * 2:
		return x1, y1, x2, y2
	nx = dx / length
	ny = dy / length
	return (x1 + nx * amount,
			y1 + ny * amount,
			x2 - nx * amount,
			y2 - ny * amount)


#============================================
def offset_line(x1, y1, x2, y2, offset):
	"""Translate a segment perpendicular to its direction by a signed offset.

	The perpendicular is (-dy, dx) normalized, so positive and negative
	offsets give the two rails of a multi-line bond. A zero-length segment
	has no direction and is returned unchanged.
	"""
	dx = x2 - x1
	dy = y2 - y1
	length = math.hypot(dx, dy)
	if length == 0:
		return x1, y1, x2, y2
	px = -dy / length * offset
	py = dx / length * offset
	return x1 + px, y1 + py, x2 + px, y2 + py


#============================================
def polar_offset(angle, distance):
	"""Return the (dx, dy) vector of length distance pointing at angle."""
	return (math.cos(angle) * distance, math.sin(angle) * distance)
