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

"""Layout constants shared by the geometry, annotation and render modules."""

# Standard Library
import math


# grid units -> visual units
UNIT = 60
PADDING = 40
DEFAULT_VIEWPORT = (0.0, 0.0, 100.0, 100.0)

# bond strokes
BOND_SHORTEN = 9
DOUBLE_BOND_GAP = 4
TRIPLE_BOND_GAP = 5
BOND_STROKE_WIDTH = 1.5
DATIVE_DASH = (4.0, 2.0)

# lone pairs, two dots per pair
LONE_PAIR_DIST = 16
LONE_PAIR_SPREAD = 4
LONE_PAIR_RADIUS = 2

# annotation labels, measured from the atom center
OX_LABEL_DIST = 18
CHARGE_LABEL_DIST = 18

ATOM_FONT_SIZE = 14
ANNOTATION_FONT_SIZE = 10

# "straight up" in screen coordinates (y grows downward)
UP_ANGLE = -math.pi / 2.0
FULL_TURN = 2.0 * math.pi

LAYER_NAMES = ("bonds", "lone_pairs", "atoms", "ox_states", "charges")
