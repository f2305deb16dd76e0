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

"""Molecular-diagram layout: bonds, lone pairs, oxidation and charge labels."""

# Standard Library
import importlib.util

# local repo modules
from .angles import build_bond_angles
from .angles import compute_annotation_angle
from .angles import compute_lone_pair_angles
from .angles import find_angular_gaps
from .annotations import AtomAnnotations
from .annotations import compute_annotations
from .bond_render import BondSegment
from .bond_render import build_bond_segments
from .geometry import offset_line
from .geometry import shorten_line
from .layout import LayoutResult
from .layout import compute_layout
from .layout import toggle_layer
from .structure import LayerVisibility
from .structure import MoleculeAtom
from .structure import MoleculeBond
from .structure import MoleculePolarity
from .structure import MoleculeStructure
from .structure import StructureError
from .structure import load_structure
from .structure import structure_from_dict
from .viewport import Viewport
from .viewport import compute_viewport


__version__ = "0.1.0"

CAIRO_AVAILABLE = importlib.util.find_spec("cairo") is not None
