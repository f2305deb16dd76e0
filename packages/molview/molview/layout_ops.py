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

"""Turn a LayoutResult into layered render ops."""

# Standard Library
import dataclasses

# local repo modules
from . import annotations
from . import constants
from . import render_ops


#============================================
@dataclasses.dataclass(frozen=True)
class RenderStyle:
	bond_color: str = "#333333"
	dative_color: str = "#6b4fbb"
	bond_width: float = constants.BOND_STROKE_WIDTH
	dative_dash: tuple[float, ...] = constants.DATIVE_DASH
	lone_pair_color: str = "#1f6fb2"
	atom_color: str = "#000000"
	ox_colors: dict | None = None
	charge_colors: dict | None = None
	font_family: str = "sans-serif"
	atom_font_size: float = constants.ATOM_FONT_SIZE
	annotation_font_size: float = constants.ANNOTATION_FONT_SIZE


_DEFAULT_OX_COLORS = {
	"positive": "#c0392b",
	"negative": "#2471a3",
	"zero": "#7f8c8d",
}
_DEFAULT_CHARGE_COLORS = {
	annotations.CHARGE_PLUS: "#c0392b",
	annotations.CHARGE_MINUS: "#2471a3",
}

# drawing order of the layers, bottom to top
_LAYER_Z = {name: index for index, name in enumerate(constants.LAYER_NAMES)}


#============================================
def _resolve_style(style):
	if style is None:
		return RenderStyle()
	return style


#============================================
def bond_segment_ops(segments, style=None):
	style = _resolve_style(style)
	ops = []
	for segment in segments:
		ops.append(render_ops.LineOp(
			segment.p1,
			segment.p2,
			width=style.bond_width,
			cap="round",
			color=style.dative_color if segment.dative else style.bond_color,
			dash=style.dative_dash if segment.dative else None,
			z=_LAYER_Z["bonds"],
			layer="bonds",
			op_id=f"bond-{segment.bond_index}-{segment.rail}",
		))
	return ops


#============================================
def lone_pair_ops(layout, style=None):
	style = _resolve_style(style)
	ops = []
	for placement in layout.atoms:
		notes = layout.annotations[placement.atom_id]
		for pair_index, angle in enumerate(notes.lone_pair_angles):
			dots = annotations.lone_pair_dot_centers(placement.position, angle)
			for dot_index, dot in enumerate(dots):
				ops.append(render_ops.CircleOp(
					center=dot,
					radius=constants.LONE_PAIR_RADIUS,
					fill=style.lone_pair_color,
					z=_LAYER_Z["lone_pairs"],
					layer="lone_pairs",
					op_id=f"lp-{placement.atom_id}-{pair_index}-{dot_index}",
				))
	return ops


#============================================
def atom_label_ops(layout, style=None):
	style = _resolve_style(style)
	return [
		render_ops.TextOp(
			position=placement.position,
			text=placement.text,
			font_size=style.atom_font_size,
			color=style.atom_color,
			font_family=style.font_family,
			css_class="mol-atom-label",
			z=_LAYER_Z["atoms"],
			layer="atoms",
			op_id=f"atom-{placement.atom_id}",
		)
		for placement in layout.atoms
	]


#============================================
def _offset_point(position, offset):
	return (position[0] + offset[0], position[1] + offset[1])


#============================================
def ox_label_ops(layout, style=None):
	style = _resolve_style(style)
	colors = style.ox_colors or _DEFAULT_OX_COLORS
	ops = []
	for placement in layout.atoms:
		notes = layout.annotations[placement.atom_id]
		if notes.ox_offset is None or placement.ox is None:
			continue
		sign_class = annotations.ox_sign_class(placement.ox)
		ops.append(render_ops.TextOp(
			position=_offset_point(placement.position, notes.ox_offset),
			text=annotations.format_ox_state(placement.ox),
			font_size=style.annotation_font_size,
			color=colors.get(sign_class),
			font_family=style.font_family,
			css_class=f"mol-ox mol-ox--{sign_class}",
			z=_LAYER_Z["ox_states"],
			layer="ox_states",
			op_id=f"ox-{placement.atom_id}",
		))
	return ops


#============================================
def charge_label_ops(layout, style=None):
	style = _resolve_style(style)
	colors = style.charge_colors or _DEFAULT_CHARGE_COLORS
	ops = []
	for placement in layout.atoms:
		notes = layout.annotations[placement.atom_id]
		kind = layout.charges.get(placement.atom_id)
		if notes.charge_offset is None or kind is None:
			continue
		ops.append(render_ops.TextOp(
			position=_offset_point(placement.position, notes.charge_offset),
			text=annotations.charge_label_text(kind),
			font_size=style.annotation_font_size,
			color=colors.get(kind),
			font_family=style.font_family,
			css_class=f"mol-charge mol-charge--{kind}",
			z=_LAYER_Z["charges"],
			layer="charges",
			op_id=f"charge-{placement.atom_id}",
		))
	return ops


#============================================
def layer_is_visible(visibility, layer):
	"""Atom labels are always shown; every other layer follows visibility."""
	if layer == "atoms":
		return True
	return bool(getattr(visibility, layer))


#============================================
def layout_to_ops(layout, style=None):
	"""Return ops for every layer, hidden layers included.

	Bonds and lone pairs are always emitted so a renderer can hide them
	without recomputing anything. Oxidation and charge labels only exist
	when their layer was enabled for the layout.
	"""
	ops = []
	ops.extend(bond_segment_ops(layout.bond_segments, style))
	ops.extend(lone_pair_ops(layout, style))
	ops.extend(atom_label_ops(layout, style))
	ops.extend(ox_label_ops(layout, style))
	ops.extend(charge_label_ops(layout, style))
	return ops


#============================================
def visible_ops(layout, style=None):
	return [op for op in layout_to_ops(layout, style)
			if layer_is_visible(layout.visibility, op.layer)]
