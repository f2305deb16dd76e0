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

"""Render ops for shared Cairo/SVG drawing."""

# Standard Library
import dataclasses
import json
import math

# local repo modules
from . import dom_extensions


#============================================
@dataclasses.dataclass(frozen=True)
class LineOp:
	p1: tuple[float, float]
	p2: tuple[float, float]
	width: float
	cap: str = "butt"
	color: object | None = None
	dash: tuple[float, ...] | None = None
	z: int = 0
	layer: str | None = None
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class CircleOp:
	center: tuple[float, float]
	radius: float
	fill: object | None
	stroke: object | None = None
	stroke_width: float = 0.0
	z: int = 0
	layer: str | None = None
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class TextOp:
	"""Text centered on position both horizontally and vertically."""
	position: tuple[float, float]
	text: str
	font_size: float
	color: object | None = None
	font_family: str = "sans-serif"
	css_class: str | None = None
	z: int = 0
	layer: str | None = None
	op_id: str | None = None


#============================================
def _normalize_hex_color(text):
	if text.lower() == "none":
		return "none"
	if not text.startswith("#"):
		return text
	value = text[1:]
	if len(value) == 3:
		value = "".join(ch * 2 for ch in value)
	if len(value) != 6:
		return text
	return "#" + value.lower()


#============================================
def _color_tuple_to_hex(color):
	if len(color) not in (3, 4):
		return None
	values = list(color[:3])
	if max(values) <= 1.0:
		scale = 255.0
	else:
		scale = 1.0
	channels = []
	for value in values:
		channel = int(round(value * scale))
		channel = max(0, min(channel, 255))
		channels.append(channel)
	return "#%02x%02x%02x" % (channels[0], channels[1], channels[2])


#============================================
def color_to_hex(color):
	if color is None:
		return None
	if isinstance(color, str):
		text = color.strip()
		if not text:
			return None
		return _normalize_hex_color(text)
	if isinstance(color, (tuple, list)):
		return _color_tuple_to_hex(color)
	return None


#============================================
def _color_to_rgba(color):
	text = color_to_hex(color)
	if not text or text == "none" or not text.startswith("#") or len(text) != 7:
		return None
	r = int(text[1:3], 16) / 255.0
	g = int(text[3:5], 16) / 255.0
	b = int(text[5:7], 16) / 255.0
	return (r, g, b, 1.0)


#============================================
def sort_ops(ops):
	ordered = []
	for index, op in sorted(enumerate(ops), key=lambda item: (getattr(item[1], "z", 0), item[0])):
		ordered.append(op)
	return ordered


#============================================
def ops_in_layer(ops, layer):
	return [op for op in ops if op.layer == layer]


#============================================
def _serialize_number(value, digits):
	if isinstance(value, int):
		return value
	if isinstance(value, float):
		return round(value, digits)
	return value


#============================================
def _serialize_list(value, digits):
	return [ _serialize_number(item, digits) for item in value ]


#============================================
def ops_to_json_dict(ops, round_digits=3):
	serialized = []
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			entry = {
				"kind": "line",
				"p1": _serialize_list(op.p1, round_digits),
				"p2": _serialize_list(op.p2, round_digits),
				"width": _serialize_number(op.width, round_digits),
				"cap": op.cap,
				"color": color_to_hex(op.color),
				"dash": _serialize_list(op.dash, round_digits) if op.dash else None,
				"z": op.z,
			}
		elif isinstance(op, CircleOp):
			entry = {
				"kind": "circle",
				"center": _serialize_list(op.center, round_digits),
				"radius": _serialize_number(op.radius, round_digits),
				"fill": color_to_hex(op.fill),
				"stroke": color_to_hex(op.stroke),
				"stroke_width": _serialize_number(op.stroke_width, round_digits),
				"z": op.z,
			}
		elif isinstance(op, TextOp):
			entry = {
				"kind": "text",
				"position": _serialize_list(op.position, round_digits),
				"text": op.text,
				"font_size": _serialize_number(op.font_size, round_digits),
				"color": color_to_hex(op.color),
				"z": op.z,
			}
		else:
			continue
		if op.layer:
			entry["layer"] = op.layer
		if op.op_id:
			entry["id"] = op.op_id
		serialized.append(entry)
	return serialized


#============================================
def ops_to_json_text(ops, round_digits=3):
	return json.dumps(ops_to_json_dict(ops, round_digits=round_digits), indent=2, sort_keys=True)


#============================================
def _dash_text(dash):
	return ",".join(str(value) for value in dash)


#============================================
def ops_to_svg(parent, ops):
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			color = color_to_hex(op.color) or "#000"
			attrs = (( 'x1', str(op.p1[0])),
					( 'y1', str(op.p1[1])),
					( 'x2', str(op.p2[0])),
					( 'y2', str(op.p2[1])),
					( 'stroke-width', str(op.width)),
					( 'stroke', color))
			if op.cap:
				attrs += (( 'stroke-linecap', op.cap),)
			if op.dash:
				attrs += (( 'stroke-dasharray', _dash_text(op.dash)),)
			if op.op_id:
				attrs += (( 'id', op.op_id),)
			dom_extensions.elementUnder(parent, 'line', attrs)
			continue
		if isinstance(op, CircleOp):
			fill = color_to_hex(op.fill) or "none"
			attrs = (( 'cx', str(op.center[0])),
					( 'cy', str(op.center[1])),
					( 'r', str(op.radius)),
					( 'fill', fill))
			stroke = color_to_hex(op.stroke)
			if stroke:
				attrs += (( 'stroke', stroke),
						( 'stroke-width', str(op.stroke_width)))
			else:
				attrs += (( 'stroke', "none"),)
			if op.op_id:
				attrs += (( 'id', op.op_id),)
			dom_extensions.elementUnder(parent, 'circle', attrs)
			continue
		if isinstance(op, TextOp):
			attrs = (( 'x', str(op.position[0])),
					( 'y', str(op.position[1])),
					( 'font-family', op.font_family),
					( 'font-size', str(op.font_size)),
					( 'text-anchor', "middle"),
					( 'dominant-baseline', "central"),
					( 'fill', color_to_hex(op.color) or "#000"),
					( 'stroke', "none"))
			if op.css_class:
				attrs += (( 'class', op.css_class),)
			if op.op_id:
				attrs += (( 'id', op.op_id),)
			dom_extensions.textOnlyElementUnder(parent, 'text', op.text, attrs)


#============================================
def _set_cairo_color(context, color):
	rgba = _color_to_rgba(color)
	if not rgba:
		return False
	r, g, b, a = rgba
	if a >= 1.0:
		context.set_source_rgb(r, g, b)
	else:
		context.set_source_rgba(r, g, b, a)
	return True


#============================================
def ops_to_cairo(context, ops):
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			context.set_line_width(op.width)
			if op.cap == "round":
				context.set_line_cap(1)
			elif op.cap == "square":
				context.set_line_cap(2)
			else:
				context.set_line_cap(0)
			context.set_dash(list(op.dash) if op.dash else [])
			if not _set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			context.move_to(op.p1[0], op.p1[1])
			context.line_to(op.p2[0], op.p2[1])
			context.stroke()
			context.set_dash([])
			continue
		if isinstance(op, CircleOp):
			context.new_path()
			context.arc(op.center[0], op.center[1], op.radius, 0, 2 * math.pi)
			if op.fill and op.fill != "none":
				if not _set_cairo_color(context, op.fill):
					context.set_source_rgb(0, 0, 0)
				if op.stroke:
					context.fill_preserve()
				else:
					context.fill()
			if op.stroke:
				if not _set_cairo_color(context, op.stroke):
					context.set_source_rgb(0, 0, 0)
				context.set_line_width(op.stroke_width)
				context.stroke()
			continue
		if isinstance(op, TextOp):
			context.select_font_face(op.font_family)
			context.set_font_size(op.font_size)
			extents = context.text_extents(op.text)
			# center the ink box on position, like text-anchor=middle + central baseline
			x = op.position[0] - extents.x_bearing - extents.width / 2.0
			y = op.position[1] - extents.y_bearing - extents.height / 2.0
			if not _set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			context.move_to(x, y)
			context.show_text(op.text)
			context.new_path()
