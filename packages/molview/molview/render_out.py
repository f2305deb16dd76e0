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
#--------------------------------------------------------------------------

# Standard Library
import os

# local repo modules
from . import layout as layout_module
from . import svg_out


#============================================
def _resolve_format(filename, format_override):
	if format_override:
		return format_override.lower()
	extension = os.path.splitext(filename)[1].lower().lstrip(".")
	if extension in ("svg", "png", "pdf"):
		return extension
	raise ValueError(
		"Output format could not be determined; use format=svg|png|pdf or a matching filename."
	)


#============================================
def layout_to_output(layout, filename, format=None, scale=1.0, style=None):
	"""Write one LayoutResult to SVG or Cairo-backed output."""
	output_format = _resolve_format(filename, format)
	if output_format == "svg":
		return svg_out.layout_to_svg_file(layout, filename, scale=scale, style=style)
	if output_format not in ("png", "pdf"):
		raise ValueError(f"Unsupported output format: {output_format}")
	try:
		from . import cairo_out
	except ImportError as exc:
		raise RuntimeError("Cairo output requires pycairo.") from exc
	return cairo_out.layout_to_cairo(layout, filename, format=output_format,
			scale=scale, style=style)


#============================================
def structure_to_output(structure, filename, format=None, visibility=None, scale=1.0, style=None):
	"""Lay out a structure and render it using a single entry point."""
	layout = layout_module.compute_layout(structure, visibility)
	return layout_to_output(layout, filename, format=format, scale=scale, style=style)
