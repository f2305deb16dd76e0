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

"""PNG and PDF output of a laid-out molecule through pycairo."""

# Standard Library
import math

# Third Party
import cairo

# local repo modules
from . import layout_ops
from . import render_ops


#============================================
def _surface_size(viewport, scale):
	width = max(1, int(math.ceil(viewport.width * scale)))
	height = max(1, int(math.ceil(viewport.height * scale)))
	return width, height


#============================================
def _draw(context, layout, scale, style, background):
	viewport = layout.viewport
	if background:
		context.save()
		if not render_ops._set_cairo_color(context, background):
			context.set_source_rgb(1, 1, 1)
		context.paint()
		context.restore()
	context.scale(scale, scale)
	context.translate(-viewport.min_x, -viewport.min_y)
	render_ops.ops_to_cairo(context, layout_ops.visible_ops(layout, style))


#============================================
def layout_to_cairo(layout, filename, format="png", scale=1.0, style=None, background="#ffffff"):
	"""Render the visible layers of a layout to a PNG or PDF file.

	Cairo has no hidden groups, so hidden layers are simply not drawn.
	"""
	output_format = format.lower()
	width, height = _surface_size(layout.viewport, scale)
	if output_format == "png":
		surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
		context = cairo.Context(surface)
		_draw(context, layout, scale, style, background)
		surface.write_to_png(filename)
		surface.finish()
		return filename
	if output_format == "pdf":
		surface = cairo.PDFSurface(filename, width, height)
		context = cairo.Context(surface)
		_draw(context, layout, scale, style, background)
		context.show_page()
		surface.finish()
		return filename
	raise ValueError(f"Unsupported cairo format: {format!r}")
