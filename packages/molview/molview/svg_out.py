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

"""SVG output of a laid-out molecule, one group per layer."""

# Standard Library
import xml.dom.minidom as dom

# local repo modules
from . import constants
from . import dom_extensions
from . import layout_ops
from . import render_ops
from . import safe_xml


#============================================
class svg_out(object):

	# multiplier from viewport units to the width/height attributes
	scale = 1.0
	style = None
	# emit hidden layers as display=none groups instead of dropping them
	keep_hidden_layers = True

	def __init__(self, **options):
		for key, value in options.items():
			if not hasattr(self, key):
				raise ValueError(f"Unknown svg_out option: {key}")
			setattr(self, key, value)

	def layout_to_svg(self, layout):
		"""Return a minidom Document for one LayoutResult."""
		self.document = dom.Document()
		viewport = layout.viewport
		top = dom_extensions.elementUnder(
			self.document,
			"svg",
			attributes=(
				("xmlns", "http://www.w3.org/2000/svg"),
				("version", "1.1"),
				("viewBox", viewport.view_box),
				("width", f"{viewport.width * self.scale:g}"),
				("height", f"{viewport.height * self.scale:g}"),
				("role", "img"),
				("aria-label", f"Molecule structure {layout.structure_id}"),
			),
		)
		ops = layout_ops.layout_to_ops(layout, self.style)
		for layer in constants.LAYER_NAMES:
			visible = layout_ops.layer_is_visible(layout.visibility, layer)
			if not visible and not self.keep_hidden_layers:
				continue
			attrs = (("class", "mol-layer" if visible else "mol-layer mol-layer--hidden"),
					("data-layer", layer))
			if not visible:
				attrs += (("display", "none"),)
			group = dom_extensions.elementUnder(top, "g", attrs)
			render_ops.ops_to_svg(group, render_ops.ops_in_layer(ops, layer))
		return self.document


#============================================
def pretty_print_svg(svg_bytes):
	"""Re-indent serialized SVG, parsing it back through defusedxml."""
	doc = safe_xml.parse_dom_from_string(svg_bytes)
	text = doc.toprettyxml(indent="  ")
	lines = [line for line in text.splitlines() if line.strip()]
	return "\n".join(lines) + "\n"


#============================================
def layout_to_svg_text(layout, **options):
	renderer = svg_out(**options)
	doc = renderer.layout_to_svg(layout)
	return pretty_print_svg(doc.toxml("utf-8"))


#============================================
def layout_to_svg_file(layout, filename, **options):
	svg_text = layout_to_svg_text(layout, **options)
	with open(filename, "w", encoding="utf-8") as handle:
		handle.write(svg_text)
	return filename
