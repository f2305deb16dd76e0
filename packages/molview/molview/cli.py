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

"""Command-line renderer for molecule structure JSON files."""

# Standard Library
import argparse
import json
import sys

# local repo modules
from . import layout as layout_module
from . import render_out
from . import structure as structure_module


#============================================
def parse_args(argv=None) -> argparse.Namespace:
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(
		prog="molview",
		description="Lay out and render one molecule structure JSON file.",
	)
	parser.add_argument(
		"input",
		type=str,
		help="Structure JSON file.",
	)
	parser.add_argument(
		"-o", "--output",
		dest="output",
		type=str,
		default=None,
		help="Output file (.svg, .png or .pdf). Required unless --json is given.",
	)
	parser.add_argument(
		"-f", "--format",
		dest="format",
		choices=("svg", "png", "pdf"),
		default=None,
		help="Output format (default: from the output extension).",
	)
	parser.add_argument(
		"-x", "--ox",
		dest="ox_states",
		action="store_true",
		help="Show oxidation-state labels.",
	)
	parser.add_argument(
		"-c", "--charges",
		dest="charges",
		action="store_true",
		help="Show partial-charge labels.",
	)
	parser.add_argument(
		"-l", "--lone-pairs",
		dest="lone_pairs",
		action="store_true",
		help="Show lone-pair dots.",
	)
	parser.add_argument(
		"-n", "--no-bonds",
		dest="bonds",
		action="store_false",
		help="Hide the bond layer.",
	)
	parser.add_argument(
		"-a", "--all-layers",
		dest="all_layers",
		action="store_true",
		help="Show every layer.",
	)
	parser.add_argument(
		"-s", "--scale",
		dest="scale",
		type=float,
		default=1.0,
		help="Output size multiplier.",
	)
	parser.add_argument(
		"-j", "--json",
		dest="json",
		action="store_true",
		help="Print the layout as JSON instead of rendering.",
	)
	parser.set_defaults(bonds=True)
	args = parser.parse_args(argv)
	if not args.json and not args.output:
		parser.error("an output file is required unless --json is given")
	return args


#============================================
def visibility_from_args(args):
	if args.all_layers:
		return structure_module.LayerVisibility(
			bonds=True, ox_states=True, charges=True, lone_pairs=True,
		)
	return structure_module.LayerVisibility(
		bonds=args.bonds,
		ox_states=args.ox_states,
		charges=args.charges,
		lone_pairs=args.lone_pairs,
	)


#============================================
def _warn_dangling_bonds(structure):
	for bond in structure_module.find_dangling_bonds(structure):
		print(f"warning: {structure.id}: bond {bond.from_id}-{bond.to_id} "
				"references a missing atom and is not drawn", file=sys.stderr)


#============================================
def main(argv=None):
	args = parse_args(argv)
	try:
		structure = structure_module.load_structure(args.input)
	except (OSError, structure_module.StructureError) as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 1
	_warn_dangling_bonds(structure)
	visibility = visibility_from_args(args)
	if args.json:
		layout = layout_module.compute_layout(structure, visibility)
		print(json.dumps(layout_module.layout_to_dict(layout), indent=2, ensure_ascii=False))
		return 0
	render_out.structure_to_output(
		structure, args.output, format=args.format,
		visibility=visibility, scale=args.scale,
	)
	print(f"wrote {args.output}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
