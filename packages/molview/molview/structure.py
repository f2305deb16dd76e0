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

"""Molecule structure records, layer visibility and JSON loading."""

# Standard Library
import dataclasses
import json
import math

# local repo modules
from . import constants


#============================================
class StructureError(ValueError):
	"""Raised when a structure record is missing required fields."""


#============================================
@dataclasses.dataclass(frozen=True)
class MoleculeAtom:
	id: str
	symbol: str
	x: float
	y: float
	ox: int | None = None
	lone_pairs: int | None = None
	label: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class MoleculeBond:
	from_id: str
	to_id: str
	order: int = 1
	dative: bool = False


#============================================
@dataclasses.dataclass(frozen=True)
class MoleculePolarity:
	from_id: str
	to_id: str
	delta_plus: str
	delta_minus: str


#============================================
@dataclasses.dataclass(frozen=True)
class MoleculeStructure:
	id: str
	atoms: tuple[MoleculeAtom, ...] = ()
	bonds: tuple[MoleculeBond, ...] = ()
	polarity: tuple[MoleculePolarity, ...] = ()

	def atom_map(self):
		return {atom.id: atom for atom in self.atoms}


#============================================
@dataclasses.dataclass(frozen=True)
class LayerVisibility:
	bonds: bool = True
	ox_states: bool = False
	charges: bool = False
	lone_pairs: bool = False


# JSON-style layer keys used by the content pipeline
_LAYER_KEY_ALIASES = {
	"bonds": "bonds",
	"oxStates": "ox_states",
	"ox_states": "ox_states",
	"charges": "charges",
	"lonePairs": "lone_pairs",
	"lone_pairs": "lone_pairs",
}


#============================================
def layer_field_name(key):
	"""Map a JSON or snake_case layer key to a LayerVisibility field name."""
	try:
		return _LAYER_KEY_ALIASES[key]
	except KeyError:
		raise ValueError(f"Unknown layer: {key!r}") from None


#============================================
def make_visibility(layers=None):
	"""Merge a partial layer mapping over the default visibility.

	Args:
		layers: None, a LayerVisibility, or a mapping of layer key -> bool.
			Keys may be camelCase (oxStates) or snake_case (ox_states).

	Returns:
		LayerVisibility
	"""
	if layers is None:
		return LayerVisibility()
	if isinstance(layers, LayerVisibility):
		return layers
	values = {}
	for key, value in layers.items():
		if value is None:
			continue
		values[layer_field_name(key)] = bool(value)
	return LayerVisibility(**values)


#============================================
def atom_position(atom):
	"""Return the atom center in visual units."""
	return (atom.x * constants.UNIT, atom.y * constants.UNIT)


#============================================
def find_dangling_bonds(structure):
	"""Return bonds whose endpoints do not name an atom of the structure."""
	atom_ids = {atom.id for atom in structure.atoms}
	return [bond for bond in structure.bonds
			if bond.from_id not in atom_ids or bond.to_id not in atom_ids]


#============================================
def _require(record, key, kind):
	if not isinstance(record, dict):
		raise StructureError(f"{kind} record must be a JSON object, got {type(record).__name__}")
	if key not in record:
		raise StructureError(f"{kind} record is missing required key {key!r}")
	return record[key]


#============================================
def _float_field(record, key, kind):
	value = _require(record, key, kind)
	if isinstance(value, bool):
		raise StructureError(f"{kind} {key!r} must be a number, got {value!r}")
	try:
		number = float(value)
	except (TypeError, ValueError):
		raise StructureError(f"{kind} {key!r} must be a number, got {value!r}") from None
	if not math.isfinite(number):
		raise StructureError(f"{kind} {key!r} must be finite, got {value!r}")
	return number


#============================================
def _whole_number(value, key, kind):
	"""Accept ints and integral floats; anything else is a StructureError."""
	if isinstance(value, bool):
		raise StructureError(f"{kind} {key!r} must be an integer, got {value!r}")
	if isinstance(value, int):
		return value
	if isinstance(value, float) and value.is_integer():
		return int(value)
	raise StructureError(f"{kind} {key!r} must be an integer, got {value!r}")


#============================================
def _optional_int(record, key, kind):
	value = record.get(key)
	if value is None:
		return None
	return _whole_number(value, key, kind)


#============================================
def _records(data, key):
	items = data.get(key)
	if items is None:
		return ()
	if not isinstance(items, list):
		raise StructureError(f"structure {key!r} must be a JSON array")
	return items


#============================================
def atom_from_dict(record):
	return MoleculeAtom(
		id=str(_require(record, "id", "atom")),
		symbol=str(_require(record, "symbol", "atom")),
		x=_float_field(record, "x", "atom"),
		y=_float_field(record, "y", "atom"),
		ox=_optional_int(record, "ox", "atom"),
		lone_pairs=_optional_int(record, "lonePairs", "atom"),
		label=record.get("label"),
	)


#============================================
def bond_from_dict(record):
	return MoleculeBond(
		from_id=str(_require(record, "from", "bond")),
		to_id=str(_require(record, "to", "bond")),
		order=_whole_number(_require(record, "order", "bond"), "order", "bond"),
		dative=bool(record.get("dative", False)),
	)


#============================================
def polarity_from_dict(record):
	return MoleculePolarity(
		from_id=str(_require(record, "from", "polarity")),
		to_id=str(_require(record, "to", "polarity")),
		delta_plus=str(_require(record, "deltaPlus", "polarity")),
		delta_minus=str(_require(record, "deltaMinus", "polarity")),
	)


#============================================
def structure_from_dict(data):
	"""Build a MoleculeStructure from one JSON structure record.

	Presence and type of fields are checked here; a bad field raises
	StructureError. Bond order ranges, lone pair counts and bond
	references are trusted as validated upstream.
	"""
	if not isinstance(data, dict):
		raise StructureError("structure record must be a JSON object")
	structure_id = str(_require(data, "id", "structure"))
	_require(data, "atoms", "structure")
	atoms = tuple(atom_from_dict(item) for item in _records(data, "atoms"))
	bonds = tuple(bond_from_dict(item) for item in _records(data, "bonds"))
	polarity = tuple(polarity_from_dict(item) for item in _records(data, "polarity"))
	return MoleculeStructure(id=structure_id, atoms=atoms, bonds=bonds, polarity=polarity)


#============================================
def structure_to_dict(structure):
	"""Serialize a MoleculeStructure back to its JSON record shape."""
	atoms = []
	for atom in structure.atoms:
		entry = {"id": atom.id, "symbol": atom.symbol, "x": atom.x, "y": atom.y}
		if atom.ox is not None:
			entry["ox"] = atom.ox
		if atom.lone_pairs is not None:
			entry["lonePairs"] = atom.lone_pairs
		if atom.label is not None:
			entry["label"] = atom.label
		atoms.append(entry)
	bonds = []
	for bond in structure.bonds:
		entry = {"from": bond.from_id, "to": bond.to_id, "order": bond.order}
		if bond.dative:
			entry["dative"] = True
		bonds.append(entry)
	data = {"id": structure.id, "atoms": atoms, "bonds": bonds}
	if structure.polarity:
		data["polarity"] = [
			{"from": pol.from_id, "to": pol.to_id,
				"deltaPlus": pol.delta_plus, "deltaMinus": pol.delta_minus}
			for pol in structure.polarity
		]
	return data


#============================================
def load_structure(path):
	"""Read one structure JSON file."""
	with open(path, "r", encoding="utf-8") as handle:
		try:
			data = json.load(handle)
		except json.JSONDecodeError as exc:
			raise StructureError(f"{path}: invalid JSON ({exc})") from exc
		except UnicodeDecodeError as exc:
			raise StructureError(f"{path}: not UTF-8 text ({exc.reason})") from exc
	return structure_from_dict(data)
