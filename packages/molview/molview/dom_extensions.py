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

"""Small helpers for building DOM trees with xml.dom.minidom."""


#============================================
def _owner_document(parent):
	if parent.nodeType == parent.DOCUMENT_NODE:
		return parent
	return parent.ownerDocument


#============================================
def elementUnder(parent, name, attributes=()):
	"""Create element name with attributes and append it to parent."""
	element = _owner_document(parent).createElement(name)
	for key, value in attributes:
		element.setAttribute(key, value)
	parent.appendChild(element)
	return element


#============================================
def textOnlyElementUnder(parent, name, text, attributes=()):
	"""Create element name holding only a text node."""
	element = elementUnder(parent, name, attributes)
	element.appendChild(_owner_document(parent).createTextNode(text))
	return element
