# -*- coding: utf-8 -*-
"""
# Base32 codec (RFC 4648)
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import InvalidEncoding

__all__ = [
	"B32_ALPHABET",
	"b32encode",
	"b32decode",
]

B32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
B32_PAD = "="

_B32_VALUES = { c : i for i, c in enumerate(B32_ALPHABET) }

def b32encode(data):
	"""Encode bytes into a padded Base32 string.
	data: The bytes to encode.
	Returns the Base32 string. Empty data encodes to an empty string.
	"""
	data = bytes(data)
	if not data:
		return ""

	symbols = []
	acc = 0
	nrBits = 0
	for byte in data:
		acc = (acc << 8) | byte
		nrBits += 8
		while nrBits >= 5:
			nrBits -= 5
			symbols.append(B32_ALPHABET[(acc >> nrBits) & 0x1F])
		acc &= (1 << nrBits) - 1
	if nrBits > 0:
		# Fill the last symbol with zero bits.
		symbols.append(B32_ALPHABET[(acc << (5 - nrBits)) & 0x1F])

	nrPad = (8 - (len(symbols) % 8)) % 8
	return "".join(symbols) + (B32_PAD * nrPad)

def b32decode(text):
	"""Decode a Base32 string into bytes.
	text: The Base32 string. Case, whitespace and padding are ignored.
	Returns the decoded bytes.
	Trailing bits that do not form a full byte are discarded.
	Raises InvalidEncoding on empty input or invalid characters.
	"""
	if isinstance(text, (bytes, bytearray)):
		try:
			text = text.decode("ASCII")
		except UnicodeError:
			raise InvalidEncoding("Invalid Base32 string.")
	if not isinstance(text, str):
		raise InvalidEncoding("Invalid Base32 string.")

	text = "".join(text.split()).replace(B32_PAD, "").upper()
	if not text:
		raise InvalidEncoding("Empty Base32 string.")

	out = bytearray()
	acc = 0
	nrBits = 0
	for c in text:
		value = _B32_VALUES.get(c)
		if value is None:
			raise InvalidEncoding("Invalid Base32 string.")
		acc = (acc << 5) | value
		nrBits += 5
		if nrBits >= 8:
			nrBits -= 8
			out.append((acc >> nrBits) & 0xFF)
			acc &= (1 << nrBits) - 1
	return bytes(out)
