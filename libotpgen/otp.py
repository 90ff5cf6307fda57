# -*- coding: utf-8 -*-
"""
# HOTP/TOTP support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.base32 import b32decode
from libotpgen.exception import *
from libotpgen.hmaclib import HMAC, parseHmacHash

import math
import time
from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
	"COUNTER_MAX",
	"DIGITS_MAX",
	"truncate",
	"counterToBytes",
	"checkDigits",
	"checkPeriod",
	"decodeKey",
	"timeCounter",
	"remainingSeconds",
	"hotp",
	"totp",
	"TOTP",
]

COUNTER_MAX = (2 ** 64) - 1
DIGITS_MAX = 10

def _isInt(value):
	return isinstance(value, int) and not isinstance(value, bool)

def checkDigits(nrDigits):
	if not _isInt(nrDigits) or not (1 <= nrDigits <= DIGITS_MAX):
		raise InvalidDigits("Invalid number of digits.")
	return nrDigits

def checkPeriod(period):
	if not _isInt(period) or period <= 0:
		raise InvalidPeriod("Invalid TOTP period.")
	return period

def decodeKey(key):
	"""Get the raw key bytes.
	key: Either raw bytes or a base32 encoded string.
	"""
	if isinstance(key, str):
		key = b32decode(key)
	elif isinstance(key, (bytes, bytearray)):
		key = bytes(key)
	else:
		raise InvalidSecret("Invalid key.")
	if not key:
		raise InvalidSecret("Invalid key.")
	return key

def truncate(digest, nrDigits=6):
	"""Dynamic truncation (RFC 4226, section 5.3).
	digest: The HMAC digest bytes.
	nrDigits: The number of digits to return. Can be 1 to 10.
	Returns the zero padded decimal token string.
	"""
	if len(digest) < 4:
		raise DigestTooShort("HMAC result is too short.")
	checkDigits(nrDigits)
	offset = digest[-1] & 0xF
	if offset + 4 > len(digest):
		raise OffsetOutOfBounds("Calculated offset is out of bounds "
					"for the HMAC result.")
	hSlice = int.from_bytes(digest[offset:offset+4], byteorder="big", signed=False)
	hSlice &= 0x7FFFFFFF
	otp = hSlice % (10 ** nrDigits)
	fmt = "%0" + str(nrDigits) + "d"
	return fmt % otp

def counterToBytes(counter):
	"""Serialize a HOTP counter as 8 byte big endian.
	"""
	if not _isInt(counter) or not (0 <= counter <= COUNTER_MAX):
		raise InvalidCounter("Invalid counter.")
	high, low = divmod(counter, 2 ** 32)
	return (high.to_bytes(length=4, byteorder="big", signed=False) +
		low.to_bytes(length=4, byteorder="big", signed=False))

def _nowMs():
	return time.time() * 1000.0

def timeCounter(epochMs=None, period=30):
	"""Get the TOTP counter for a point in time.
	epochMs: The Unix time in milliseconds. Uses the current time, if not given.
	period: The TOTP period in seconds.
	"""
	checkPeriod(period)
	if epochMs is None:
		epochMs = _nowMs()
	if _isInt(epochMs):
		# Exact integer arithmetic.
		counter = epochMs // (1000 * period)
	elif isinstance(epochMs, float) and math.isfinite(epochMs):
		counter = math.floor(epochMs / 1000.0 / period)
	else:
		raise InvalidCounter("Invalid epoch time.")
	if not (0 <= counter <= COUNTER_MAX):
		raise InvalidCounter("Invalid epoch time.")
	return counter

def remainingSeconds(epochMs=None, period=30):
	"""Get the number of seconds until the current TOTP period ends.
	"""
	if epochMs is None:
		epochMs = _nowMs()
	counter = timeCounter(epochMs, period)
	return ((counter + 1) * period) - (epochMs / 1000.0)

def hotp(key, counter=0, nrDigits=6, hmacHash="SHA1"):
	"""HOTP - An HMAC-Based One-Time Password Algorithm.
	key: The HOTP key. Either raw bytes or a base32 encoded string.
	counter: The HOTP counter integer.
	nrDigits: The number of digits to return. Can be 1 to 10.
	hmacHash: The name string of the hashing algorithm.
	Returns the calculated HOTP token string.
	"""
	key = decodeKey(key)
	message = counterToBytes(counter)
	checkDigits(nrDigits)
	hmacHash = parseHmacHash(hmacHash)

	h = HMAC.get().digest(key, message, hmacHash)
	return truncate(h, nrDigits)

def totp(key, nrDigits=6, hmacHash="SHA1", period=30, epochMs=None):
	"""TOTP - Time-Based One-Time Password Algorithm.
	key: The TOTP key. Either raw bytes or a base32 encoded string.
	nrDigits: The number of digits to return. Can be 1 to 10.
	hmacHash: The name string of the hashing algorithm.
	period: The time step in seconds.
	epochMs: Optional; the Unix time in milliseconds. Uses time.time(), if not given.
	Returns the calculated TOTP token string.
	"""
	counter = timeCounter(epochMs, period)
	return hotp(key, counter, nrDigits, hmacHash)

@dataclass
class TOTP:
	"""TOTP key and parameters.
	"""
	key		: Union[str, bytes]
	nrDigits	: int = 6
	hmacHash	: str = "SHA1"
	period		: int = 30
	window		: int = 1

	def generate(self, epochMs=None):
		return totp(key=self.key,
			    nrDigits=self.nrDigits,
			    hmacHash=self.hmacHash,
			    period=self.period,
			    epochMs=epochMs)

	def validate(self, token, epochMs=None) -> Optional[int]:
		from libotpgen.validator import validate
		return validate(token=token,
				key=self.key,
				nrDigits=self.nrDigits,
				hmacHash=self.hmacHash,
				period=self.period,
				epochMs=epochMs,
				window=self.window)

	def remaining(self, epochMs=None):
		return remainingSeconds(epochMs, self.period)
