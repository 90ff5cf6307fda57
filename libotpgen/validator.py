# -*- coding: utf-8 -*-
"""
# TOTP token validation
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import *
from libotpgen.hmaclib import parseHmacHash
from libotpgen.otp import *
from libotpgen.util import debug

import hmac
import re

__all__ = [
	"MAX_WINDOW",
	"stringsEqual",
	"checkWindow",
	"validate",
]

MAX_WINDOW = 10

_tokenRe = re.compile(r"[0-9]+")

def stringsEqual(a, b):
	"""Timing-attack resistant string comparison.
	The running time only depends on max(len(a), len(b)).
	Both strings are scanned completely, even if the lengths differ.
	a, b: The strings to compare. Other types raise TypeError.
	"""
	if not isinstance(a, str) or not isinstance(b, str):
		raise TypeError("stringsEqual: Arguments must be str.")
	a = a.encode("UTF-8")
	b = b.encode("UTF-8")
	size = max(len(a), len(b))
	equal = hmac.compare_digest(a.ljust(size, b"\0"),
				    b.ljust(size, b"\0"))
	return equal and len(a) == len(b)

def checkWindow(window):
	if (isinstance(window, bool) or
	    not isinstance(window, int) or
	    not (0 <= window <= MAX_WINDOW)):
		raise InvalidWindow("Invalid validation window (recommended: 0-2).")
	return window

def validate(token, key, nrDigits=6, hmacHash="SHA1", period=30, epochMs=None, window=1):
	"""Validate a TOTP token (RFC 6238, section 5.2).
	token: The token string entered by the user.
	key: The TOTP key. Either raw bytes or a base32 encoded string.
	nrDigits: The number of token digits. Can be 1 to 10.
	hmacHash: The name string of the hashing algorithm.
	period: The time step in seconds.
	epochMs: Optional; the Unix time in milliseconds. Uses time.time(), if not given.
	window: The number of periods before and after the current one
	        that are accepted to tolerate clock drift.
	        Use window=0 for high value operations.
	Returns the period offset of the match: 0 for the current period,
	-1 for the previous one (client clock is behind), 1 for the next one
	(client clock is ahead) and so on.
	Returns None, if the token does not match.
	Malformed tokens do not match. They do not raise an exception.
	"""
	# Check the configuration before looking at the token.
	key = decodeKey(key)
	checkDigits(nrDigits)
	hmacHash = parseHmacHash(hmacHash)
	checkWindow(window)
	current = timeCounter(epochMs, period)

	if (not isinstance(token, str) or
	    len(token) != nrDigits or
	    not _tokenRe.fullmatch(token)):
		return None

	debug("Validating counters %d to %d." % (current - window, current + window))
	for offset in range(-window, window + 1):
		counter = current + offset
		if not (0 <= counter <= COUNTER_MAX):
			continue
		expected = hotp(key, counter, nrDigits, hmacHash)
		if stringsEqual(expected, token):
			debug("Token matched at offset %d." % offset)
			return offset
	debug("Token did not match.")
	return None
