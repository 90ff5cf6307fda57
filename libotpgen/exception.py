# -*- coding: utf-8 -*-
"""
# HOTP/TOTP generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"OtpError",
	"InvalidSecret",
	"InvalidEncoding",
	"InvalidCounter",
	"InvalidDigits",
	"InvalidPeriod",
	"InvalidWindow",
	"UnsupportedAlgorithm",
	"RngUnavailable",
	"TruncationError",
	"DigestTooShort",
	"OffsetOutOfBounds",
]

class OtpError(Exception):
	"""Main otpgen exception.
	"""

class InvalidSecret(OtpError):
	"""The secret key is empty or malformed.
	"""

class InvalidEncoding(InvalidSecret):
	"""The Base32 text is empty or contains invalid characters.
	"""

class InvalidCounter(OtpError):
	"""The HOTP counter is negative, not an integer or exceeds 64 bits.
	"""

class InvalidDigits(OtpError):
	"""The number of token digits is not an integer in 1-10.
	"""

class InvalidPeriod(OtpError):
	"""The TOTP period is not a positive integer.
	"""

class InvalidWindow(OtpError):
	"""The validation window is negative or too big.
	"""

class UnsupportedAlgorithm(OtpError):
	"""The HMAC hash algorithm is not supported.
	"""

class RngUnavailable(OtpError):
	"""No cryptographically secure random source is available.
	"""

class TruncationError(OtpError):
	"""Dynamic truncation failed. The digest is corrupted.
	"""

class DigestTooShort(TruncationError):
	pass

class OffsetOutOfBounds(TruncationError):
	pass
