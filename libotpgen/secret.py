# -*- coding: utf-8 -*-
"""
# Secret key generator
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.base32 import b32encode
from libotpgen.exception import *
from libotpgen.hmaclib import HMAC

__all__ = [
	"SECRET_BYTES_DEFAULT",
	"SECRET_BYTES_MAX",
	"generateSecret",
]

SECRET_BYTES_DEFAULT = 20
SECRET_BYTES_MAX = 1024

def generateSecret(nrBytes=SECRET_BYTES_DEFAULT):
	"""Generate a new random secret key.
	nrBytes: The number of random key bytes. Can be 1 to 1024.
	         The default of 20 bytes (160 bits) is the RFC 4226 recommendation.
	Returns the base32 encoded key string.
	"""
	if (isinstance(nrBytes, bool) or
	    not isinstance(nrBytes, int) or
	    not (1 <= nrBytes <= SECRET_BYTES_MAX)):
		raise InvalidSecret("Invalid secret length.")
	return b32encode(HMAC.get().randomBytes(nrBytes))
