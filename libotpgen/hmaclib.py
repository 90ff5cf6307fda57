# -*- coding: utf-8 -*-
"""
# HMAC and random number wrapper
# Copyright (c) 2023-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import *
from libotpgen.util import debug

import os
import threading

__all__ = [
	"HMAC_HASHES",
	"parseHmacHash",
	"HMAC",
]

HMAC_HASHES = (
	"SHA1",
	"SHA256",
	"SHA384",
	"SHA512",
)

def parseHmacHash(hmacHash):
	"""Normalize a hash algorithm name.
	hmacHash: The name string of the hashing algorithm.
	          Case, spaces, dashes and underscores are ignored.
	Returns the canonical name from HMAC_HASHES.
	"""
	if not isinstance(hmacHash, str):
		raise UnsupportedAlgorithm("Invalid HMAC hash type.")
	name = hmacHash.replace("-", "")
	name = name.replace("_", "")
	name = name.replace(" ", "")
	name = name.upper().strip()
	if name not in HMAC_HASHES:
		raise UnsupportedAlgorithm("Invalid HMAC hash type.")
	return name

class HMAC:
	"""Abstraction layer for the HMAC and random number implementation.
	"""

	__singleton = None
	__singletonLock = threading.Lock()

	@classmethod
	def get(cls):
		"""Get the HMAC singleton.
		"""
		inst = cls.__singleton
		if inst is None:
			with cls.__singletonLock:
				if cls.__singleton is None:
					cls.__singleton = cls()
				inst = cls.__singleton
		return inst

	def __init__(self, cryptolib=None):
		"""cryptolib: The backend to use: "cryptodome" or "hashlib".
		              If not given, OTPGEN_CRYPTOLIB is used.
		"""
		self.__cryptodome = None
		self.__hashlib = None
		self.__secrets = None

		if cryptolib is None:
			cryptolib = os.getenv("OTPGEN_CRYPTOLIB", "")
		cryptolib = cryptolib.lower().strip()

		if cryptolib in ("", "cryptodome", "pycryptodomex"):
			try:
				import Cryptodome
				import Cryptodome.Hash.HMAC
				import Cryptodome.Hash.SHA1
				import Cryptodome.Hash.SHA256
				import Cryptodome.Hash.SHA384
				import Cryptodome.Hash.SHA512
				import Cryptodome.Random
				self.__cryptodome = Cryptodome
				self.__hashes = {
					"SHA1"   : Cryptodome.Hash.SHA1,
					"SHA256" : Cryptodome.Hash.SHA256,
					"SHA384" : Cryptodome.Hash.SHA384,
					"SHA512" : Cryptodome.Hash.SHA512,
				}
				debug("Using Cryptodome HMAC backend.")
				return
			except ImportError as e:
				pass

		if cryptolib == "hashlib":
			# Use the Python standard library, but only if explicitly selected.
			import hashlib
			import hmac
			import secrets
			self.__hashlib = hmac
			self.__secrets = secrets
			self.__hashes = {
				"SHA1"   : hashlib.sha1,
				"SHA256" : hashlib.sha256,
				"SHA384" : hashlib.sha384,
				"SHA512" : hashlib.sha512,
			}
			debug("Using hashlib HMAC backend.")
			return

		msg = "Python module import error."
		if cryptolib in ("", "cryptodome", "pycryptodomex"):
			msg += "\n'pycryptodomex' is not installed."
		else:
			msg += "\n'OTPGEN_CRYPTOLIB=%s' is not supported." % cryptolib
		raise OtpError(msg)

	@property
	def backend(self):
		if self.__cryptodome is not None:
			return "cryptodome"
		return "hashlib"

	def digest(self, key, message, hmacHash="SHA1"):
		"""Calculate a HMAC.
		key: The raw key bytes.
		message: The message bytes.
		hmacHash: The name string of the hashing algorithm.
		Returns the digest bytes.
		"""
		hashMod = self.__hashes[parseHmacHash(hmacHash)]
		if self.__cryptodome is not None:
			h = self.__cryptodome.Hash.HMAC.new(key,
							    msg=message,
							    digestmod=hashMod)
			return h.digest()
		return self.__hashlib.new(key, message, hashMod).digest()

	def randomBytes(self, nrBytes):
		"""Return cryptographically secure random bytes.
		nrBytes: The number of bytes to return.
		"""
		try:
			if self.__cryptodome is not None:
				data = self.__cryptodome.Random.get_random_bytes(nrBytes)
			else:
				data = self.__secrets.token_bytes(nrBytes)
		except (NotImplementedError, OSError) as e:
			raise RngUnavailable("Random number generator error: %s" % str(e))
		if len(data) != nrBytes:
			raise RngUnavailable("Random number generator: "
					     "Sanity check failed (length).")
		return data

	@classmethod
	def quickSelfTest(cls):
		"""Run a quick algorithm self test.
		"""
		inst = cls.get()
		# RFC 4226, Appendix D, count 0
		h = inst.digest(key=b"12345678901234567890",
				message=bytes(8),
				hmacHash="SHA1")
		if h != bytes.fromhex("cc93cf18508d94934c64b65d8ba7667fb7cde4b0"):
			raise OtpError("HMAC: Quick self test failed.")
