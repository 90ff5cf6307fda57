from otpgen_tstlib import *
initTest(__file__)

from libotpgen.exception import *
from libotpgen.otp import totp
from libotpgen.validator import *

import timeit
from unittest import mock

KEY = "JBSWY3DPEHPK3PXP"

class Test_StringsEqual(TestCase):
	def test_equal(self):
		self.assertTrue(stringsEqual("", ""))
		self.assertTrue(stringsEqual("123456", "123456"))
		self.assertFalse(stringsEqual("123456", "123457"))
		self.assertFalse(stringsEqual("123456", "023456"))
		self.assertFalse(stringsEqual("123456", "12345"))
		self.assertFalse(stringsEqual("12345", "123456"))
		self.assertFalse(stringsEqual("123456", "123456\0"))
		self.assertFalse(stringsEqual("", "1"))

	def test_types(self):
		for a, b in ((b"123456", "123456"), ("123456", b"123456"),
			     (None, "123456"), ("123456", None), (123456, "123456")):
			self.assertRaises(TypeError, lambda: stringsEqual(a, b))

	def test_timing(self):
		# The comparison time must not depend on the mismatch position.
		ref = "1234567890" * 100
		first = "x" + ref[1:]
		last = ref[:-1] + "x"
		def measure(other):
			return min(timeit.repeat(lambda: stringsEqual(ref, other),
						 number=2000, repeat=7))
		tFirst = measure(first)
		tLast = measure(last)
		ratio = tFirst / tLast
		self.assertTrue(0.5 < ratio < 2.0, "timing ratio %f" % ratio)

class Test_Validate(TestCase):
	def test_symmetry(self):
		for epochMs in (0, 1000, 29999, 30000, 1465324707000,
				1566319890123, 20000000000000, 1700000000000.5):
			token = totp(key=KEY, epochMs=epochMs)
			self.assertEqual(validate(token, KEY, epochMs=epochMs, window=0), 0)
			self.assertEqual(validate(token, KEY, epochMs=epochMs), 0)
		for hmacHash in ("SHA1", "SHA256", "SHA384", "SHA512"):
			for nrDigits in (1, 6, 8, 10):
				token = totp(key=KEY, nrDigits=nrDigits, hmacHash=hmacHash,
					     period=60, epochMs=1465324707000)
				self.assertEqual(validate(token, KEY,
							  nrDigits=nrDigits,
							  hmacHash=hmacHash,
							  period=60,
							  epochMs=1465324707000,
							  window=0),
						 0)

	def test_now(self):
		token = totp(key=KEY)
		self.assertIn(validate(token, KEY), (0, -1))

	def test_window_boundary(self):
		T = 1465324710000 # Period boundary
		before = totp(key=KEY, epochMs=T - 1000)
		at = totp(key=KEY, epochMs=T)
		self.assertNotEqual(before, at)
		self.assertEqual(validate(before, KEY, epochMs=T, window=1), -1)
		self.assertIsNone(validate(before, KEY, epochMs=T, window=0))
		self.assertEqual(validate(at, KEY, epochMs=T - 1000, window=1), 1)
		self.assertIsNone(validate(at, KEY, epochMs=T - 1000, window=0))

	def test_window_offsets(self):
		T = 1465324710000
		for offset in range(-3, 4):
			token = totp(key=KEY, epochMs=T + offset * 30000)
			self.assertEqual(validate(token, KEY, epochMs=T, window=3), offset)
			self.assertEqual(validate(token, KEY, epochMs=T, window=5), offset)
			if offset:
				self.assertIsNone(validate(token, KEY, epochMs=T,
							   window=abs(offset) - 1))

	def test_epoch_zero(self):
		token = totp(key=KEY, epochMs=0)
		self.assertEqual(validate(token, KEY, epochMs=0, window=2), 0)
		self.assertIsNone(validate("000000" if token != "000000" else "000001",
					   KEY, epochMs=0, window=0))

	def test_first_match(self):
		# Ties are resolved in ascending offset order.
		with mock.patch("libotpgen.validator.hotp", return_value="123456") as h:
			self.assertEqual(validate("123456", KEY, epochMs=600000, window=2), -2)
			self.assertEqual(h.call_count, 1)
		with mock.patch("libotpgen.validator.hotp", return_value="654321") as h:
			self.assertIsNone(validate("123456", KEY, epochMs=600000, window=2))
			self.assertEqual(h.call_count, 5)

	def test_malformed_token(self):
		token = totp(key=KEY, epochMs=0)
		for bad in ("", "12345", "1234567", "12a456", " 23456", "12345 ",
			    "-12345", "+12345", "1.2345", "１２３４５６", "١٢٣٤٥٦",
			    None, 123456, b"123456", token.encode("ASCII")):
			self.assertIsNone(validate(bad, KEY, epochMs=0))
		self.assertIsNone(validate(token, KEY, nrDigits=8, epochMs=0))

	def test_config_errors(self):
		token = totp(key=KEY, epochMs=0)
		for window in (-1, 11, 1.5, True, "1", None):
			self.assertRaises(InvalidWindow,
					  lambda: validate(token, KEY, epochMs=0, window=window))
		self.assertRaises(InvalidWindow,
				  lambda: validate("bad", KEY, epochMs=0, window=-1))
		self.assertRaises(InvalidDigits, lambda: validate(token, KEY, nrDigits=11))
		self.assertRaises(InvalidDigits, lambda: validate(token, KEY, nrDigits=0))
		self.assertRaises(InvalidPeriod, lambda: validate(token, KEY, period=0))
		self.assertRaises(UnsupportedAlgorithm,
				  lambda: validate(token, KEY, hmacHash="SHA3"))
		self.assertRaises(InvalidSecret, lambda: validate(token, "INVALID1"))
		self.assertRaises(InvalidSecret, lambda: validate(token, ""))
		self.assertRaises(InvalidSecret, lambda: validate(token, "A", epochMs=0))
		self.assertRaises(InvalidSecret, lambda: validate(token, "a===", epochMs=0))
		self.assertRaises(InvalidCounter, lambda: validate(token, KEY, epochMs=-1))
		self.assertEqual(validate(token, KEY, epochMs=0, window=MAX_WINDOW), 0)
