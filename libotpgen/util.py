# -*- coding: utf-8 -*-
"""
# HOTP/TOTP generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import getpass
import os
import sys

__all__ = [
	"str2bool",
	"debugEnabled",
	"debug",
	"readSecret",
]

def str2bool(string, default=False):
	s = string.lower().strip()
	if not s:
		return default
	if s in ("true", "yes", "on", "1"):
		return True
	if s in ("false", "no", "off", "0"):
		return False
	try:
		return bool(int(s))
	except ValueError:
		return default

def debugEnabled():
	return str2bool(os.getenv("OTPGEN_DEBUG", ""))

def debug(text):
	"""Print a diagnostic message to stderr, if OTPGEN_DEBUG is set.
	Never pass secret keys or tokens to this function.
	"""
	if debugEnabled():
		print("otpgen: %s" % text, file=sys.stderr)

def _do_getpass(prompt):
	if str2bool(os.getenv("OTPGEN_RAWGETPASS", "")):
		return input(prompt)
	else:
		return getpass.getpass(prompt)

def readSecret(prompt):
	"""Read the Base32 secret from the terminal without echo.
	Returns None, if reading was aborted.
	"""
	try:
		while True:
			secret = _do_getpass(prompt + ": ").strip()
			if secret:
				return secret
	except (EOFError, KeyboardInterrupt) as e:
		print("")
		return None
	except (getpass.GetPassWarning) as e:
		print(str(e), file=sys.stderr)
		return None
