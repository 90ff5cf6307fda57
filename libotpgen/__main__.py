# -*- coding: utf-8 -*-
"""
# HOTP/TOTP generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import argparse
import libotpgen
import os
import sys

__all__ = [
	"main",
]

def getSecret(secret):
	if secret:
		return secret
	secret = os.getenv("OTPGEN_SECRET", "").strip()
	if secret:
		return secret
	return libotpgen.util.readSecret("Secret key (base32)")

def run_gen_secret(nrBytes):
	print(libotpgen.generateSecret(nrBytes))
	return 0

def run_hotp(secret, counter, nrDigits, hmacHash):
	print(libotpgen.hotp(key=secret,
			     counter=counter,
			     nrDigits=nrDigits,
			     hmacHash=hmacHash))
	return 0

def run_totp(secret, nrDigits, hmacHash, period, epochMs):
	print(libotpgen.totp(key=secret,
			     nrDigits=nrDigits,
			     hmacHash=hmacHash,
			     period=period,
			     epochMs=epochMs))
	return 0

def run_validate(secret, token, nrDigits, hmacHash, period, epochMs, window):
	offset = libotpgen.validate(token=token,
				    key=secret,
				    nrDigits=nrDigits,
				    hmacHash=hmacHash,
				    period=period,
				    epochMs=epochMs,
				    window=window)
	if offset is None:
		print("no match")
		return 1
	print("%d" % offset)
	return 0

def main(argv=None):
	p = argparse.ArgumentParser(
		description="HOTP/TOTP one-time password generator - "
			    "otpgen version %s" % libotpgen.__version__)
	p.add_argument("-v", "--version", action="store_true",
		       help="show the otpgen version and exit")
	grp = p.add_mutually_exclusive_group()
	grp.add_argument("-g", "--gen-secret", action="store_true",
			 help="Generate a new random base32 secret key.")
	grp.add_argument("-H", "--hotp", type=int, default=None, metavar="COUNTER",
			 help="Generate the HOTP token for COUNTER.")
	grp.add_argument("-t", "--totp", action="store_true",
			 help="Generate the TOTP token. This is the default.")
	grp.add_argument("-V", "--validate", type=str, default=None, metavar="TOKEN",
			 help="Validate a TOTP token. Prints the matching period offset.")
	p.add_argument("-l", "--length", type=int, default=20, metavar="BYTES",
		       help="The number of random bytes for --gen-secret. Default: 20")
	p.add_argument("-d", "--digits", type=int, default=6,
		       help="The number of token digits. Default: 6")
	p.add_argument("-a", "--algorithm", type=str, default="SHA1",
		       help="The HMAC hash: SHA1, SHA256, SHA384 or SHA512. Default: SHA1")
	p.add_argument("-P", "--period", type=int, default=30, metavar="SECONDS",
		       help="The TOTP period. Default: 30 seconds")
	p.add_argument("-e", "--epoch-ms", type=int, default=None, metavar="MILLISECONDS",
		       help="Use this Unix time instead of the current time.")
	p.add_argument("-w", "--window", type=int, default=1,
		       help="The number of periods before and after the current one "
			    "accepted by --validate. Default: 1")
	p.add_argument("secret", nargs="?", metavar="SECRET", default=None,
		       help="The base32 secret key. If not given, OTPGEN_SECRET is used "
			    "or the key is read from the terminal.")
	args = p.parse_args(argv)

	if args.version:
		print("otpgen version %s" % libotpgen.__version__)
		return 0

	try:
		if args.gen_secret:
			return run_gen_secret(nrBytes=args.length)

		secret = getSecret(args.secret)
		if secret is None:
			return 1
		if args.hotp is not None:
			return run_hotp(secret=secret,
					counter=args.hotp,
					nrDigits=args.digits,
					hmacHash=args.algorithm)
		if args.validate is not None:
			return run_validate(secret=secret,
					    token=args.validate,
					    nrDigits=args.digits,
					    hmacHash=args.algorithm,
					    period=args.period,
					    epochMs=args.epoch_ms,
					    window=args.window)
		return run_totp(secret=secret,
				nrDigits=args.digits,
				hmacHash=args.algorithm,
				period=args.period,
				epochMs=args.epoch_ms)
	except libotpgen.OtpError as e:
		print("Error: " + str(e), file=sys.stderr)
		return 1

if __name__ == "__main__":
	sys.exit(main())
