# -*- coding: utf-8 -*-

import sys
if sys.version_info[0:2] < (3, 7):
	raise Exception("otpgen requires Python >=3.7")
del sys

import libotpgen.base32
import libotpgen.exception
import libotpgen.hmaclib
import libotpgen.otp
import libotpgen.secret
import libotpgen.util
import libotpgen.validator
import libotpgen.version

from libotpgen.base32 import *
from libotpgen.exception import *
from libotpgen.hmaclib import *
from libotpgen.otp import *
from libotpgen.secret import *
from libotpgen.validator import *
from libotpgen.version import *

__version__ = VERSION_STRING
