"""Alphabets and bucket sizes of the N-Number enumeration.

US tail numbers are assigned sequentially: ``N1``, ``N1A``, ``N1AA``, ...,
``N1ZZ``, ``N10``, ``N10A``, ... up to ``N99999``. Each position of the tail
number opens a bucket holding every tail number sharing the same prefix:

- 601 = all possible suffix offsets ('', 'A', 'AA', ..., 'ZZ')
- 35 = 1 + len(charset) + 10 (empty, then one letter or digit)
- 951 = 35 * 10 + 601
- 10111 = 951 * 10 + 601
- 101711 = 10111 * 10 + 601

"""

from __future__ import annotations

import string

ICAO_SIZE = 6  # size of an icao address
NNUMBER_MAX_SIZE = 6  # max size of a N-Number

US_PREFIX = "a"  # ICAO block allocated to the USA

charset = "ABCDEFGHJKLMNPQRSTUVWXYZ"  # alphabet without I and O
digitset = string.digits
allchars = charset + digitset
hexset = string.digits + "ABCDEF"

suffix_size = 1 + len(charset) * (1 + len(charset))
bucket4_size = 1 + len(charset) + len(digitset)
bucket3_size = len(digitset) * bucket4_size + suffix_size
bucket2_size = len(digitset) * bucket3_size + suffix_size
bucket1_size = len(digitset) * bucket2_size + suffix_size

# First digit, second digit, third digit, fourth digit
factors = (bucket1_size, bucket2_size, bucket3_size, bucket4_size)

# Last valid value, i.e. N99999
MAX_VALUE = (len(digitset) - 1) * bucket1_size
